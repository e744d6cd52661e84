"""Reading the rendered canvas back: framebuffer checks, row flipping and export views."""

from __future__ import annotations

import enum
import math
from typing import List, Optional, Sequence, TypeVar

from miltoncore.vector import Vec2

T = TypeVar("T")


class FramebufferStatus(enum.IntEnum):
    """Completeness states a framebuffer can report."""

    COMPLETE = 0x8CD5
    INCOMPLETE_ATTACHMENT = 0x8CD6
    INCOMPLETE_MISSING_ATTACHMENT = 0x8CD7
    INCOMPLETE_DRAW_BUFFER = 0x8CDB
    INCOMPLETE_READ_BUFFER = 0x8CDC
    UNSUPPORTED = 0x8CDD
    INCOMPLETE_MULTISAMPLE = 0x8D56


_STATUS_MESSAGES = {
    FramebufferStatus.INCOMPLETE_ATTACHMENT: "Incomplete Attachment",
    FramebufferStatus.INCOMPLETE_MISSING_ATTACHMENT: "Missing Attachment",
    FramebufferStatus.INCOMPLETE_DRAW_BUFFER: "Incomplete Draw Buffer",
    FramebufferStatus.INCOMPLETE_READ_BUFFER: "Incomplete Read Buffer",
    FramebufferStatus.UNSUPPORTED: "Unsupported Framebuffer",
    FramebufferStatus.INCOMPLETE_MULTISAMPLE: "Incomplete Multisample",
}


def framebuffer_status_message(status: int) -> Optional[str]:
    """A description of what is wrong with a framebuffer, or None when it is complete."""
    if status == FramebufferStatus.COMPLETE:
        return None
    try:
        return _STATUS_MESSAGES[FramebufferStatus(status)]
    except (ValueError, KeyError):
        return "Unknown"


def flip_rows(pixels: Sequence[T], width: int, height: int) -> List[T]:
    """The pixels of a width x height image with its rows in reverse order."""
    if width < 0 or height < 0:
        raise ValueError(f"image dimensions must not be negative: {width}x{height}")
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels for {width}x{height}, got {len(pixels)}"
        )
    rows = [pixels[start:start + width] for start in range(0, width * height, width)] if width else []
    flipped: List[T] = []
    for row in reversed(rows):
        flipped.extend(row)
    return flipped


def _half(value: int) -> int:
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def export_pan_offset(
    x: int, y: int, w: int, h: int, screen_size: Vec2, angle: float, scale: int
) -> Vec2:
    """How far the pan center moves so the export region x, y, w, h is centered.

    The offset is the screen-space distance from the screen center to the
    region center, rotated by the view angle and multiplied by the view scale.
    """
    center = Vec2(_half(screen_size.x), _half(screen_size.y))
    delta = Vec2(x + _half(w), y + _half(h)) - center
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    rotated_x = delta.x * cos_angle - delta.y * sin_angle
    rotated_y = delta.y * cos_angle + delta.x * sin_angle
    return Vec2(int(rotated_x) * scale, int(rotated_y) * scale)


def export_scale(view_scale: int, scale: int) -> int:
    """The view scale to render at when exporting at scale times the resolution."""
    if scale > 1:
        return int(math.ceil(view_scale / scale))
    return view_scale