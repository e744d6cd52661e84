"""Clip-space geometry for the overlays drawn on top of the canvas."""

from __future__ import annotations

from typing import List, Tuple

from miltoncore.geometry import Rect
from miltoncore.vector import Vec2

Point = Tuple[float, float]

# Width of the ring drawn around the brush; matches the outline shader.
BRUSH_OUTLINE_GIRTH = 4.0
# Thickness, in pixels, of the exporter rectangle's outline.
EXPORTER_LINE_PIXELS = 2.0

_OUTLINE_INDICES = (
    # top
    0, 1, 2,
    2, 3, 0,
    # bottom
    4, 5, 6,
    6, 7, 4,
    # left
    8, 9, 10,
    10, 11, 8,
    # right
    12, 13, 14,
    14, 15, 12,
)


def _check_screen(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"screen dimensions must be positive: {width}x{height}")


def _frame_quads(
    left: float,
    right: float,
    top: float,
    bottom: float,
    half_x: float,
    half_y: float,
) -> List[Point]:
    """Four thin quads (top, bottom, left, right) framing a rectangle."""
    return [
        # Top quad
        (left, top - half_y),
        (left, top + half_y),
        (right, top + half_y),
        (right, top - half_y),
        # Bottom quad
        (left, bottom - half_y),
        (left, bottom + half_y),
        (right, bottom + half_y),
        (right, bottom - half_y),
        # Left
        (left - half_x, top),
        (left - half_x, bottom),
        (left + half_x, bottom),
        (left + half_x, top),
        # Right
        (right - half_x, top),
        (right - half_x, bottom),
        (right + half_x, bottom),
        (right + half_x, top),
    ]


def outline_indices() -> List[int]:
    """Triangle indices for the four quads of a rectangle outline."""
    return list(_OUTLINE_INDICES)


def rect_outline_vertices(
    left: float,
    right: float,
    top: float,
    bottom: float,
    line_width: float,
    width: int,
    height: int,
) -> List[Point]:
    """Vertices outlining a clip-space rectangle with lines line_width pixels thick."""
    _check_screen(width, height)
    return _frame_quads(
        left, right, top, bottom, line_width / width, line_width / height
    )


def exporter_rect_vertices(pivot: Vec2, needle: Vec2, width: int, height: int) -> List[Point]:
    """Vertices outlining the export selection spanned by two screen points."""
    _check_screen(width, height)
    x = min(pivot.x, needle.x)
    y = min(pivot.y, needle.y)
    w = abs(pivot.x - needle.x)
    h = abs(pivot.y - needle.y)

    left = 2 * (x / width) - 1
    right = 2 * ((x + w) / width) - 1
    top = -(2 * (y / height) - 1)
    bottom = -(2 * ((y + h) / height) - 1)

    half = (EXPORTER_LINE_PIXELS / height) / 2
    return _frame_quads(left, right, top, bottom, half, half)


def brush_outline_vertices(
    cx: int, cy: int, radius: int, width: int, height: int
) -> Tuple[List[Point], List[Point]]:
    """Clip-space quad around the brush and per-vertex pixel offsets from its center."""
    _check_screen(width, height)
    extent = radius + BRUSH_OUTLINE_GIRTH

    def to_clip(px: float, py: float) -> Point:
        return 2 * (px / width) - 1, -2 * (py / height) + 1

    positions = [
        to_clip(cx - extent, cy - extent),
        to_clip(cx - extent, cy + extent),
        to_clip(cx + extent, cy + extent),
        to_clip(cx + extent, cy - extent),
    ]
    sizes = [
        (-extent, -extent),
        (-extent, extent),
        (extent, extent),
        (extent, -extent),
    ]
    return positions, sizes


def picker_quad(rect: Rect, width: int, height: int) -> Tuple[List[Point], List[Point]]:
    """Clip-space quad covering the picker and its normalized coordinates."""
    _check_screen(width, height)
    if rect.right == rect.left:
        raise ValueError("picker rectangle has zero width")

    top = -((rect.top / height) * 2.0 - 1.0)
    bottom = -((rect.bottom / height) * 2.0 - 1.0)
    left = (rect.left / width) * 2.0 - 1.0
    right = (rect.right / width) * 2.0 - 1.0

    positions = [
        (left, top),
        (left, bottom),
        (right, bottom),
        (right, top),
    ]

    ratio = (rect.bottom - rect.top) / (rect.right - rect.left)
    ratio = ratio * 2 - 1
    norm = [
        (-1.0, -1.0),
        (-1.0, ratio),
        (1.0, ratio),
        (1.0, -1.0),
    ]
    return positions, norm