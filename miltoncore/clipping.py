"""Decisions the renderer makes when picking which strokes to draw."""

from __future__ import annotations

import math
from typing import List, Tuple

from miltoncore.geometry import Rect

# A stroke this many screens away from the view loses its GPU data.
MIN_NUMBER_OF_SCREENS = 4

Mat2 = Tuple[float, float, float, float]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def is_outside(screen_bounds: Rect, bounds: Rect) -> bool:
    """True when bounds lies entirely outside screen_bounds (edges touching count as inside)."""
    return (
        screen_bounds.left > bounds.right
        or screen_bounds.top > bounds.bottom
        or screen_bounds.right < bounds.left
        or screen_bounds.bottom < bounds.top
    )


def is_far_from_view(bounds: Rect, x: int, y: int, w: int, h: int) -> bool:
    """True when bounds reaches beyond several screens around the view x, y, w, h."""
    n = MIN_NUMBER_OF_SCREENS
    return (
        bounds.top < y - n * h
        or bounds.bottom > y + h + n * h
        or bounds.left > x + w + n * w
        or bounds.right < x - n * w
    )


def bucket_counts(total: int, bucket_size: int) -> List[int]:
    """Number of strokes held by each successive bucket of a stroke list.

    The list covers every bucket up to the one in which the strokes end; when
    total is a multiple of bucket_size that last bucket holds zero strokes.
    """
    if bucket_size <= 0:
        raise ValueError(f"bucket size must be positive: {bucket_size}")
    if total < 0:
        raise ValueError(f"stroke count must not be negative: {total}")
    counts: List[int] = []
    bucket_i = 0
    while total >= bucket_i * bucket_size:
        remaining = total - bucket_i * bucket_size
        counts.append(bucket_size if remaining >= bucket_size else total % bucket_size)
        bucket_i += 1
    return counts


def rotation_matrices(angle: float) -> Tuple[Mat2, Mat2]:
    """Column-major 2x2 rotation matrix for angle and its inverse."""
    cos_angle = math.cos(angle)
    sin_angle = math.sin(angle)
    matrix = (cos_angle, sin_angle, -sin_angle, cos_angle)
    inverse = (cos_angle, -sin_angle, sin_angle, cos_angle)
    return matrix, inverse


def blur_kernel_size(kernel_size: int, original_scale: int, scale: int) -> int:
    """Blur kernel size adjusted from the zoom it was set at to the current zoom."""
    if scale == 0:
        raise ValueError("scale must not be zero")
    return _cdiv(kernel_size * original_scale, scale)