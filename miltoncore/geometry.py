"""Rectangles, segment math and small helpers for canvas geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from miltoncore.vector import Vec2

KPI = 3.14152654
I64_MAX = 9223372036854775807
I64_MIN = -9223372036854775807

_U64_MASK = (1 << 64) - 1


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are exclusive for containment."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.left, self.top)

    @property
    def bot_right(self) -> Vec2:
        return Vec2(self.right, self.bottom)

    @classmethod
    def from_xywh(cls, x: int, y: int, w: int, h: int) -> Rect:
        return cls(left=x, top=y, right=x + w, bottom=y + h)

    @classmethod
    def without_size(cls) -> Rect:
        """A rectangle R such that R.union(B) == B for any valid B."""
        return cls(left=I64_MAX, top=I64_MAX, right=I64_MIN, bottom=I64_MIN)

    @classmethod
    def bounding(cls, points: Iterable[Vec2]) -> Rect:
        """The smallest rectangle holding every point (inclusive corners)."""
        points = list(points)
        if not points:
            raise ValueError("cannot bound an empty set of points")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(left=min(xs), top=min(ys), right=max(xs), bottom=max(ys))

    def split(self, width: int, height: int) -> list[Rect]:
        """Tile the rectangle into blocks of at most width x height."""
        if width <= 0 or height <= 0:
            raise ValueError("block dimensions must be positive")
        n_width = _cdiv(self.right - self.left, width)
        n_height = _cdiv(self.bottom - self.top, height)
        if not n_width or not n_height:
            return []
        return [
            Rect(
                left=w,
                top=h,
                right=min(self.right, w + width),
                bottom=min(self.bottom, h + height),
            )
            for h in range(self.top, self.bottom, height)
            for w in range(self.left, self.right, width)
        ]

    def union(self, other: Rect) -> Rect:
        left = min(self.left, other.left)
        right = max(self.right, other.right)
        if left > right:
            left = right
        top = min(self.top, other.top)
        bottom = max(self.bottom, other.bottom)
        if bottom < top:
            bottom = top
        return Rect(left, top, right, bottom)

    def intersect(self, other: Rect) -> Rect:
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        if left >= right:
            left = right
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        if bottom <= top:
            bottom = top
        return Rect(left, top, right, bottom)

    def intersects(self, other: Rect) -> bool:
        return not (
            self.left > other.right
            or other.left > self.right
            or self.top > other.bottom
            or other.top > self.bottom
        )

    def stretch(self, width: int) -> Rect:
        """Grow each dimension narrower than width by width/2 on both sides."""
        left, top, right, bottom = self.left, self.top, self.right, self.bottom
        half = _cdiv(width, 2)
        if bottom - top < width:
            top -= half
            bottom += half
        if right - left < width:
            left -= half
            right += half
        return Rect(left, top, right, bottom)

    def clip_to_screen(self, screen_size: Vec2) -> Rect:
        return Rect(
            left=max(self.left, 0),
            top=max(self.top, 0),
            right=min(self.right, screen_size.w),
            bottom=min(self.bottom, screen_size.h),
        )

    def enlarge(self, offset: int) -> Rect:
        return Rect(
            self.left - offset,
            self.top - offset,
            self.right + offset,
            self.bottom + offset,
        )

    def is_valid(self) -> bool:
        return self.left <= self.right and self.top <= self.bottom

    def area(self) -> int:
        return (self.right - self.left) * (self.bottom - self.top)

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def is_within(self, other: Rect) -> bool:
        return not (
            self.left < other.left
            or self.right > other.right
            or self.top < other.top
            or self.bottom > other.bottom
        )


@dataclass(frozen=True)
class WallTime:
    """A time of day split into hours, minutes, seconds and milliseconds."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0


def magnitude(v: Vec2) -> float:
    return math.sqrt(v.dot(v))


def distance(a: Vec2, b: Vec2) -> float:
    return magnitude(a - b)


def manhattan_distance(a: Vec2, b: Vec2) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def degrees_to_radians(d: int) -> float:
    if not 0 <= d < 360:
        raise ValueError(f"degrees out of range [0, 360): {d}")
    return KPI * (d / 180.0)


def radians_to_degrees(r: float) -> float:
    return (180 * r) / KPI


def norm(v: Vec2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalized(v: Vec2) -> Vec2:
    return v / norm(v)


def clamp(value, low, high):
    return min(max(value, low), high)


def orientation(a: Vec2, b: Vec2, c: Vec2) -> float:
    """Twice the signed area of abc; positive when c is left of ab."""
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def is_inside_triangle(point: Vec2, a: Vec2, b: Vec2, c: Vec2) -> bool:
    return (
        orientation(a, b, point) <= 0
        and orientation(b, c, point) <= 0
        and orientation(c, a, point) <= 0
    )


def polar_to_cartesian(angle: float, radius: float) -> Vec2:
    return Vec2(radius * math.cos(angle), radius * math.sin(angle))


def rotate_v2i(p: Vec2, angle: float) -> Vec2:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Vec2(int(p.x * cos_a - p.y * sin_a), int(p.x * sin_a + p.y * cos_a))


def _project_on_segment(a: Vec2, b: Vec2, point: Vec2) -> Tuple[float, float, float, float]:
    ab = Vec2(float(b.x - a.x), float(b.y - a.y))
    mag_ab = math.sqrt(ab.dot(ab))
    if mag_ab == 0:
        raise ValueError("segment has zero length")
    d_x = ab.x / mag_ab
    d_y = ab.y / mag_ab
    disc = d_x * (point.x - a.x) + d_y * (point.y - a.y)
    disc = clamp(disc, 0.0, mag_ab)
    return disc, d_x, d_y, disc / mag_ab


def closest_point_in_segment(a: Vec2, b: Vec2, point: Vec2) -> Tuple[Vec2, float]:
    """Closest integer point on segment ab to point, and its parameter t."""
    disc, d_x, d_y, t = _project_on_segment(a, b, point)
    return Vec2(int(a.x + disc * d_x), int(a.y + disc * d_y)), t


def closest_point_in_segment_f(a: Vec2, b: Vec2, point: Vec2) -> Tuple[Vec2, float]:
    """Closest point on segment ab to point, and its parameter t."""
    disc, d_x, d_y, t = _project_on_segment(a, b, point)
    return Vec2(a.x + disc * d_x, a.y + disc * d_y), t


def intersect_line_segments(a: Vec2, b: Vec2, u: Vec2, v: Vec2) -> Optional[Vec2]:
    """Intersection of segment ab with the line through uv, or None."""
    perp = (v - u).perpendicular()
    det = (b - a).dot(perp)
    if det == 0:
        return None
    t = (u - a).dot(perp) / det
    if 1 < t < 1.001:
        t = 1.0
    if -0.001 < t < 0:
        t = 1.0
    if 0 <= t <= 1:
        return Vec2(a.x + t * (b.x - a.x), a.y + t * (b.y - a.y))
    return None


def trim_to_last_slash(path: str) -> str:
    """The part of path after its last forward or back slash."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


def ascii_only(text: str) -> str:
    """Drop every character above code point 128."""
    return "".join(ch for ch in text if ord(ch) <= 128)


def string_hash(data: Union[str, bytes]) -> int:
    """A 64-bit shift-add-xor hash of the bytes of data."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = 0
    for byte in data:
        signed = byte - 256 if byte > 127 else byte
        h = (h + signed) & _U64_MASK
        h ^= (h << 10) & _U64_MASK
        h = (h + (h >> 5)) & _U64_MASK
    return h


def difference_in_ms(start: WallTime, end: WallTime) -> int:
    """Milliseconds from start to end, as an unsigned 64-bit value."""
    diff = end.milliseconds - start.milliseconds
    if end.seconds > start.seconds:
        diff += 1000 * (end.seconds - start.seconds)
    if end.minutes > start.minutes:
        diff += 1000 * 60 * (end.minutes - start.seconds)
    if end.hours > start.hours:
        diff += 1000 * 60 * 60 * (end.hours - start.hours)
    return diff & _U64_MASK