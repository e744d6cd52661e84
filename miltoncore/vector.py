"""Small two-, three- and four-component vectors."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Union

Number = Union[int, float]


def _div(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    return a / b


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of ints or floats."""

    x: Number = 0
    y: Number = 0

    @property
    def w(self) -> Number:
        return self.x

    @property
    def h(self) -> Number:
        return self.y

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, factor: Number) -> Vec2:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Vec2:
        if not isinstance(divisor, Real):
            return NotImplemented
        return Vec2(_div(self.x, divisor), _div(self.y, divisor))

    # A scalar on the left divides the components by that scalar as well.
    __rtruediv__ = __truediv__

    def dot(self, other: Vec2) -> Number:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def perpendicular(self) -> Vec2:
        """The vector rotated a quarter turn: (-y, x)."""
        return Vec2(-self.y, self.x)

    def truncated(self) -> Vec2:
        """Components converted to integers, truncating toward zero."""
        return Vec2(int(self.x), int(self.y))


@dataclass(frozen=True)
class Vec3:
    """A 3D vector, also usable as an RGB or HSV triple."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    r = property(lambda self: self.x)
    g = property(lambda self: self.y)
    b = property(lambda self: self.z)
    h = property(lambda self: self.x)
    s = property(lambda self: self.y)
    v = property(lambda self: self.z)

    @property
    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True)
class Vec4:
    """A 4D vector, also usable as an RGBA quadruple."""

    x: Number = 0
    y: Number = 0
    z: Number = 0
    w: Number = 0

    r = property(lambda self: self.x)
    g = property(lambda self: self.y)
    b = property(lambda self: self.z)
    a = property(lambda self: self.w)

    @property
    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @property
    def rgb(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @property
    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def zw(self) -> Vec2:
        return Vec2(self.z, self.w)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def lerp(a, b, t: float):
    """Linear interpolation from a (t=0) to b (t=1)."""
    return b * t + a * (1.0 - t)