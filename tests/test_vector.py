import pytest

from miltoncore.vector import Vec2, Vec3, Vec4, lerp


def test_add_then_subtract_round_trips():
    a = Vec2(3, -7)
    b = Vec2(11, 4)
    assert (a + b) - b == a


def test_scalar_multiplication_commutes():
    v = Vec2(2.5, -4.0)
    assert 3 * v == v * 3


def test_negation_matches_scaling_by_minus_one():
    v = Vec2(6, -9)
    assert -v == v * -1


def test_perpendicular_is_orthogonal():
    v = Vec2(5, 12)
    assert v.dot(v.perpendicular()) == 0


def test_perpendicular_twice_is_negation():
    v = Vec2(4, -3)
    assert v.perpendicular().perpendicular() == -v


def test_truncated_rounds_toward_zero():
    assert Vec2(1.9, -1.9).truncated() == Vec2(1, -1)


def test_integer_division_truncates_toward_zero():
    assert Vec2(-7, 7) / 2 == Vec2(-3, 3)


def test_scalar_on_left_of_division_divides_components():
    v = Vec2(8, 4)
    assert 2 / v == v / 2


def test_float_division_round_trips():
    v = Vec2(3.0, 9.0)
    assert (v / 4.0) * 4.0 == v


def test_size_aliases():
    v = Vec2(640, 480)
    assert (v.w, v.h) == (v.x, v.y)


def test_iteration_unpacks_components():
    x, y = Vec2(1, 2)
    assert Vec2(x, y) == Vec2(1, 2)


def test_lerp_endpoints():
    a = Vec2(1.0, 2.0)
    b = Vec2(9.0, -4.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


def test_lerp_midpoint_is_symmetric():
    a = Vec2(1.0, 2.0)
    b = Vec2(9.0, -4.0)
    assert lerp(a, b, 0.5) == lerp(b, a, 0.5)


def test_lerp_on_scalars():
    assert lerp(2.0, 10.0, 0.0) == 2.0
    assert lerp(2.0, 10.0, 1.0) == 10.0


def test_vec3_color_aliases():
    c = Vec3(0.1, 0.2, 0.3)
    assert (c.r, c.g, c.b) == (c.x, c.y, c.z)
    assert (c.h, c.s, c.v) == (c.x, c.y, c.z)
    assert c.xy == Vec2(0.1, 0.2)


def test_vec4_swizzles():
    c = Vec4(1, 2, 3, 4)
    assert c.rgb == Vec3(1, 2, 3)
    assert c.xyz == c.rgb
    assert c.xy == Vec2(1, 2)
    assert c.zw == Vec2(3, 4)
    assert c.a == c.w


def test_vec4_equality():
    assert Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 4)
    assert not Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 5)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0