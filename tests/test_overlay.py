import pytest

from miltoncore.geometry import Rect
from miltoncore.overlay import (
    BRUSH_OUTLINE_GIRTH,
    EXPORTER_LINE_PIXELS,
    brush_outline_vertices,
    exporter_rect_vertices,
    outline_indices,
    picker_quad,
    rect_outline_vertices,
)
from miltoncore.vector import Vec2


def test_outline_indices_match_quads():
    assert outline_indices() == [
        0, 1, 2, 2, 3, 0,
        4, 5, 6, 6, 7, 4,
        8, 9, 10, 10, 11, 8,
        12, 13, 14, 14, 15, 12,
    ]


def test_outline_indices_is_a_fresh_list():
    first = outline_indices()
    first.append(99)
    assert len(outline_indices()) == 24


def test_rect_outline_has_sixteen_vertices_in_range_of_indices():
    verts = rect_outline_vertices(-0.5, 0.5, 0.5, -0.5, 2.0, 800, 600)
    assert len(verts) == 16
    assert max(outline_indices()) == len(verts) - 1


def test_rect_outline_thickness_uses_screen_axes():
    width, height, line = 800, 600, 3.0
    verts = rect_outline_vertices(-0.5, 0.5, 0.5, -0.5, line, width, height)
    top_ys = {v[1] for v in verts[0:4]}
    left_xs = {v[0] for v in verts[8:12]}
    assert max(top_ys) - min(top_ys) == pytest.approx(2 * line / height)
    assert max(left_xs) - min(left_xs) == pytest.approx(2 * line / width)


def test_rect_outline_quads_span_rectangle():
    verts = rect_outline_vertices(-0.25, 0.75, 0.5, -0.5, 1.0, 100, 100)
    top_xs = sorted({v[0] for v in verts[0:4]})
    right_ys = sorted({v[1] for v in verts[12:16]})
    assert top_xs == [-0.25, 0.75]
    assert right_ys == [-0.5, 0.5]


def test_exporter_full_screen_centered_on_edges():
    width, height = 640, 480
    verts = exporter_rect_vertices(Vec2(0, 0), Vec2(width, height), width, height)
    top_ys = [v[1] for v in verts[0:4]]
    bottom_ys = [v[1] for v in verts[4:8]]
    left_xs = [v[0] for v in verts[8:12]]
    right_xs = [v[0] for v in verts[12:16]]
    assert sum(top_ys) / 4 == pytest.approx(1.0)
    assert sum(bottom_ys) / 4 == pytest.approx(-1.0)
    assert sum(left_xs) / 4 == pytest.approx(-1.0)
    assert sum(right_xs) / 4 == pytest.approx(1.0)


def test_exporter_line_thickness_from_height():
    width, height = 640, 480
    verts = exporter_rect_vertices(Vec2(10, 20), Vec2(300, 200), width, height)
    top_ys = [v[1] for v in verts[0:4]]
    left_xs = [v[0] for v in verts[8:12]]
    expected = EXPORTER_LINE_PIXELS / height
    assert max(top_ys) - min(top_ys) == pytest.approx(expected)
    assert max(left_xs) - min(left_xs) == pytest.approx(expected)


def test_exporter_order_of_corners_does_not_matter():
    a = exporter_rect_vertices(Vec2(10, 200), Vec2(300, 20), 640, 480)
    b = exporter_rect_vertices(Vec2(300, 20), Vec2(10, 200), 640, 480)
    c = exporter_rect_vertices(Vec2(10, 20), Vec2(300, 200), 640, 480)
    assert a == b == c


def test_brush_outline_symmetric_at_center():
    positions, sizes = brush_outline_vertices(400, 300, 10, 800, 600)
    xs = [p[0] for p in positions]
    ys = [p[1] for p in positions]
    assert min(xs) == pytest.approx(-max(xs))
    assert min(ys) == pytest.approx(-max(ys))


def test_brush_outline_sizes_include_girth():
    radius = 10
    _, sizes = brush_outline_vertices(100, 100, radius, 800, 600)
    extent = radius + BRUSH_OUTLINE_GIRTH
    assert sizes == [(-extent, -extent), (-extent, extent), (extent, extent), (extent, -extent)]


def test_brush_outline_quad_width_matches_extent():
    width = 800
    radius = 20
    positions, _ = brush_outline_vertices(200, 150, radius, width, 600)
    xs = [p[0] for p in positions]
    pixel_width = (max(xs) - min(xs)) / 2 * width
    assert pixel_width == pytest.approx(2 * (radius + BRUSH_OUTLINE_GIRTH))


def test_picker_full_screen_covers_clip_space():
    positions, _ = picker_quad(Rect(0, 0, 800, 600), 800, 600)
    assert positions == [(-1.0, 1.0), (-1.0, -1.0), (1.0, -1.0), (1.0, 1.0)]


def test_picker_norm_for_square_rect():
    _, norm = picker_quad(Rect(10, 10, 110, 110), 800, 600)
    assert norm == [(-1.0, -1.0), (-1.0, 1.0), (1.0, 1.0), (1.0, -1.0)]


def test_picker_norm_ratio_follows_aspect():
    _, wide = picker_quad(Rect(0, 0, 200, 100), 800, 600)
    _, tall = picker_quad(Rect(0, 0, 100, 200), 800, 600)
    assert wide[1][1] < tall[1][1]
    assert wide[1][1] == wide[2][1]


@pytest.mark.parametrize(
    "call",
    [
        lambda: rect_outline_vertices(0, 1, 1, 0, 1.0, 0, 100),
        lambda: exporter_rect_vertices(Vec2(0, 0), Vec2(1, 1), 100, 0),
        lambda: brush_outline_vertices(1, 1, 1, 0, 0),
        lambda: picker_quad(Rect(0, 0, 10, 10), 0, 10),
        lambda: picker_quad(Rect(5, 0, 5, 10), 100, 100),
    ],
)
def test_invalid_dimensions_raise(call):
    with pytest.raises(ValueError):
        call()