import pytest

from wall.geometry import Geometry, Point
from wall.models import BORDER_WIDTH, EdgeSide, Monitor, MonitorSpec


@pytest.fixture
def letterboxed() -> Monitor:
    return Monitor("A", 1920, 1080, 100, 50, horizontal_letterbox_bar_height=40, vertical_letterbox_bar_width=30)


def test_edge_geometry_derivation(letterboxed: Monitor) -> None:
    assert letterboxed.left.geometry == Geometry(16, 968, 130, 106)
    assert letterboxed.right.geometry == Geometry(16, 968, 1974, 106)
    assert letterboxed.top.geometry == Geometry(1860, 16, 130, 90)
    assert letterboxed.bottom.geometry == Geometry(1860, 16, 130, 1074)


def test_bounding_rect_excludes_letterbox(letterboxed: Monitor) -> None:
    assert letterboxed.bounding_rect() == Geometry(1860, 1000, 130, 90)


def test_border_thickness_is_constant(letterboxed: Monitor) -> None:
    assert letterboxed.left.geometry.width == letterboxed.right.geometry.width == BORDER_WIDTH
    assert letterboxed.top.geometry.height == letterboxed.bottom.geometry.height == BORDER_WIDTH


def test_edges_leave_visible_center_untouched(letterboxed: Monitor) -> None:
    b = BORDER_WIDTH
    center = letterboxed.bounding_rect().adjusted(b, b, -b, -b)
    for _side, e in letterboxed.edges():
        assert not e.geometry.intersects(center)


def test_update_geometry_is_idempotent(letterboxed: Monitor) -> None:
    before = [e.geometry for _s, e in letterboxed.edges()]
    letterboxed.update_geometry()
    letterboxed.update_geometry()
    assert [e.geometry for _s, e in letterboxed.edges()] == before


def test_setters_rederive_edges() -> None:
    m = Monitor("A", 1920, 1080)
    m.set_resolution(1280, 720)
    assert m.bottom.geometry == Geometry(1280, 16, 0, 704)

    m.set_letterbox(10, 20)
    assert m.top.geometry == Geometry(1240, 16, 20, 10)
    assert m.left.geometry == Geometry(16, 720 - 32 - 20, 20, 26)


def test_edges_iterate_in_hit_test_order() -> None:
    m = Monitor("A", 100, 100)
    assert [s for s, _e in m.edges()] == [EdgeSide.BOTTOM, EdgeSide.RIGHT, EdgeSide.TOP, EdgeSide.LEFT]
    assert m.edge(EdgeSide.RIGHT) is m.right


def test_edge_rejects_non_side() -> None:
    m = Monitor("A", 100, 100)
    with pytest.raises(TypeError):
        m.edge(4)  # type: ignore[arg-type]


def test_set_position_moves_bounding_top_left(letterboxed: Monitor) -> None:
    letterboxed.set_position(Point(500, 400))
    assert letterboxed.bounding_rect().top_left == Point(500, 400)
    assert (letterboxed.x_offset, letterboxed.y_offset) == (470, 360)
    # Relative layout of the edges is unchanged.
    assert letterboxed.right.geometry.left - letterboxed.left.geometry.left == 1844


def test_visible_area_never_leaves_the_wall() -> None:
    m = Monitor("A", 100, 100, 10, 10)
    m.move(Point(-50, -5))
    assert (m.x_offset, m.y_offset) == (0, 5)


def test_letterboxed_monitor_can_sit_at_origin() -> None:
    m = Monitor("L", 1920, 1080, 500, 500, 60, 100)

    m.set_position(Point(0, 0))

    assert m.bounding_rect().top_left == Point(0, 0)
    assert (m.x_offset, m.y_offset) == (-100, -60)
    assert m.left.geometry.left == 0
    assert m.top.geometry.top == 0

    m.set_position(Point(-30, -30))
    assert m.bounding_rect().top_left == Point(0, 0)


def test_bounding_rect_keeps_minimum_size_at_unit_scale() -> None:
    # Letterbox bars eat the whole width: the visible area degenerates.
    m = Monitor("N", 100, 100, 0, 0, 0, 50)
    assert m.bounding_rect().width == 2
    assert m.bounding_rect(1.0) == m.bounding_rect()


def test_spec_round_trip(letterboxed: Monitor) -> None:
    spec = letterboxed.spec()
    assert spec == MonitorSpec("A", 1920, 1080, 100, 50, 40, 30)
    clone = Monitor.from_spec(spec)
    assert [e.geometry for _s, e in clone.edges()] == [e.geometry for _s, e in letterboxed.edges()]
