from __future__ import annotations

from ui.layout.interaction import WallInteractor
from wall.geometry import Geometry, Point
from wall.models import EdgeSide, WallEdgeClass
from wall.modes import ModeStepper
from wall.wall import Wall


class Harness:
    def __init__(self, wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
        self.reasons: list[str] = []
        self.interactor = WallInteractor(
            wall=wall,
            modes=modes,
            master_rect=lambda: canvas,
            on_change=self.reasons.append,
        )

    def click(self, pos: Point) -> bool:
        self.interactor.on_mouse_press(pos)
        return self.interactor.on_mouse_release(pos)

    def drag(self, start: Point, end: Point) -> bool:
        self.interactor.on_mouse_press(start)
        moved = self.interactor.on_mouse_move(end)
        self.interactor.on_mouse_release(end)
        return moved


def test_click_toggles_monitor_selection(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    h = Harness(wall, modes, canvas)

    assert h.click(Point(50, 50))
    assert wall.current_selection() == "A"
    assert h.click(Point(50, 50))
    assert wall.current_selection() is None
    assert h.reasons == ["click", "click"]


def test_click_on_empty_space_clears_selection(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    h = Harness(wall, modes, canvas)
    wall.toggle_selection("A")

    assert h.click(Point(400, 150))
    assert wall.current_selection() is None
    # Nothing left to clear: no change reported.
    assert not h.click(Point(400, 150))


def test_drag_snaps_and_keeps_grab_offset(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    h = Harness(wall, modes, canvas)

    assert h.drag(Point(50, 50), Point(350, 150))

    # Grab offset (50, 50) puts the top-left at display (300, 100) = wall (3000, 1000),
    # whose bottom then snaps onto the 2160 px frame.
    assert wall.monitor("A").bounding_rect().top_left == Point(3000, 1080)
    assert wall.current_selection() is None
    assert h.reasons == ["drag", "release"]


def test_drag_from_empty_space_moves_nothing(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    h = Harness(wall, modes, canvas)
    assert not h.drag(Point(400, 150), Point(100, 100))
    assert wall.monitor("A").bounding_rect().top_left == Point(0, 0)


def test_border_mode_click_classifies(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    modes.advance()
    h = Harness(wall, modes, canvas)

    assert h.click(Point(50, 107))
    assert wall.edge_class("A", EdgeSide.BOTTOM) is WallEdgeClass.BOTTOM

    modes.advance()
    assert h.click(Point(50, 107))
    assert wall.edge_class("A", EdgeSide.BOTTOM) is WallEdgeClass.RIGHT


def test_border_mode_ignores_drag(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    modes.advance()
    h = Harness(wall, modes, canvas)

    assert not h.drag(Point(50, 50), Point(300, 100))
    assert wall.monitor("A").bounding_rect().top_left == Point(0, 0)
    assert wall.current_selection() is None


def test_release_without_press_is_ignored(wall: Wall, modes: ModeStepper, canvas: Geometry) -> None:
    h = Harness(wall, modes, canvas)
    assert not h.interactor.on_mouse_release(Point(50, 50))
    assert not h.interactor.on_mouse_move(Point(60, 60))
    assert h.reasons == []
