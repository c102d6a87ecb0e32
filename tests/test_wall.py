from wall.geometry import Point
from wall.models import EdgeSide
from wall.wall import Wall


class TestCollection:
    @staticmethod
    def test_add_fresh_name_grows_collection(wall: Wall) -> None:
        assert wall.add_monitor("B", 1280, 720, 1920, 0)
        assert len(wall) == 2
        assert wall.monitor_names() == ["A", "B"]

    @staticmethod
    def test_add_duplicate_name_is_rejected(wall: Wall) -> None:
        before = wall.monitor_specs()
        assert not wall.add_monitor("A", 800, 600, 10, 10)
        assert len(wall) == 1
        assert wall.monitor_specs() == before

    @staticmethod
    def test_add_clears_selection(wall: Wall) -> None:
        assert wall.toggle_selection("A")
        wall.add_monitor("B", 800, 600)
        assert wall.current_selection() is None

    @staticmethod
    def test_delete_unknown_is_noop(wall: Wall) -> None:
        assert not wall.delete_monitor("nope")
        assert len(wall) == 1

    @staticmethod
    def test_delete_selected_clears_selection(wall: Wall) -> None:
        wall.toggle_selection("A")
        assert wall.delete_monitor("A")
        assert wall.current_selection() is None
        assert "A" not in wall

    @staticmethod
    def test_delete_other_keeps_selection(wall: Wall) -> None:
        wall.add_monitor("B", 800, 600, 2000, 0)
        wall.toggle_selection("A")
        wall.delete_monitor("B")
        assert wall.current_selection() == "A"

    @staticmethod
    def test_update_monitor_changes_only_given_fields(wall: Wall) -> None:
        assert wall.update_monitor("A", height=720, vertical_letterbox=100)
        spec = wall.monitor("A").spec()
        assert (spec.width, spec.height, spec.vertical_letterbox, spec.horizontal_letterbox) == (1920, 720, 100, 0)
        assert not wall.update_monitor("missing", width=10)


class TestSelection:
    @staticmethod
    def test_toggle_is_its_own_inverse(wall: Wall) -> None:
        assert wall.current_selection() is None
        assert wall.toggle_selection("A") is True
        assert wall.toggle_selection("A") is False
        assert wall.current_selection() is None

    @staticmethod
    def test_toggle_unknown_name_does_nothing(wall: Wall) -> None:
        wall.toggle_selection("A")
        assert wall.toggle_selection("ghost") is False
        assert wall.current_selection() == "A"

    @staticmethod
    def test_select_at_empty_space_clears(wall: Wall) -> None:
        assert wall.select_at(Point(50, 50)) == "A"
        assert wall.select_at(Point(400, 150)) is None


class TestHitTesting:
    @staticmethod
    def test_hit_test_uses_scaled_bounding_rect(wall: Wall) -> None:
        assert wall.hit_test(Point(191, 107)).name == "A"
        assert wall.hit_test(Point(192, 50)) is None

    @staticmethod
    def test_hit_test_edge_per_side(wall: Wall) -> None:
        assert wall.hit_test_edge(Point(50, 107))[1] is EdgeSide.BOTTOM
        assert wall.hit_test_edge(Point(191, 50))[1] is EdgeSide.RIGHT
        assert wall.hit_test_edge(Point(50, 0))[1] is EdgeSide.TOP
        assert wall.hit_test_edge(Point(1, 50))[1] is EdgeSide.LEFT

    @staticmethod
    def test_corner_resolves_in_fixed_order(wall: Wall) -> None:
        # (1, 1) lies in both the top and left bands; top is checked first.
        m, side = wall.hit_test_edge(Point(1, 1))
        assert m.name == "A"
        assert side is EdgeSide.TOP

    @staticmethod
    def test_center_hits_monitor_but_no_edge(wall: Wall) -> None:
        m, side = wall.hit_test_edge(Point(96, 54))
        assert m.name == "A"
        assert side is None

    @staticmethod
    def test_miss(wall: Wall) -> None:
        assert wall.hit_test_edge(Point(300, 150)) == (None, None)


def test_round_trip_through_specs_keeps_edges() -> None:
    original = Wall()
    original.add_monitor("A", 1920, 1080, 0, 0, 40, 0)
    original.add_monitor("B", 1920, 1080, 1920, 0, 0, 240)
    original.add_monitor("C", 3840, 1080, 0, 1080)

    rebuilt = Wall.from_specs(original.monitor_specs())

    assert rebuilt.monitor_names() == original.monitor_names()
    for m in original.monitors():
        twin = rebuilt.monitor(m.name)
        for side, e in m.edges():
            assert twin.edge(side).geometry == e.geometry
