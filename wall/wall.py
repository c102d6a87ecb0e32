"""The video wall: the set of monitors being laid out and their border classification.

`Wall` is the only owner of its monitors, the current selection and the border
classification. Every mutation goes through its methods so that:
- monitor names stay unique,
- edge geometry stays consistent with monitor parameters,
- no selection or classification entry ever refers to a deleted monitor.

Stale names are tolerated: operations on a name that no longer resolves are no-ops
that report False/None instead of raising.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from wall.classification import BorderClassification
from wall.geometry import Geometry, Point
from wall.models import BORDER_WIDTH, EdgeRef, EdgeSide, EdgeSnapshot, Monitor, MonitorSpec, WallEdgeClass
from wall.snapping import SnapConfig, snap_geometry

logger = logging.getLogger(__name__)

# Default display reduction: one display pixel per ten wall pixels.
DEFAULT_SCALE = 1.0 / 10.0


class Wall:
    """
    Monitor collection plus the spatial queries and mutations the layout editor needs.

    Points passed to hit-testing and snapping are in display coordinates, i.e. wall
    pixels multiplied by `scale`.
    """

    def __init__(
        self,
        *,
        scale: float = DEFAULT_SCALE,
        border_width: int = BORDER_WIDTH,
        snap: SnapConfig = SnapConfig(),
    ) -> None:
        if scale <= 0:
            raise ValueError("scale must be > 0")
        self._scale = float(scale)
        self._border_width = int(border_width)
        self._snap = snap

        # Insertion-ordered; dicts keep order and give O(1) lookup by name.
        self._monitors: Dict[str, Monitor] = {}
        self._selected: Optional[str] = None
        self._classification = BorderClassification()

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[MonitorSpec],
        *,
        scale: float = DEFAULT_SCALE,
        border_width: int = BORDER_WIDTH,
        snap: SnapConfig = SnapConfig(),
    ) -> Wall:
        wall = cls(scale=scale, border_width=border_width, snap=snap)
        for s in specs:
            wall.add_monitor(
                s.name,
                s.width,
                s.height,
                s.x_offset,
                s.y_offset,
                s.horizontal_letterbox,
                s.vertical_letterbox,
            )
        return wall

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def border_width(self) -> int:
        return self._border_width

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def monitors(self) -> Iterator[Monitor]:
        return iter(list(self._monitors.values()))

    def monitor(self, name: str) -> Optional[Monitor]:
        return self._monitors.get(name)

    def monitor_names(self) -> List[str]:
        return list(self._monitors)

    def monitor_specs(self) -> List[MonitorSpec]:
        return [m.spec() for m in self._monitors.values()]

    def current_selection(self) -> Optional[str]:
        return self._selected

    def __len__(self) -> int:
        return len(self._monitors)

    def __contains__(self, name: object) -> bool:
        return name in self._monitors

    # ------------------------------------------------------------------
    # Spatial queries
    # ------------------------------------------------------------------

    def hit_test(self, pos: Point) -> Optional[Monitor]:
        """Return the first monitor whose scaled bounding rectangle contains `pos`."""
        for m in self._monitors.values():
            if m.bounding_rect(self._scale).contains(pos):
                return m
        return None

    def hit_test_edge(self, pos: Point) -> Tuple[Optional[Monitor], Optional[EdgeSide]]:
        """
        Return (monitor, side) under `pos`.

        The monitor is the first one (collection order) whose bounding rectangle
        contains the point; the side is the first of its edges, in bottom/right/
        top/left order, whose scaled rectangle contains it. Inside a monitor but
        off its border bands gives (monitor, None); outside every monitor gives
        (None, None).
        """
        m = self.hit_test(pos)
        if m is None:
            return None, None
        for side, e in m.edges():
            if e.scaled_rect(self._scale).contains(pos):
                return m, side
        return m, None

    # ------------------------------------------------------------------
    # Monitor collection
    # ------------------------------------------------------------------

    def add_monitor(
        self,
        name: str,
        width: int,
        height: int,
        x_offset: int = 0,
        y_offset: int = 0,
        horizontal_letterbox: int = 0,
        vertical_letterbox: int = 0,
    ) -> bool:
        """
        Add a monitor. Returns False (and changes nothing) if `name` is taken.

        A successful add clears the current selection; the new monitor is not
        selected automatically.
        """
        if name in self._monitors:
            logger.warning("Monitor name %r already exists; not added", name)
            return False

        self._monitors[name] = Monitor(
            name,
            width,
            height,
            x_offset,
            y_offset,
            horizontal_letterbox,
            vertical_letterbox,
            border_width=self._border_width,
        )
        self._selected = None
        logger.debug("Added monitor %r (%dx%d+%d+%d)", name, width, height, x_offset, y_offset)
        return True

    def delete_monitor(self, name: str) -> bool:
        """
        Remove monitor `name` and every classification entry of its edges.

        The selection is cleared when it pointed at the deleted monitor and left
        alone otherwise. Unknown names are a no-op returning False.
        """
        m = self._monitors.pop(name, None)
        if m is None:
            return False

        if self._selected == name:
            self._selected = None
        removed = self._classification.discard_monitor(name)
        logger.debug("Deleted monitor %r (%d classified edges dropped)", name, removed)
        return True

    def update_monitor(
        self,
        name: str,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        x_offset: Optional[int] = None,
        y_offset: Optional[int] = None,
        horizontal_letterbox: Optional[int] = None,
        vertical_letterbox: Optional[int] = None,
    ) -> bool:
        """Change any subset of a monitor's parameters. False if `name` is unknown."""
        m = self._monitors.get(name)
        if m is None:
            return False

        if width is not None or height is not None:
            m.set_resolution(
                m.width if width is None else width,
                m.height if height is None else height,
            )
        if x_offset is not None or y_offset is not None:
            m.set_offset(
                m.x_offset if x_offset is None else x_offset,
                m.y_offset if y_offset is None else y_offset,
            )
        if horizontal_letterbox is not None or vertical_letterbox is not None:
            m.set_letterbox(
                m.horizontal_letterbox_bar_height if horizontal_letterbox is None else horizontal_letterbox,
                m.vertical_letterbox_bar_width if vertical_letterbox is None else vertical_letterbox,
            )
        return True

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle_selection(self, name: str) -> bool:
        """
        Toggle the selection of monitor `name`.

        Returns True when `name` is selected afterwards, False when the call
        deselected it or the name does not resolve.
        """
        if self._selected == name:
            self._selected = None
            return False
        if name not in self._monitors:
            return False
        self._selected = name
        return True

    def clear_selection(self) -> None:
        self._selected = None

    def select_at(self, pos: Point) -> Optional[str]:
        """
        Click handling for monitor configuration.

        Toggles the monitor under `pos`, or clears the selection when the click
        missed every monitor. Returns the selection afterwards.
        """
        m = self.hit_test(pos)
        if m is None:
            self._selected = None
        else:
            self.toggle_selection(m.name)
        return self._selected

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def snap_monitor(self, name: str, target: Point, master: Geometry) -> bool:
        """
        Drag monitor `name` towards `target` (display coords) and snap it.

        `master` is the visible wall extent in display coordinates. Returns False
        if the monitor does not exist.
        """
        m = self._monitors.get(name)
        if m is None:
            return False

        others = [o.bounding_rect() for o in self._monitors.values() if o.name != name]
        snapped = snap_geometry(
            m.bounding_rect(),
            target,
            others=others,
            master=master,
            scale=self._scale,
            cfg=self._snap,
        )
        m.set_position(snapped.top_left)
        return True

    # ------------------------------------------------------------------
    # Border classification
    # ------------------------------------------------------------------

    def edge_class(self, name: str, side: EdgeSide) -> Optional[WallEdgeClass]:
        m = self._monitors.get(name)
        return None if m is None else m.edge(side).wall_class

    def toggle_edge_class(self, name: str, side: EdgeSide, cls: WallEdgeClass) -> Optional[WallEdgeClass]:
        """
        Assign edge (`name`, `side`) to `cls`, or unassign it if it already is.

        Assigning appends to `cls` in selection order and drops the edge from any
        class it held before. Returns the edge's class afterwards (None when
        unassigned or when the monitor does not exist).
        """
        m = self._monitors.get(name)
        if m is None:
            return None

        edge = m.edge(side)
        ref = EdgeRef(monitor=name, side=side)
        if edge.wall_class == cls:
            self._classification.unassign(ref)
            edge.wall_class = None
        else:
            self._classification.assign(ref, cls)
            edge.wall_class = cls

        logger.debug("Edge %s/%s -> %s", name, side.value, edge.wall_class)
        return edge.wall_class

    def classify_at(self, pos: Point, cls: WallEdgeClass) -> bool:
        """
        Click handling for the border-selection passes.

        Toggles the edge under `pos` for class `cls`. Returns False (nothing
        changed) when the click did not land on a border band.
        """
        m, side = self.hit_test_edge(pos)
        if m is None or side is None:
            return False
        self.toggle_edge_class(m.name, side, cls)
        return True

    def clear_classification(self) -> None:
        self._classification.clear()
        for m in self._monitors.values():
            for _side, e in m.edges():
                e.wall_class = None

    def get_resulting_border_configuration(self) -> Dict[WallEdgeClass, List[EdgeSnapshot]]:
        """
        Ordered edge snapshots per wall-edge class.

        Keys cover all four classes (empty list when nothing is assigned).
        Geometry reflects the monitors' current positions.
        """
        out: Dict[WallEdgeClass, List[EdgeSnapshot]] = {}
        for cls in WallEdgeClass:
            snaps: List[EdgeSnapshot] = []
            for ref in self._classification.refs(cls):
                m = self._monitors.get(ref.monitor)
                if m is not None:
                    snaps.append(m.snapshot(ref.side))
            out[cls] = snaps
        return out
