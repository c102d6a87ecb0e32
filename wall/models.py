"""Monitor and edge model for the video wall.

A Monitor owns four Edges (bottom/right/top/left). Edge geometry is always derived
from the monitor's parameters and is recomputed from scratch whenever one of them
changes; callers never set it directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from wall.geometry import Geometry, Point

# Thickness of each border band, in wall pixels.
BORDER_WIDTH = 16


class WallEdgeClass(Enum):
    """Global wall edge an individual monitor edge can be assigned to."""
    BOTTOM = "bottom"
    RIGHT = "right"
    TOP = "top"
    LEFT = "left"


class EdgeSide(Enum):
    """
    Physical side of a single monitor.

    Declaration order is the fixed hit-test order (bottom, right, top, left).
    """
    BOTTOM = "bottom"
    RIGHT = "right"
    TOP = "top"
    LEFT = "left"


@dataclass
class Edge:
    """One border band of a monitor: geometry plus its current wall-edge class."""
    geometry: Geometry
    wall_class: Optional[WallEdgeClass] = None

    def scaled_rect(self, scale: float) -> Geometry:
        return self.geometry.scaled(scale)


@dataclass(frozen=True)
class EdgeRef:
    """Stable reference to a monitor edge: monitor name + side."""
    monitor: str
    side: EdgeSide


@dataclass(frozen=True)
class EdgeSnapshot:
    """Detached copy of an edge, handed to consumers outside the wall."""
    monitor: str
    side: EdgeSide
    wall_class: Optional[WallEdgeClass]
    geometry: Geometry

    def as_dict(self) -> dict:
        return {
            "monitor": self.monitor,
            "side": self.side.value,
            "wall_class": None if self.wall_class is None else self.wall_class.value,
            "geometry": self.geometry.as_dict(),
        }


@dataclass(frozen=True)
class MonitorSpec:
    """
    The parameter list a monitor is built from.

    Two monitors built from equal specs (and the same border width) have
    identical edge geometry.
    """
    name: str
    width: int
    height: int
    x_offset: int = 0
    y_offset: int = 0
    horizontal_letterbox: int = 0
    vertical_letterbox: int = 0

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "width": int(self.width),
            "height": int(self.height),
            "x": int(self.x_offset),
            "y": int(self.y_offset),
            "horizontal_letterbox": int(self.horizontal_letterbox),
            "vertical_letterbox": int(self.vertical_letterbox),
        }


class Monitor:
    """
    A physical display inside the wall.

    Parameters (all wall pixels):
    - width/height: raw resolution, letterbox bars included.
    - x_offset/y_offset: position of the raw resolution inside the wall canvas. May
      go negative by up to the letterbox bar, so the visible image can sit at 0.
    - horizontal_letterbox_bar_height: height of the bars above and below the image.
    - vertical_letterbox_bar_width: width of the bars left and right of the image.

    The name is the identity key and cannot change after construction.
    """

    def __init__(
        self,
        name: str,
        width: int,
        height: int,
        x_offset: int = 0,
        y_offset: int = 0,
        horizontal_letterbox_bar_height: int = 0,
        vertical_letterbox_bar_width: int = 0,
        *,
        border_width: int = BORDER_WIDTH,
    ) -> None:
        self._name = str(name)
        self._border_width = int(border_width)

        self._width = int(width)
        self._height = int(height)
        self._x_offset = int(x_offset)
        self._y_offset = int(y_offset)
        self._horizontal_letterbox = int(horizontal_letterbox_bar_height)
        self._vertical_letterbox = int(vertical_letterbox_bar_width)

        self.bottom = Edge(Geometry(0, 0))
        self.right = Edge(Geometry(0, 0))
        self.top = Edge(Geometry(0, 0))
        self.left = Edge(Geometry(0, 0))

        self.update_geometry()

    @classmethod
    def from_spec(cls, spec: MonitorSpec, *, border_width: int = BORDER_WIDTH) -> Monitor:
        return cls(
            spec.name,
            spec.width,
            spec.height,
            spec.x_offset,
            spec.y_offset,
            spec.horizontal_letterbox,
            spec.vertical_letterbox,
            border_width=border_width,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def x_offset(self) -> int:
        return self._x_offset

    @property
    def y_offset(self) -> int:
        return self._y_offset

    @property
    def horizontal_letterbox_bar_height(self) -> int:
        return self._horizontal_letterbox

    @property
    def vertical_letterbox_bar_width(self) -> int:
        return self._vertical_letterbox

    @property
    def border_width(self) -> int:
        return self._border_width

    def spec(self) -> MonitorSpec:
        return MonitorSpec(
            name=self._name,
            width=self._width,
            height=self._height,
            x_offset=self._x_offset,
            y_offset=self._y_offset,
            horizontal_letterbox=self._horizontal_letterbox,
            vertical_letterbox=self._vertical_letterbox,
        )

    def update_geometry(self) -> None:
        """
        Re-derive all four edge rectangles from the monitor parameters.

        Border bands sit just inside the visible (non-letterboxed) image:
        top/bottom span the visible width, left/right span the visible height
        between them. Classification state on the edges is left untouched.
        """
        # The raw offset may sit inside the letterbox, but the visible image
        # never leaves the wall.
        self._x_offset = max(-max(0, self._vertical_letterbox), self._x_offset)
        self._y_offset = max(-max(0, self._horizontal_letterbox), self._y_offset)

        b = self._border_width
        w, h = self._width, self._height
        x, y = self._x_offset, self._y_offset
        vlb, hlb = self._vertical_letterbox, self._horizontal_letterbox

        side_height = max(0, h - 2 * b - 2 * hlb)
        band_width = max(0, w - 2 * vlb)

        self.left.geometry = Geometry(b, side_height, vlb + x, hlb + y + b)
        self.right.geometry = Geometry(b, side_height, x + w - b - vlb, hlb + y + b)
        self.top.geometry = Geometry(band_width, b, vlb + x, hlb + y)
        self.bottom.geometry = Geometry(band_width, b, vlb + x, y + h - b - hlb)

    # ------------------------------------------------------------------
    # Parameter setters (each one re-derives the edges)
    # ------------------------------------------------------------------

    def set_resolution(self, width: int, height: int) -> None:
        self._width = int(width)
        self._height = int(height)
        self.update_geometry()

    def set_offset(self, x_offset: int, y_offset: int) -> None:
        self._x_offset = int(x_offset)
        self._y_offset = int(y_offset)
        self.update_geometry()

    def set_letterbox(self, horizontal_bar_height: int, vertical_bar_width: int) -> None:
        self._horizontal_letterbox = int(horizontal_bar_height)
        self._vertical_letterbox = int(vertical_bar_width)
        self.update_geometry()

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def edge(self, side: EdgeSide) -> Edge:
        if not isinstance(side, EdgeSide):
            raise TypeError(f"side must be an EdgeSide, got {side!r}")
        return getattr(self, side.value)

    def edges(self) -> Iterator[tuple[EdgeSide, Edge]]:
        """Yield (side, edge) in hit-test order: bottom, right, top, left."""
        for side in EdgeSide:
            yield side, self.edge(side)

    def snapshot(self, side: EdgeSide) -> EdgeSnapshot:
        e = self.edge(side)
        return EdgeSnapshot(monitor=self._name, side=side, wall_class=e.wall_class, geometry=e.geometry)

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    def bounding_rect(self, scale: float = 1.0) -> Geometry:
        """
        Visible monitor area: top edge's top-left to bottom edge's bottom-right.

        Letterbox bars are excluded, the border bands included.
        """
        rect = Geometry.from_corners(self.top.geometry.top_left, self.bottom.geometry.bottom_right)
        return rect.scaled(scale)

    def move(self, delta: Point) -> None:
        """Shift the monitor (and with it all four edges) by `delta` wall pixels."""
        self.set_offset(self._x_offset + delta.x, self._y_offset + delta.y)

    def set_position(self, target: Point) -> None:
        """Move the monitor so its bounding rectangle's top-left lands on `target`."""
        self.move(target - self.bounding_rect().top_left)

    def __repr__(self) -> str:
        return (
            f"Monitor(name={self._name!r}, {self._width}x{self._height}"
            f"+{self._x_offset}+{self._y_offset}, letterbox=({self._horizontal_letterbox}, {self._vertical_letterbox}))"
        )

