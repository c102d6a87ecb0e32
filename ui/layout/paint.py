# ui/layout/paint.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QColor, QPainter, QPen

from wall.geometry import Geometry
from wall.modes import InteractionMode
from wall.models import Monitor, WallEdgeClass
from wall.wall import Wall


def to_qrect(g: Geometry) -> QRect:
    """Convert an (already scaled) Geometry into a QRect for drawing."""
    return QRect(int(g.x_offset), int(g.y_offset), int(g.width), int(g.height))


def _default_class_colors() -> Dict[WallEdgeClass, QColor]:
    return {
        WallEdgeClass.BOTTOM: QColor(0, 200, 0),
        WallEdgeClass.RIGHT: QColor(220, 40, 40),
        WallEdgeClass.TOP: QColor(30, 110, 230),
        WallEdgeClass.LEFT: QColor(230, 160, 0),
    }


@dataclass(frozen=True)
class PaintConfig:
    """
    Colours used by the wall painter.

    - background: widget background.
    - monitor_fill / selected_fill: bounding rectangle fill while configuring.
    - edge_unassigned: outline for edges with no wall-edge class.
    - class_colors: outline per wall-edge class, the on-screen marker of a
      classification.
    - text: monitor label colour.
    """
    background: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    monitor_fill: QColor = field(default_factory=lambda: QColor(180, 180, 180))
    selected_fill: QColor = field(default_factory=lambda: QColor(255, 180, 180))
    edge_unassigned: QColor = field(default_factory=lambda: QColor(120, 120, 120))
    class_colors: Dict[WallEdgeClass, QColor] = field(default_factory=_default_class_colors)
    text: QColor = field(default_factory=lambda: QColor(20, 20, 20))


class WallPainter:
    """
    Paints the wall display.

    - ConfigureMonitors: filled bounding rectangles, the selected monitor highlighted.
    - Select*Border: every edge outlined in its class colour, the class being
      selected in this pass drawn with a thicker pen.
    Both modes label each monitor with its name, visible size and position.
    """

    def __init__(self, *, cfg: PaintConfig = PaintConfig()) -> None:
        self._cfg = cfg

    def _label(self, p: QPainter, m: Monitor, scale: float) -> None:
        bounding = m.bounding_rect()
        p.setPen(self._cfg.text)
        p.drawText(
            to_qrect(m.bounding_rect(scale)),
            Qt.AlignmentFlag.AlignCenter,
            f"{m.name}\n{bounding.width}x{bounding.height}\n{bounding.left}+{bounding.top}",
        )

    def _paint_monitors(self, p: QPainter, wall: Wall) -> None:
        selected = wall.current_selection()
        for m in wall.monitors():
            fill = self._cfg.selected_fill if m.name == selected else self._cfg.monitor_fill
            p.fillRect(to_qrect(m.bounding_rect(wall.scale)), fill)
            self._label(p, m, wall.scale)

    def _paint_borders(self, p: QPainter, wall: Wall, active: WallEdgeClass) -> None:
        for m in wall.monitors():
            for _side, e in m.edges():
                color = self._cfg.edge_unassigned if e.wall_class is None else self._cfg.class_colors[e.wall_class]
                pen = QPen(color)
                pen.setWidth(2 if e.wall_class is active else 1)
                p.setPen(pen)
                p.setBrush(Qt.BrushStyle.NoBrush)
                p.drawRect(to_qrect(e.scaled_rect(wall.scale)))
            self._label(p, m, wall.scale)

    def paint(self, p: QPainter, *, widget_rect: QRect, wall: Wall, mode: InteractionMode) -> None:
        p.fillRect(widget_rect, self._cfg.background)
        cls = mode.edge_class
        if cls is None:
            self._paint_monitors(p, wall)
        else:
            self._paint_borders(p, wall, cls)
