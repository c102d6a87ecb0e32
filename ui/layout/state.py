# ui/layout/state.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from wall.geometry import Point


@dataclass
class DragState:
    """
    Tracks one press → (move*) → release gesture on the wall display.

    Fields:
    - active: a press is in progress (left button held).
    - monitor: name of the monitor under the press point, if any. Only this
      monitor can be dragged during the gesture.
    - grab_offset: press position minus the monitor's scaled top-left, so the
      monitor keeps its position relative to the pointer while dragging.
    - moved: the pointer moved while pressed; the release is then not a click.
    """
    active: bool = False
    monitor: Optional[str] = None
    grab_offset: Point = field(default_factory=lambda: Point(0, 0))
    moved: bool = False

    def reset(self) -> None:
        self.active = False
        self.monitor = None
        self.grab_offset = Point(0, 0)
        self.moved = False
