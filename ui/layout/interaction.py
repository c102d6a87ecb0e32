# ui/layout/interaction.py
from __future__ import annotations

import logging
from typing import Callable

from ui.layout.state import DragState
from wall.geometry import Geometry, Point
from wall.modes import ModeStepper
from wall.wall import Wall

logger = logging.getLogger(__name__)


class WallInteractor:
    """
    Centralizes pointer interaction for the wall display widget.

    The widget forwards press/move/release in display coordinates; this class decides
    what they mean for the current interaction mode:
    - ConfigureMonitors: press+move drags (and snaps) the pressed monitor; a click
      toggles the clicked monitor's selection, or clears it on empty space.
    - Select*Border: moves are ignored; a click toggles the clicked edge for the
      mode's wall-edge class.

    Kept free of Qt types so the gesture logic can be exercised without a display.
    `on_change(reason)` is called after every mutation so the host can repaint and
    publish the new state.
    """

    def __init__(
        self,
        *,
        wall: Wall,
        modes: ModeStepper,
        master_rect: Callable[[], Geometry],
        on_change: Callable[[str], None],
    ) -> None:
        self._wall = wall
        self._modes = modes

        # Visible wall extent in display coordinates; queried lazily because the
        # widget can be resized between gestures.
        self._master_rect = master_rect
        self._on_change = on_change

        self._drag = DragState()

    @property
    def drag(self) -> DragState:
        return self._drag

    def on_mouse_press(self, pos: Point) -> bool:
        """Start a gesture. Returns True if the press was taken."""
        self._drag.reset()
        self._drag.active = True

        m = self._wall.hit_test(pos)
        if m is not None:
            self._drag.monitor = m.name
            self._drag.grab_offset = pos - m.bounding_rect(self._wall.scale).top_left
        return True

    def on_mouse_move(self, pos: Point) -> bool:
        """
        Handle a pointer move while pressed.

        Returns True when a monitor was moved (the host should repaint).
        """
        if not self._drag.active:
            return False
        self._drag.moved = True

        if not self._modes.current.allows_drag or self._drag.monitor is None:
            return False

        moved = self._wall.snap_monitor(self._drag.monitor, pos - self._drag.grab_offset, self._master_rect())
        if moved:
            self._on_change("drag")
        return moved

    def on_mouse_release(self, pos: Point) -> bool:
        """
        Finish the gesture. A release without movement is a click.

        Returns True when the click changed selection or classification.
        """
        if not self._drag.active:
            return False
        was_drag = self._drag.moved
        self._drag.reset()

        if was_drag:
            self._on_change("release")
            return False

        mode = self._modes.current
        cls = mode.edge_class
        if cls is None:
            before = self._wall.current_selection()
            after = self._wall.select_at(pos)
            changed = before != after
        else:
            changed = self._wall.classify_at(pos, cls)

        if changed:
            logger.debug("click at %s in %s changed state", pos, mode.value)
            self._on_change("click")
        return changed
