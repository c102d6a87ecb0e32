from __future__ import annotations

from enum import Enum
import logging
from typing import Optional

from wall.models import WallEdgeClass

logger = logging.getLogger(__name__)


class InteractionMode(Enum):
    """
    Wizard steps of the layout editor, in the order the operator walks through them.

    - CONFIGURE_MONITORS: add/remove/drag monitors; a click toggles selection.
    - SELECT_*_BORDER: a click toggles the clicked monitor edge in/out of the
      matching wall-edge class; dragging is disabled.

    Declaration order is the step order. `next()`/`prev()` return None at the
    ends instead of stepping into a sentinel value.
    """
    CONFIGURE_MONITORS = "configure_monitors"
    SELECT_BOTTOM_BORDER = "select_bottom_border"
    SELECT_RIGHT_BORDER = "select_right_border"
    SELECT_TOP_BORDER = "select_top_border"
    SELECT_LEFT_BORDER = "select_left_border"

    def next(self) -> Optional[InteractionMode]:
        i = MODE_ORDER.index(self)
        return MODE_ORDER[i + 1] if i + 1 < len(MODE_ORDER) else None

    def prev(self) -> Optional[InteractionMode]:
        i = MODE_ORDER.index(self)
        return MODE_ORDER[i - 1] if i > 0 else None

    @property
    def edge_class(self) -> Optional[WallEdgeClass]:
        """Wall-edge class a click assigns in this mode (None while configuring)."""
        return _EDGE_CLASS.get(self)

    @property
    def allows_drag(self) -> bool:
        return self is InteractionMode.CONFIGURE_MONITORS

    @property
    def label(self) -> str:
        return _LABELS[self]


MODE_ORDER: tuple[InteractionMode, ...] = tuple(InteractionMode)

_EDGE_CLASS = {
    InteractionMode.SELECT_BOTTOM_BORDER: WallEdgeClass.BOTTOM,
    InteractionMode.SELECT_RIGHT_BORDER: WallEdgeClass.RIGHT,
    InteractionMode.SELECT_TOP_BORDER: WallEdgeClass.TOP,
    InteractionMode.SELECT_LEFT_BORDER: WallEdgeClass.LEFT,
}

_LABELS = {
    InteractionMode.CONFIGURE_MONITORS: "Configure monitors",
    InteractionMode.SELECT_BOTTOM_BORDER: "Select bottom border",
    InteractionMode.SELECT_RIGHT_BORDER: "Select right border",
    InteractionMode.SELECT_TOP_BORDER: "Select top border",
    InteractionMode.SELECT_LEFT_BORDER: "Select left border",
}


class ModeStepper:
    """
    Linear stepper over `InteractionMode`.

    advance()/retreat() move one step and return True, or return False and stay
    put at either end. The host uses can_advance/can_retreat to enable its
    navigation controls.
    """

    def __init__(self, initial: InteractionMode = InteractionMode.CONFIGURE_MONITORS) -> None:
        if not isinstance(initial, InteractionMode):
            raise TypeError(f"initial must be an InteractionMode, got {initial!r}")
        self._current = initial

    @property
    def current(self) -> InteractionMode:
        return self._current

    def current_mode(self) -> InteractionMode:
        return self._current

    @property
    def can_advance(self) -> bool:
        return self._current.next() is not None

    @property
    def can_retreat(self) -> bool:
        return self._current.prev() is not None

    def advance(self) -> bool:
        nxt = self._current.next()
        if nxt is None:
            return False
        logger.debug("Mode %s -> %s", self._current.value, nxt.value)
        self._current = nxt
        return True

    def retreat(self) -> bool:
        prv = self._current.prev()
        if prv is None:
            return False
        logger.debug("Mode %s -> %s", self._current.value, prv.value)
        self._current = prv
        return True

    def reset(self) -> None:
        self._current = InteractionMode.CONFIGURE_MONITORS
