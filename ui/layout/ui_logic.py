# ui/layout/ui_logic.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from ui.layout.window import LayoutWindow
from wall.modes import ModeStepper
from wall.wall import Wall

logger = logging.getLogger(__name__)


def run_layout_ui(
    *,
    wall: Wall,
    modes: ModeStepper,
    canvas_width: int,
    canvas_height: int,
    on_state_change: Callable[[], None],
    quit_requested: Optional[Callable[[], bool]] = None,
    default_name: str = "name",
    default_width: int = 1366,
    default_height: int = 768,
) -> int:
    """
    Start (or attach to) the Qt application and show the layout editor.

    Responsibilities:
    - Create and show LayoutWindow over the given wall and mode stepper.
    - Call on_state_change once up front and after every handled UI event, so the
      host can publish a fresh snapshot.
    - If quit_requested is given, poll it and close the window when it flips
      (e.g. POST /quit on the status server).

    Threading model:
    - Must be called from the thread that owns the wall; the wall is never
      touched from any other thread.

    Returns:
        The Qt event loop's exit code.
    """
    # Reuse an existing QApplication in embedded/hosted contexts.
    app = QApplication.instance() or QApplication([])

    w = LayoutWindow(
        wall=wall,
        modes=modes,
        canvas_width=int(canvas_width),
        canvas_height=int(canvas_height),
        default_name=str(default_name),
        default_width=int(default_width),
        default_height=int(default_height),
        on_state_change=on_state_change,
    )
    w.show()
    on_state_change()

    # Quit polling without blocking the UI loop.
    quit_timer = QTimer()
    quit_timer.setInterval(200)

    def on_quit_tick() -> None:
        if quit_requested is not None and quit_requested():
            logger.info("Quit requested; closing layout editor")
            quit_timer.stop()
            w.close()
            app.quit()

    if quit_requested is not None:
        quit_timer.timeout.connect(on_quit_tick)  # type: ignore[arg-type]
        quit_timer.start()

    return int(app.exec())
