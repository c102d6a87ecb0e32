"""Thread-safe in-memory store shared by the Qt UI thread and the HTTP routes.

The wall model itself is single-threaded and owned by the UI. After each handled
event the UI publishes a JSON snapshot here; the server only ever reads snapshots,
so HTTP requests never touch live monitor objects.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Dict, List

# JSON-ish payload type used throughout the server boundary.
JsonDict = Dict[str, Any]


class LayoutStore:
    """
    Latest layout snapshot plus the quit flag.

    Threading model:
      - The UI thread calls `set_latest(...)` after every add/delete/move/classify/mode change.
      - The web server thread(s) call the getters.
      - `request_quit()` may be called from either side; the UI polls `quit_requested()`.
      - All state is protected by a single lock; operations are small and bounded.
    """

    def __init__(self, *, scale: float, border_width: int) -> None:
        self._lock = threading.Lock()
        self._quit_requested = False

        # Well-formed payload so /status can be served before the UI publishes anything.
        self._latest: JsonDict = self._default_payload(scale=float(scale), border_width=int(border_width))

    @staticmethod
    def _default_payload(*, scale: float, border_width: int) -> JsonDict:
        return {
            "timestamp": time.time(),
            "mode": "configure_monitors",
            "mode_label": "Configure monitors",
            "can_advance": True,
            "can_retreat": False,
            "selection": None,
            "scale": scale,
            "border_width": border_width,
            "monitors": [],
            "borders": {"bottom": [], "right": [], "top": [], "left": []},
        }

    def set_latest(self, payload: JsonDict) -> None:
        if not isinstance(payload, dict):
            raise TypeError("payload must be a dict")
        with self._lock:
            self._latest = payload

    def get_payload(self) -> JsonDict:
        """Shallow copy of the latest snapshot."""
        with self._lock:
            return dict(self._latest)

    def get_monitors(self) -> List[JsonDict]:
        with self._lock:
            monitors = self._latest.get("monitors")
            return list(monitors) if isinstance(monitors, list) else []

    def get_borders(self) -> JsonDict:
        with self._lock:
            borders = self._latest.get("borders")
            return dict(borders) if isinstance(borders, dict) else {}

    # ----------------------------
    # Quit signalling
    # ----------------------------

    def request_quit(self) -> None:
        with self._lock:
            self._quit_requested = True

    def quit_requested(self) -> bool:
        with self._lock:
            return bool(self._quit_requested)
