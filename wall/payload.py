"""
payload.py

Builds the JSON payloads describing the wall layout.

These are the only shapes that leave the process (status server, export tool), so
they are kept flat and JSON-safe: enums become their string values, geometry
becomes {"width", "height", "x", "y"} objects.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List

from wall.modes import ModeStepper
from wall.models import Monitor
from wall.wall import Wall

JsonDict = Dict[str, Any]


def monitor_payload(m: Monitor) -> JsonDict:
    """Spec parameters plus the derived rectangles of one monitor."""
    out: JsonDict = m.spec().as_dict()
    out["bounding"] = m.bounding_rect().as_dict()
    out["edges"] = {
        side.value: {
            "geometry": e.geometry.as_dict(),
            "wall_class": None if e.wall_class is None else e.wall_class.value,
        }
        for side, e in m.edges()
    }
    return out


def borders_payload(wall: Wall) -> JsonDict:
    """
    The resulting border configuration, keyed by wall-edge class value.

    Each list is in selection order.
    """
    return {
        cls.value: [snap.as_dict() for snap in snaps]
        for cls, snaps in wall.get_resulting_border_configuration().items()
    }


def build_layout_payload(wall: Wall, modes: ModeStepper) -> JsonDict:
    """Full status snapshot published after every handled UI event."""
    monitors: List[JsonDict] = [monitor_payload(m) for m in wall.monitors()]
    mode = modes.current
    return {
        "timestamp": time.time(),
        "mode": mode.value,
        "mode_label": mode.label,
        "can_advance": modes.can_advance,
        "can_retreat": modes.can_retreat,
        "selection": wall.current_selection(),
        "scale": wall.scale,
        "border_width": wall.border_width,
        "monitors": monitors,
        "borders": borders_payload(wall),
    }
