"""Configuration schema and JSON validation helpers.

`load_config` validates and normalizes runtime settings from `config/config.json`
into an immutable `AppConfig`, so downstream modules can assume a coherent shape and
focus on behavior instead of defensive parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Dict, Tuple

from wall.models import BORDER_WIDTH, MonitorSpec


@dataclass(frozen=True)
class AppConfig:
    """
    Validated application configuration loaded from a JSON file.

    Expected JSON structure (every section optional, defaults shown):

    {
      "server": { "enabled": true, "host": "127.0.0.1", "port": 8736 },
      "wall": {
        "scale": 0.1,
        "border_px": 16,
        "snap_ratio": 0.05,
        "canvas": { "width": 5760, "height": 2160 },
        "monitors": [
          { "name": "left", "width": 1920, "height": 1080, "x": 0, "y": 0,
            "horizontal_letterbox": 0, "vertical_letterbox": 0 }
        ]
      },
      "ui": { "default_name": "name", "default_width": 1366, "default_height": 768 }
    }

    `wall.monitors` only seeds the initial layout; nothing is written back.
    """

    # -----------------------------
    # Server / API settings
    # -----------------------------
    server_enabled: bool
    server_host: str
    server_port: int

    # -----------------------------
    # Wall model settings
    # -----------------------------
    scale: float
    border_px: int
    snap_ratio: float
    canvas_width: int
    canvas_height: int
    monitors: Tuple[MonitorSpec, ...]

    # -----------------------------
    # UI defaults for the "add monitor" form
    # -----------------------------
    default_name: str
    default_width: int
    default_height: int


def _opt_obj(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    """
    Optional JSON object: missing/None => {}, dict => itself, anything else => error.
    """
    v = raw.get(key)
    if v is None:
        return {}
    if not isinstance(v, dict):
        raise ValueError(f"Missing or invalid '{key}' object in config (expected object)")
    return v


def _require_num(v: Any, key: str) -> float:
    # bool is an int subclass; reject it so `true` never becomes 1.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"Missing or invalid '{key}' (expected number)")
    return float(v)


def _require_str(v: Any, key: str) -> str:
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"Missing or invalid '{key}' (expected non-empty string)")
    return v


def _opt_bool(v: Any, key: str, default: bool) -> bool:
    """
    Optional boolean with default.

    Prevents accidental configs like "true"/"false" (strings) from silently passing.
    """
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    raise ValueError(f"Missing or invalid '{key}' (expected boolean)")


def _opt_int(v: Any, key: str, default: int) -> int:
    """
    Optional integer with default.

    JSON numbers such as 10 or 10.0 are accepted; fractional values are truncated.
    """
    if v is None:
        return default
    return int(_require_num(v, key))


def _opt_num(v: Any, key: str, default: float) -> float:
    if v is None:
        return default
    return _require_num(v, key)


def _opt_str(v: Any, key: str, default: str) -> str:
    if v is None:
        return default
    return _require_str(v, key)


def _parse_monitor(raw: Any, idx: int) -> MonitorSpec:
    key = f"wall.monitors[{idx}]"
    if not isinstance(raw, dict):
        raise ValueError(f"Missing or invalid '{key}' (expected object)")

    spec = MonitorSpec(
        name=_require_str(raw.get("name"), f"{key}.name").strip(),
        width=int(_require_num(raw.get("width"), f"{key}.width")),
        height=int(_require_num(raw.get("height"), f"{key}.height")),
        x_offset=_opt_int(raw.get("x"), f"{key}.x", 0),
        y_offset=_opt_int(raw.get("y"), f"{key}.y", 0),
        horizontal_letterbox=_opt_int(raw.get("horizontal_letterbox"), f"{key}.horizontal_letterbox", 0),
        vertical_letterbox=_opt_int(raw.get("vertical_letterbox"), f"{key}.vertical_letterbox", 0),
    )

    if spec.width <= 0 or spec.height <= 0:
        raise ValueError(f"{key}.width and {key}.height must be > 0")
    if spec.x_offset < 0 or spec.y_offset < 0:
        raise ValueError(f"{key}.x and {key}.y must be >= 0")
    if spec.horizontal_letterbox < 0 or spec.vertical_letterbox < 0:
        raise ValueError(f"{key} letterbox sizes must be >= 0")
    return spec


def config_from_dict(raw: Dict[str, Any]) -> AppConfig:
    """
    Validate an already-parsed config object.

    Raises:
        ValueError: invalid types or failed constraints.
    """
    if not isinstance(raw, dict):
        raise ValueError("config root must be a JSON object")

    server = _opt_obj(raw, "server")
    wall = _opt_obj(raw, "wall")
    ui = _opt_obj(raw, "ui")
    canvas = _opt_obj(wall, "canvas")

    # ---- Server ----
    server_enabled = _opt_bool(server.get("enabled"), "server.enabled", True)
    server_host = _opt_str(server.get("host"), "server.host", "127.0.0.1").strip()
    server_port = _opt_int(server.get("port"), "server.port", 8736)
    if not (0 < server_port < 65536):
        raise ValueError("server.port must be in 1..65535")

    # ---- Wall ----
    scale = _opt_num(wall.get("scale"), "wall.scale", 0.1)
    border_px = _opt_int(wall.get("border_px"), "wall.border_px", BORDER_WIDTH)
    snap_ratio = _opt_num(wall.get("snap_ratio"), "wall.snap_ratio", 0.05)
    canvas_width = _opt_int(canvas.get("width"), "wall.canvas.width", 5760)
    canvas_height = _opt_int(canvas.get("height"), "wall.canvas.height", 2160)

    if not (0.0 < scale <= 1.0):
        raise ValueError("wall.scale must be in (0, 1]")
    if border_px <= 0:
        raise ValueError("wall.border_px must be > 0")
    if not (0.0 < snap_ratio < 0.5):
        raise ValueError("wall.snap_ratio must be in (0, 0.5)")
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError("wall.canvas.width and wall.canvas.height must be > 0")

    monitors_raw = wall.get("monitors", [])
    if not isinstance(monitors_raw, list):
        raise ValueError("Missing or invalid 'wall.monitors' (expected list)")
    monitors = tuple(_parse_monitor(m, i) for i, m in enumerate(monitors_raw))

    names = [m.name for m in monitors]
    if len(set(names)) != len(names):
        raise ValueError("wall.monitors names must be unique")

    # ---- UI ----
    default_name = _opt_str(ui.get("default_name"), "ui.default_name", "name")
    default_width = _opt_int(ui.get("default_width"), "ui.default_width", 1366)
    default_height = _opt_int(ui.get("default_height"), "ui.default_height", 768)
    if default_width <= 0 or default_height <= 0:
        raise ValueError("ui.default_width and ui.default_height must be > 0")

    return AppConfig(
        server_enabled=server_enabled,
        server_host=server_host,
        server_port=server_port,
        scale=scale,
        border_px=border_px,
        snap_ratio=snap_ratio,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        monitors=monitors,
        default_name=default_name,
        default_width=default_width,
        default_height=default_height,
    )


def load_config(path: str) -> AppConfig:
    """
    Load and validate config from a JSON file and return an `AppConfig`.

    Raises:
        ValueError: missing keys, invalid types, or failed constraints.
        OSError: file cannot be opened/read.
        json.JSONDecodeError: invalid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw: Dict[str, Any] = json.load(f)
    return config_from_dict(raw)
