"""Application composition root for the video wall layout editor.

This module wires together:
- config loading
- logging
- the wall model and wizard mode stepper
- the shared layout store and FastAPI server thread
- the Qt layout editor

The wall and mode stepper live on the Qt thread only. The server thread reads the
JSON snapshots the UI publishes into `LayoutStore` after every handled event.
"""

from __future__ import annotations

import argparse
import logging
import sys

from config.config import load_config
from server.server import run_server_in_thread
from server.status_store import LayoutStore
from ui.layout.ui_logic import run_layout_ui
from wall.modes import ModeStepper
from wall.payload import build_layout_payload
from wall.snapping import SnapConfig
from wall.wall import Wall

logger = logging.getLogger("videowall")


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="videowall")
    p.add_argument("--config", default="./config/config.json", help="Path to config.json")
    p.add_argument("--no-server", action="store_true", help="Do not start the status HTTP server.")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Root log level.",
    )
    return p.parse_args()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s",
    )
    # uvicorn/httpx are chatty at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.WARNING)


def main() -> int:
    """
    Application entry point.

    - Load and validate config (exit code 2 on an invalid file).
    - Build the wall from the configured seed monitors.
    - Optionally start the status server in a daemon thread.
    - Run the Qt editor in the main thread until the window closes or /quit is called.
    """
    args = _parse_args()
    _setup_logging(args.log_level)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error("Invalid config %s: %s", args.config, e)
        return 2

    wall = Wall.from_specs(
        cfg.monitors,
        scale=cfg.scale,
        border_width=cfg.border_px,
        snap=SnapConfig(ratio=cfg.snap_ratio),
    )
    modes = ModeStepper()

    store = LayoutStore(scale=cfg.scale, border_width=cfg.border_px)
    if cfg.server_enabled and not args.no_server:
        run_server_in_thread(host=cfg.server_host, port=cfg.server_port, store=store)

    def publish() -> None:
        store.set_latest(build_layout_payload(wall, modes))

    rc = run_layout_ui(
        wall=wall,
        modes=modes,
        canvas_width=cfg.canvas_width,
        canvas_height=cfg.canvas_height,
        on_state_change=publish,
        quit_requested=store.quit_requested,
        default_name=cfg.default_name,
        default_width=cfg.default_width,
        default_height=cfg.default_height,
    )

    for cls, edges in wall.get_resulting_border_configuration().items():
        logger.info("%s border: %s", cls.value, ", ".join(f"{e.monitor}/{e.side.value}" for e in edges) or "-")
    return rc


if __name__ == "__main__":
    sys.exit(main())
