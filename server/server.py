"""FastAPI application assembly and server-thread launcher.

This module exposes a read-only view of the wall layout for the downstream mask
builder and for debugging. Endpoints are intentionally thin and delegate state
ownership to `LayoutStore`; nothing here mutates the wall.
"""

from __future__ import annotations

import logging
import threading

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from server.status_store import LayoutStore

logger = logging.getLogger(__name__)

_BORDER_CLASSES = ("bottom", "right", "top", "left")


def create_app(store: LayoutStore) -> FastAPI:
    """
    Build the FastAPI application.

    Routes:
        GET  /status            full layout snapshot (mode, selection, monitors, borders)
        GET  /monitors          monitor parameters and derived rectangles
        GET  /borders           resulting border configuration, per wall-edge class
        GET  /borders/{cls}     a single class's ordered edge list
        POST /quit              request application shutdown
    """
    app = FastAPI()

    @app.get("/status")
    async def status() -> JSONResponse:
        return JSONResponse(store.get_payload())

    @app.get("/monitors")
    async def monitors() -> JSONResponse:
        return JSONResponse({"monitors": store.get_monitors()})

    @app.get("/borders")
    async def borders() -> JSONResponse:
        """
        Return the edges assigned to each wall-edge class, in selection order.

        This is the handoff shape consumed by the mask builder.
        """
        return JSONResponse(store.get_borders())

    @app.get("/borders/{cls}")
    async def borders_for_class(cls: str) -> JSONResponse:
        key = cls.strip().lower()
        if key not in _BORDER_CLASSES:
            return JSONResponse({"error": f"class must be one of {', '.join(_BORDER_CLASSES)}"}, status_code=400)
        return JSONResponse({key: store.get_borders().get(key, [])})

    @app.post("/quit")
    async def quit_app() -> JSONResponse:
        """
        Request application shutdown.

        The server itself does not exit the process; it signals via LayoutStore so
        the UI can close its window and stop the event loop.
        """
        store.request_quit()
        return JSONResponse({"ok": True})

    return app


def run_server_in_thread(*, host: str, port: int, store: LayoutStore, log_level: str = "error") -> threading.Thread:
    """
    Run the FastAPI server in a background daemon thread.

    Shutdown is coordinated through LayoutStore.quit_requested in the UI thread.
    """
    app = create_app(store)

    def _run() -> None:
        # Uvicorn manages its own event loop internally.
        uvicorn.run(app, host=host, port=port, log_level=log_level)

    t = threading.Thread(target=_run, name="layout-server", daemon=True)
    t.start()
    logger.info("Layout server listening on http://%s:%d", host, port)
    return t
