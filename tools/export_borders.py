#!/usr/bin/env python3
"""CLI utility to fetch the resulting border configuration from a running editor."""
from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
import sys
import tempfile
from typing import Any

import httpx

_BORDER_CLASSES = ("bottom", "right", "top", "left")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="export-borders")
    p.add_argument("--url", default="http://127.0.0.1:8736", help="Base URL of the layout server")
    p.add_argument("--out", default=None, help="Write JSON here instead of stdout")
    p.add_argument("--timeout", type=float, default=2.0, help="HTTP timeout in seconds")
    return p.parse_args(argv)


def fetch_borders(client: httpx.Client, base_url: str) -> dict[str, Any]:
    res = client.get(f"{base_url.rstrip('/')}/borders", headers={"Cache-Control": "no-store"})
    res.raise_for_status()
    return res.json()


def validate_borders(data: Any) -> dict[str, list[dict[str, Any]]]:
    """
    Check the /borders shape: one list per wall-edge class, each entry an edge object.

    Raises:
        ValueError: when the payload does not have that shape.
    """
    if not isinstance(data, dict):
        raise ValueError("borders payload must be a JSON object")
    out: dict[str, list[dict[str, Any]]] = {}
    for key in _BORDER_CLASSES:
        edges = data.get(key)
        if not isinstance(edges, list) or not all(isinstance(e, dict) for e in edges):
            raise ValueError(f"'{key}' must be a list of edge objects")
        for e in edges:
            if not isinstance(e.get("geometry"), dict) or not isinstance(e.get("monitor"), str):
                raise ValueError(f"'{key}' entry is missing monitor/geometry")
        out[key] = edges
    return out


def _atomic_write_json(path: Path, payload: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.write("\n")
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def main(argv: list[str] | None = None, *, client: httpx.Client | None = None) -> int:
    args = _parse_args(argv)

    own_client = client is None
    http = client if client is not None else httpx.Client(timeout=float(args.timeout))
    try:
        raw = fetch_borders(http, args.url)
    except (httpx.HTTPError, json.JSONDecodeError) as e:
        print(f"ERROR: unable to fetch borders from {args.url}: {e}", file=sys.stderr)
        return 2
    finally:
        if own_client:
            http.close()

    try:
        borders = validate_borders(raw)
    except ValueError as e:
        print(f"ERROR: invalid borders payload: {e}", file=sys.stderr)
        return 3

    if args.out is None:
        json.dump(borders, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 0

    out_path = Path(args.out)
    _atomic_write_json(out_path, borders)
    counts = ", ".join(f"{k}={len(v)}" for k, v in borders.items())
    print(f"Saved border configuration ({counts}) to {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
