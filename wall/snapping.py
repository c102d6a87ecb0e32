"""Magnetic placement of a dragged monitor.

The snap pass takes the rectangle a monitor would occupy at the dragged position and
nudges it onto nearby alignment targets:

1) the wall frame (left/top at 0, right/bottom at the master rectangle's far side),
2) neighbouring monitors, using a soft collision zone around each one.

Neighbours are resolved one at a time in collection order. A later neighbour may move
the rectangle again, and the result is not guaranteed to be collision-free when several
neighbours are close at once; this is a best-effort nudge, not a layout solver.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from wall.geometry import Geometry, Point, round_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapConfig:
    """
    Tuning for the snap pass.

    - ratio: fraction of the master rectangle's size used as the snap distance,
      per axis (width threshold from the master width, height threshold from the
      master height). Neighbour collision zones extend half that distance.
    """
    ratio: float = 0.05


def snap_geometry(
    moving: Geometry,
    target: Point,
    *,
    others: Iterable[Geometry],
    master: Geometry,
    scale: float,
    cfg: SnapConfig = SnapConfig(),
) -> Geometry:
    """
    Compute where a dragged monitor should land.

    Args:
        moving: current bounding rectangle of the dragged monitor (wall pixels).
        target: requested top-left, in display coordinates (wall pixels * scale).
        others: bounding rectangles of every other monitor (wall pixels), in
            collection order.
        master: visible extent of the wall in display coordinates.
        scale: display scale (display px per wall px).

    Returns:
        The snapped bounding rectangle in wall pixels. Size is always preserved.
    """
    if scale <= 0:
        raise ValueError("scale must be > 0")

    moved = moving.moved_to(Point(round_int(target.x / scale), round_int(target.y / scale)))

    master_right = round_int(master.right / scale)
    master_bottom = round_int(master.bottom / scale)
    width_threshold = cfg.ratio * (master.width / scale)
    height_threshold = cfg.ratio * (master.height / scale)

    # Wall frame: near sides also catch positions dragged past the origin.
    if moved.left < width_threshold:
        moved = moved.with_left(0)
    if moved.top < height_threshold:
        moved = moved.with_top(0)
    if abs(master_right - moved.right) < width_threshold:
        moved = moved.with_right(master_right)
    if abs(master_bottom - moved.bottom) < height_threshold:
        moved = moved.with_bottom(master_bottom)

    half_w = int(width_threshold / 2)
    half_h = int(height_threshold / 2)

    for other in others:
        zone = other.adjusted(-half_w, -half_h, half_w, half_h)
        if not zone.intersects(moved):
            continue

        overlap = zone.intersected(moved)
        if overlap.height > overlap.width:
            # Horizontal approach: flush against the neighbour's left or right side.
            if moved.right > other.right:
                moved = moved.with_left(other.right)
            elif moved.right < other.right:
                moved = moved.with_right(other.left)
        else:
            # Vertical approach.
            if moved.top < other.top:
                moved = moved.with_bottom(other.top)
            elif moved.top > other.top:
                moved = moved.with_top(other.bottom)

    logger.debug("snap: target=%s -> %s", target, moved.top_left)
    return moved
