# wall/classification.py
from __future__ import annotations

from typing import Dict, List, Optional

from wall.models import EdgeRef, WallEdgeClass


class BorderClassification:
    """
    Per wall-edge class, the ordered list of monitor edges assigned to it.

    Invariants:
    - insertion order is selection order (the mask builder relies on a consistent
      winding direction, which the operator expresses through click order),
    - an edge appears in at most one class at a time.

    Edges are referenced by `EdgeRef` (monitor name + side), never by object, so a
    deleted monitor cannot leave a live reference behind; `discard_monitor` removes
    its entries.
    """

    def __init__(self) -> None:
        self._buckets: Dict[WallEdgeClass, List[EdgeRef]] = {c: [] for c in WallEdgeClass}

    def class_of(self, ref: EdgeRef) -> Optional[WallEdgeClass]:
        for cls, refs in self._buckets.items():
            if ref in refs:
                return cls
        return None

    def assign(self, ref: EdgeRef, cls: WallEdgeClass) -> None:
        """Append `ref` to `cls`, removing it from whichever class held it before."""
        if not isinstance(cls, WallEdgeClass):
            raise TypeError(f"cls must be a WallEdgeClass, got {cls!r}")
        self.unassign(ref)
        self._buckets[cls].append(ref)

    def unassign(self, ref: EdgeRef) -> bool:
        for refs in self._buckets.values():
            if ref in refs:
                refs.remove(ref)
                return True
        return False

    def discard_monitor(self, name: str) -> int:
        """Drop every edge of monitor `name`; returns how many were removed."""
        removed = 0
        for cls, refs in self._buckets.items():
            kept = [r for r in refs if r.monitor != name]
            removed += len(refs) - len(kept)
            self._buckets[cls] = kept
        return removed

    def refs(self, cls: WallEdgeClass) -> List[EdgeRef]:
        return list(self._buckets[cls])

    def clear(self) -> None:
        for refs in self._buckets.values():
            refs.clear()

    def __len__(self) -> int:
        return sum(len(refs) for refs in self._buckets.values())
