"""
Engine merge sort (top-down, insertion-sorted small runs, merge skipped on
already-ordered halves).

Config:
    {"insertion_threshold": 7}   # optional; int >= 0, 0 disables the cutoff
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortkit.engine.api import sort_with
from sortkit.engine.merge import INSERTION_THRESHOLD
from sortkit.ordering.comparators import natural_order

__all__ = ["sort"]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None, comparator: Any = None) -> List[Any]:
    config = config or {}
    threshold = config.get("insertion_threshold", INSERTION_THRESHOLD)
    out = list(a)
    sort_with(out, natural_order() if comparator is None else comparator, insertion_threshold=threshold)
    return out
