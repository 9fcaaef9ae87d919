"""Stable O(n^2) insertion sort baseline. Config is unused."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortkit.engine.merge import insertion_sort_range
from sortkit.ordering.comparators import as_comparator, natural_order

__all__ = ["sort"]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None, comparator: Any = None) -> List[Any]:
    cmp = natural_order() if comparator is None else as_comparator(comparator)
    out = list(a)
    insertion_sort_range(out, 0, len(out), cmp.compare)
    return out
