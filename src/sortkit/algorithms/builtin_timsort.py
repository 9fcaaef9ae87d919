"""Reference algorithm: Python's built-in Timsort through a comparator key adapter."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sortkit.ordering.comparators import as_comparator, natural_order

__all__ = ["sort"]


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None, comparator: Any = None) -> List[Any]:
    cmp = natural_order() if comparator is None else as_comparator(comparator)
    return sorted(a, key=cmp.as_key())
