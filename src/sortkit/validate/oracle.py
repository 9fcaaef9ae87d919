"""
Oracle for sorting correctness.

We use Python's built-in `sorted()` as the ground truth:
- Stable, so it also fixes the expected order of equal-comparing elements
- Deterministic and portable
- Accepts any comparator through `functools.cmp_to_key`

Public API (stable):
    oracle_sort(a, comparator=None) -> list
    equals_oracle(a, out, comparator=None) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- comparator=None means natural order.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from sortkit.ordering.comparators import as_comparator, natural_order

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], comparator: Any = None) -> List[Any]:
    """Return a new list with the elements of `a` in stable ascending order."""
    cmp = natural_order() if comparator is None else as_comparator(comparator)
    return sorted(a, key=cmp.as_key())


def equals_oracle(a: Sequence[Any], out: Sequence[Any], comparator: Any = None) -> bool:
    """True iff `out` equals `oracle_sort(a, comparator)` element-wise."""
    return list(out) == oracle_sort(a, comparator)
