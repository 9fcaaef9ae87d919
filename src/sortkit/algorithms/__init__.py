"""
Benchmarkable sorting algorithms.

Every module in this package exposes the same entry point:

    sort(a: list, *, config: dict | None = None, comparator=None) -> list

Contract:
- `a` is never mutated; a new list is returned.
- `comparator` is a Comparator or callable(a, b) -> int; None means natural order.
- The result is stable with respect to `comparator`.

The benchmark runner resolves algorithms by module name
(`sortkit.algorithms.<name>`).
"""

AVAILABLE_ALGORITHMS = ("builtin_timsort", "merge_sort", "insertion_sort")

__all__ = ["AVAILABLE_ALGORITHMS"]
