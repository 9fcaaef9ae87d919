"""
Stable comparison sort kernels.

Both kernels operate on plain Python lists with a three-way compare function
and only ever move an element past another when the comparison is strictly
greater, which is what makes them stable.

- merge_sort_list: top-down merge sort alternating between the list and an
  equal-content auxiliary copy (no per-level allocation). Runs shorter than
  `threshold` are insertion-sorted and the merge is skipped when both halves
  are already in order, so sorted input costs one comparison per merge.
- insertion_sort_range: O(n^2) insertion sort on items[lo:hi].

Every loop is bounded by the input length, so an inconsistent compare function
yields an unspecified order but always terminates.
"""

from __future__ import annotations

from typing import Any, Callable, List

__all__ = ["INSERTION_THRESHOLD", "merge_sort_list", "insertion_sort_range"]

INSERTION_THRESHOLD: int = 7

CompareFn = Callable[[Any, Any], int]


def insertion_sort_range(items: List[Any], lo: int, hi: int, cmp: CompareFn) -> None:
    """Stable in-place insertion sort of items[lo:hi]."""
    for i in range(lo + 1, hi):
        x = items[i]
        j = i
        while j > lo and cmp(items[j - 1], x) > 0:
            items[j] = items[j - 1]
            j -= 1
        items[j] = x


def merge_sort_list(items: List[Any], cmp: CompareFn, *, threshold: int = INSERTION_THRESHOLD) -> None:
    """Stable in-place merge sort of a list."""
    if not isinstance(threshold, int) or isinstance(threshold, bool) or threshold < 0:
        raise ValueError(f"insertion threshold must be an int >= 0; got {threshold!r}")
    n = len(items)
    if n < 2:
        return
    aux = list(items)
    _merge_sort(aux, items, 0, n, cmp, threshold)


def _merge_sort(src: List[Any], dest: List[Any], lo: int, hi: int, cmp: CompareFn, threshold: int) -> None:
    # Precondition: src[lo:hi] == dest[lo:hi]. Postcondition: dest[lo:hi] sorted.
    length = hi - lo
    if length < 2 or length < threshold:
        insertion_sort_range(dest, lo, hi, cmp)
        return

    mid = (lo + hi) // 2
    _merge_sort(dest, src, lo, mid, cmp, threshold)
    _merge_sort(dest, src, mid, hi, cmp, threshold)

    if cmp(src[mid - 1], src[mid]) <= 0:
        dest[lo:hi] = src[lo:hi]
        return

    i, j = lo, mid
    for k in range(lo, hi):
        if j >= hi or (i < mid and cmp(src[i], src[j]) <= 0):
            dest[k] = src[i]
            i += 1
        else:
            dest[k] = src[j]
            j += 1
