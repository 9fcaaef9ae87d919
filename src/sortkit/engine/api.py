"""
Sort engine entry points.

Public API (stable):
    sort_natural(seq) -> seq
    sort_with(seq, comparator, *, insertion_threshold=7) -> seq

Conventions:
- A MutableSequence (list, bytearray, collections.UserList, ...) is reordered
  in place and the same object is returned.
- Any other sequence (tuple, str, range, numpy array, ...) is left untouched
  and a new list is returned.
- Ordering is ascending with respect to the strategy and stable for elements
  that compare equal. Descending order means passing a reversed comparator.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, Callable, List, Sequence, TypeVar, Union

from sortkit.engine.merge import INSERTION_THRESHOLD, merge_sort_list
from sortkit.ordering.capability import require_orderable
from sortkit.ordering.comparators import Comparator, as_comparator, natural_order

__all__ = ["sort_natural", "sort_with"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sort_natural(seq: Sequence[T]) -> Union[Sequence[T], List[T]]:
    """
    Sort `seq` ascending by the elements' intrinsic ordering.

    Raises
    ------
    NotOrderable
        If any element's type defines no natural ordering, or two elements
        cannot be compared with each other. The capability is checked for
        every element before sorting, so even a one-element sequence fails.
    """
    work: List[Any] = list(seq)
    for item in work:
        require_orderable(item)
    return _sort_into(seq, work, natural_order(), INSERTION_THRESHOLD)


def sort_with(
    seq: Sequence[T],
    comparator: Union[Comparator, Callable[[T, T], int]],
    *,
    insertion_threshold: int = INSERTION_THRESHOLD,
) -> Union[Sequence[T], List[T]]:
    """
    Sort `seq` ascending according to `comparator`.

    Parameters
    ----------
    seq : sequence
        Finite input. Mutable sequences are reordered in place.
    comparator : Comparator or callable(a, b) -> int
        Three-way ordering strategy; only the sign of its result is used.
    insertion_threshold : int
        Runs shorter than this are insertion-sorted inside the merge sort.

    Returns
    -------
    The same object for mutable input, otherwise a new list.
    """
    cmp = as_comparator(comparator)
    return _sort_into(seq, list(seq), cmp, insertion_threshold)


def _sort_into(seq: Sequence[Any], work: List[Any], cmp: Comparator, threshold: int) -> Any:
    # `work` is the already-materialized copy of `seq`; seq is only written on success.
    logger.debug("sorting %d items with %r", len(work), cmp)
    merge_sort_list(work, cmp.compare, threshold=threshold)

    if isinstance(seq, MutableSequence):
        if isinstance(seq, list):
            seq[:] = work
        else:
            for i, v in enumerate(work):
                seq[i] = v
        return seq
    return work
