"""
Property helpers for validating sorting results.

Public API (stable):
    is_ordered(xs, comparator=None) -> bool
    first_order_violation_index(xs, comparator=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    is_stable(original, result, comparator=None) -> bool

Notes
-----
- Order checks only look at the sign of the comparator, so they work for any
  strategy, natural or external.
- Permutation checks count values and therefore need hashable elements.
- Stability is checked by identity against the stable oracle: two equal ints
  that are the same object are indistinguishable anyway, everything else must
  land in exactly the oracle's position.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Optional, Sequence

from sortkit.ordering.comparators import as_comparator, natural_order
from sortkit.validate.oracle import oracle_sort

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_stable",
]


def is_ordered(xs: Sequence[Any], comparator: Any = None) -> bool:
    """Return True iff compare(xs[i], xs[i+1]) <= 0 for all i."""
    return first_order_violation_index(xs, comparator) is None


def first_order_violation_index(xs: Sequence[Any], comparator: Any = None) -> Optional[int]:
    """
    Return the first index i where xs[i] orders after xs[i+1], or None.

    Useful for precise error messages:
        i = first_order_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]!r} > {out[i+1]!r}"
    """
    cmp = natural_order() if comparator is None else as_comparator(comparator)
    for i in range(len(xs) - 1):
        if cmp.compare(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in a - count in b) for every value whose counts differ.

    An empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are element-wise equal; used to check that an
    algorithm left its input alone.
    """
    if len(before) != len(after):
        raise AssertionError(f"Input mutated: length changed from {len(before)} to {len(after)}")
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def is_stable(original: Sequence[Any], result: Sequence[Any], comparator: Any = None) -> bool:
    """True iff `result` holds the same objects, in the same order, as a stable sort of `original`."""
    expected = oracle_sort(original, comparator)
    if len(expected) != len(result):
        return False
    return all(x is y for x, y in zip(expected, result))
