"""
Ordering strategies public API.

Re-exports:
    - Three-way results:
        Ordering
    - Intrinsic ordering:
        Comparable, is_orderable, require_orderable, natural_compare
    - External comparators:
        Comparator, natural_order, reverse_order, comparing, from_function,
        nulls_first, nulls_last, as_comparator
"""

from .capability import Comparable, is_orderable, natural_compare, require_orderable
from .comparators import (
    Comparator,
    as_comparator,
    comparing,
    from_function,
    natural_order,
    nulls_first,
    nulls_last,
    reverse_order,
)
from .three_way import Ordering

__all__ = [
    "Ordering",
    "Comparable",
    "is_orderable",
    "require_orderable",
    "natural_compare",
    "Comparator",
    "natural_order",
    "reverse_order",
    "comparing",
    "from_function",
    "nulls_first",
    "nulls_last",
    "as_comparator",
]
