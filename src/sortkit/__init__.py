"""
sortkit: pluggable ordering strategies and a stable sort engine.

    from sortkit import sort_natural, sort_with, comparing

    sort_natural([7, 12, -4, 7, 0])                    # [-4, 0, 7, 7, 12]
    sort_with(["fred", "bob", "albert"], comparing(len))
"""

from sortkit.engine import sort_natural, sort_with
from sortkit.errors import InconsistentComparator, NotOrderable, SortkitError
from sortkit.ordering import (
    Comparable,
    Comparator,
    Ordering,
    as_comparator,
    comparing,
    from_function,
    is_orderable,
    natural_compare,
    natural_order,
    nulls_first,
    nulls_last,
    reverse_order,
)

__version__ = "0.1.0"

__all__ = [
    "sort_natural",
    "sort_with",
    "SortkitError",
    "NotOrderable",
    "InconsistentComparator",
    "Ordering",
    "Comparable",
    "Comparator",
    "is_orderable",
    "natural_compare",
    "natural_order",
    "reverse_order",
    "comparing",
    "from_function",
    "nulls_first",
    "nulls_last",
    "as_comparator",
]
