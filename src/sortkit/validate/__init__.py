"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_ordered
        first_order_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation
        is_stable

    - Comparator diagnostics:
        check_comparator
"""

from .consistency import check_comparator
from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_stable",
    "check_comparator",
]
