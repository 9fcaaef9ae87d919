"""
Sort engine public API.

Re-export the entry points so callers can write:
    from sortkit.engine import sort_natural, sort_with
"""

from .api import sort_natural, sort_with
from .merge import INSERTION_THRESHOLD, insertion_sort_range, merge_sort_list

__all__ = [
    "sort_natural",
    "sort_with",
    "INSERTION_THRESHOLD",
    "merge_sort_list",
    "insertion_sort_range",
]
