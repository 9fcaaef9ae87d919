"""
Intrinsic (natural) ordering as a type capability.

A type is orderable when it defines rich comparison itself (ints, floats, str,
tuples, dataclasses with `order=True`, ...) or when it derives from
`Comparable` and implements a single `compare_to`.

Public API (stable):
    Comparable
    is_orderable(value) -> bool
    require_orderable(value) -> None
    natural_compare(a, b) -> int
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from sortkit.errors import NotOrderable
from sortkit.ordering.three_way import Ordering

__all__ = ["Comparable", "is_orderable", "require_orderable", "natural_compare"]


class Comparable(ABC):
    """
    Mixin for types whose natural ordering is a three-way `compare_to`.

    The ordering operators are derived from `compare_to`; equality and hashing
    are left to the subclass.
    """

    __slots__ = ()

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        """Return a negative, zero or positive int as self is less than, equal to or greater than other."""

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Comparable):
            return NotImplemented
        return self.compare_to(other) >= 0


def is_orderable(value: Any) -> bool:
    """Return True iff `value`'s type defines an intrinsic ordering."""
    if isinstance(value, Comparable):
        return True
    # dict, complex, ... carry __lt__ slots that only return NotImplemented,
    # and numpy arrays return arrays with no truth value, so probe the operator
    # instead of inspecting the type.
    try:
        bool(value < value)
    except (TypeError, ValueError):
        return False
    return True


def require_orderable(value: Any) -> None:
    """Raise NotOrderable unless `value` has an intrinsic ordering."""
    if not is_orderable(value):
        raise NotOrderable(type(value).__name__)


def natural_compare(a: Any, b: Any) -> int:
    """
    Three-way compare `a` and `b` by their natural ordering.

    Raises
    ------
    NotOrderable
        If the pair cannot be ordered, e.g. the type defines no ordering or the
        two values are of incomparable types. The outcome does not depend on
        argument order.
    """
    if isinstance(a, Comparable) or isinstance(b, Comparable):
        # compare_to is only defined between related Comparable types.
        related = isinstance(b, type(a)) or isinstance(a, type(b))
        if not (isinstance(a, Comparable) and isinstance(b, Comparable) and related):
            raise NotOrderable(_pair_name(a, b))
        return int(Ordering.of(a.compare_to(b)))
    try:
        return int(Ordering.cmp(a, b))
    except (TypeError, ValueError) as e:
        raise NotOrderable(_pair_name(a, b), str(e)) from e


def _pair_name(a: Any, b: Any) -> str:
    ta, tb = type(a).__name__, type(b).__name__
    return ta if ta == tb else f"{ta}/{tb}"
