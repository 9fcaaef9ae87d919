"""
External ordering strategies.

A comparator is a frozen, stateless value exposing `compare(a, b) -> int`.
Any number of them may exist for the same element type; callers pick one per
sort call and pass it explicitly.

Public API (stable):
    Comparator
    natural_order() / reverse_order()
    comparing(key, comparator=None)
    from_function(fn)
    nulls_first(comparator=None) / nulls_last(comparator=None)
    as_comparator(obj)

Examples
--------
>>> by_len = comparing(len)
>>> by_len_then_alpha = by_len.then(natural_order())
>>> descending = natural_order().reversed()
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from sortkit.ordering.capability import natural_compare

__all__ = [
    "Comparator",
    "NaturalOrder",
    "ReversedOrder",
    "KeyOrder",
    "ChainedOrder",
    "FunctionOrder",
    "NullsOrder",
    "natural_order",
    "reverse_order",
    "comparing",
    "from_function",
    "nulls_first",
    "nulls_last",
    "as_comparator",
]

CompareFn = Callable[[Any, Any], int]


class Comparator(ABC):
    """Base class for three-way ordering strategies."""

    @abstractmethod
    def compare(self, a: Any, b: Any) -> int:
        """Return <0, 0 or >0 as a orders before, with, or after b."""

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)

    def reversed(self) -> "Comparator":
        return ReversedOrder(self)

    def then(self, other: "Comparator | CompareFn") -> "Comparator":
        """Break ties of this comparator with `other`."""
        return ChainedOrder(self, as_comparator(other))

    def then_comparing(
        self, key: Callable[[Any], Any], comparator: "Comparator | CompareFn | None" = None
    ) -> "Comparator":
        return self.then(comparing(key, comparator))

    def as_key(self) -> Callable[[Any], Any]:
        """Adapt to the `key=` protocol of `sorted`, `min`, `max`, ..."""
        return functools.cmp_to_key(self.compare)


@dataclass(frozen=True)
class NaturalOrder(Comparator):
    def compare(self, a: Any, b: Any) -> int:
        return natural_compare(a, b)


@dataclass(frozen=True)
class ReversedOrder(Comparator):
    base: Comparator

    def compare(self, a: Any, b: Any) -> int:
        # Swap the operands instead of negating: -result breaks on non-int results.
        return self.base.compare(b, a)

    def reversed(self) -> Comparator:
        return self.base


@dataclass(frozen=True)
class KeyOrder(Comparator):
    key: Callable[[Any], Any]
    base: Comparator = NaturalOrder()

    def compare(self, a: Any, b: Any) -> int:
        return self.base.compare(self.key(a), self.key(b))


@dataclass(frozen=True)
class ChainedOrder(Comparator):
    first: Comparator
    second: Comparator

    def compare(self, a: Any, b: Any) -> int:
        r = self.first.compare(a, b)
        if r != 0:
            return r
        return self.second.compare(a, b)


@dataclass(frozen=True)
class FunctionOrder(Comparator):
    fn: CompareFn

    def compare(self, a: Any, b: Any) -> int:
        return self.fn(a, b)


@dataclass(frozen=True)
class NullsOrder(Comparator):
    base: Comparator
    nulls_first: bool = True

    def compare(self, a: Any, b: Any) -> int:
        if a is None or b is None:
            if a is b:
                return 0
            before = -1 if self.nulls_first else 1
            return before if a is None else -before
        return self.base.compare(a, b)


def natural_order() -> Comparator:
    return NaturalOrder()


def reverse_order() -> Comparator:
    return ReversedOrder(NaturalOrder())


def comparing(
    key: Callable[[Any], Any], comparator: "Comparator | CompareFn | None" = None
) -> Comparator:
    """Order values by `key(value)`, using natural order on keys unless `comparator` is given."""
    base = NaturalOrder() if comparator is None else as_comparator(comparator)
    return KeyOrder(key, base)


def from_function(fn: CompareFn) -> Comparator:
    if not callable(fn):
        raise TypeError(f"comparison function must be callable; got {fn!r}")
    return FunctionOrder(fn)


def nulls_first(comparator: "Comparator | CompareFn | None" = None) -> Comparator:
    base = NaturalOrder() if comparator is None else as_comparator(comparator)
    return NullsOrder(base, nulls_first=True)


def nulls_last(comparator: "Comparator | CompareFn | None" = None) -> Comparator:
    base = NaturalOrder() if comparator is None else as_comparator(comparator)
    return NullsOrder(base, nulls_first=False)


def as_comparator(obj: "Comparator | CompareFn | Optional[Any]") -> Comparator:
    """Coerce a Comparator or a two-argument callable into a Comparator."""
    if isinstance(obj, Comparator):
        return obj
    if callable(obj):
        return FunctionOrder(obj)
    raise TypeError(f"expected a Comparator or a callable(a, b) -> int; got {type(obj).__name__}")
