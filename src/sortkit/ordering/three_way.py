"""
Three-way comparison results.

A comparison yields a signed int whose sign alone carries meaning. `Ordering`
names the normalized values so callers can write `Ordering.of(x) is Ordering.LESS`
instead of testing signs by hand.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

__all__ = ["Ordering"]


class Ordering(IntEnum):
    """
    Normalized three-way result: `LESS` (-1), `EQUAL` (0), `GREATER` (1).
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> "Ordering":
        """Collapse any signed comparison result onto its sign."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def cmp(cls, a: Any, b: Any) -> "Ordering":
        """
        Compare two values with relational operators.

        Operands are never subtracted, so wide ints, floats and Decimals compare
        without overflow or rounding artifacts.
        """
        if a < b:
            return cls.LESS
        if b < a:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        return Ordering(-int(self))
