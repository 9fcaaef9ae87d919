"""sortkit exception classes."""

from __future__ import annotations

from typing import Any, Tuple

__all__ = ["SortkitError", "NotOrderable", "InconsistentComparator"]


class SortkitError(Exception):
    """Base class for all sortkit exceptions."""


class NotOrderable(SortkitError, TypeError):
    """Natural-order sort requested on values that define no intrinsic ordering."""

    def __init__(self, type_name: str, detail: str | None = None) -> None:
        self.type_name = type_name
        msg = f"values of type {type_name!r} have no natural ordering; use sort_with() and a comparator"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class InconsistentComparator(SortkitError, ValueError):
    """A comparator broke reflexivity, antisymmetry or transitivity on sampled values."""

    def __init__(self, law: str, witness: Tuple[Any, ...]) -> None:
        self.law = law
        self.witness = witness
        super().__init__(f"comparator violates {law} on {witness!r}")
