"""
Tests for three-way results, intrinsic ordering and comparator combinators.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from sortkit.engine import sort_natural
from sortkit.errors import NotOrderable, SortkitError
from sortkit.ordering import (
    Comparable,
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


@dataclass(frozen=True)
class Version(Comparable):
    major: int
    minor: int

    def compare_to(self, other: "Version") -> int:
        return Ordering.cmp((self.major, self.minor), (other.major, other.minor))


@dataclass(frozen=True)
class Employee:
    name: str
    age: int
    salary: int


class Opaque:
    pass


# ------------------------- Ordering ------------------------- #


@pytest.mark.parametrize("value, expected", [(-42, Ordering.LESS), (0, Ordering.EQUAL), (7, Ordering.GREATER)])
def test_of_uses_sign_only(value: int, expected: Ordering) -> None:
    assert Ordering.of(value) is expected


def test_cmp_wide_ints_do_not_overflow() -> None:
    big = 2**200
    assert Ordering.cmp(-big, big) is Ordering.LESS
    assert Ordering.cmp(big + 1, big) is Ordering.GREATER
    assert Ordering.cmp(Decimal("0.1"), Decimal("0.10")) is Ordering.EQUAL


def test_reverse() -> None:
    assert Ordering.LESS.reverse() is Ordering.GREATER
    assert Ordering.EQUAL.reverse() is Ordering.EQUAL


# ------------------------- intrinsic ordering ------------------------- #


@pytest.mark.parametrize("value", [1, 2.5, "text", (1, "a"), Decimal("3"), Version(1, 0)])
def test_orderable_values(value) -> None:
    assert is_orderable(value)


@pytest.mark.parametrize("value", [Opaque(), None, {"a": 1}, object(), complex(1, 2)])
def test_unorderable_values(value) -> None:
    assert not is_orderable(value)


def test_comparable_mixin_derives_operators() -> None:
    a, b = Version(1, 2), Version(1, 10)
    assert a < b and a <= b and b > a and b >= a
    assert natural_compare(a, b) == -1
    assert natural_compare(b, a) == 1
    assert natural_compare(a, Version(1, 2)) == 0


def test_natural_compare_mixed_types_raises() -> None:
    with pytest.raises(NotOrderable) as exc:
        natural_compare(1, "a")
    assert isinstance(exc.value, TypeError)
    assert isinstance(exc.value, SortkitError)
    assert exc.value.type_name == "int/str"


def test_natural_compare_no_ordering_raises() -> None:
    with pytest.raises(NotOrderable):
        natural_compare(Opaque(), Opaque())


@pytest.mark.parametrize(
    "a, b",
    [
        (5, Version(1, 0)),
        (Version(1, 0), 5),
        (Version(1, 0), object()),
        (object(), Version(1, 0)),
    ],
)
def test_comparable_against_unrelated_type_raises_either_order(a, b) -> None:
    with pytest.raises(NotOrderable) as exc:
        natural_compare(a, b)
    assert "Version" in exc.value.type_name


def test_sort_natural_comparable_mixed_with_int_raises() -> None:
    items = [Version(1, 0), 5]
    with pytest.raises(NotOrderable):
        sort_natural(items)
    assert items == [Version(1, 0), 5]


def test_arrays_without_truth_value_are_not_orderable() -> None:
    arr = np.arange(3)
    assert not is_orderable(arr)
    with pytest.raises(NotOrderable):
        natural_compare(arr, np.arange(3))
    with pytest.raises(NotOrderable):
        sort_natural([arr])


# ------------------------- comparators ------------------------- #


def test_natural_and_reverse() -> None:
    assert natural_order()(1, 2) < 0
    assert reverse_order()(1, 2) > 0
    assert reverse_order()("b", "b") == 0


def test_double_reverse_is_identity() -> None:
    by_age = comparing(lambda e: e.age)
    assert by_age.reversed().reversed() is by_age
    assert natural_order().reversed().reversed() == natural_order()


def test_multiple_comparators_per_type() -> None:
    alice = Employee("alice", 40, 100)
    bob = Employee("bob", 30, 200)
    by_age = comparing(lambda e: e.age)
    by_salary = comparing(lambda e: e.salary)
    assert by_age(alice, bob) > 0
    assert by_salary(alice, bob) < 0


def test_then_breaks_ties() -> None:
    a = Employee("ann", 30, 1)
    b = Employee("ben", 30, 1)
    cmp = comparing(lambda e: e.age).then_comparing(lambda e: e.name)
    assert cmp(a, b) < 0
    assert cmp(b, a) > 0
    assert cmp(a, a) == 0


def test_comparing_with_key_comparator() -> None:
    by_name_desc = comparing(lambda e: e.name, reverse_order())
    assert by_name_desc(Employee("a", 1, 1), Employee("b", 1, 1)) > 0


def test_nulls_first_and_last() -> None:
    assert nulls_first()(None, 1) < 0
    assert nulls_first()(1, None) > 0
    assert nulls_last()(None, 1) > 0
    assert nulls_last()(None, None) == 0
    assert nulls_last(reverse_order())(1, 2) > 0


def test_from_function_and_as_comparator() -> None:
    by_len = from_function(lambda a, b: len(a) - len(b))
    assert by_len("aa", "b") > 0
    assert as_comparator(by_len) is by_len
    assert as_comparator(lambda a, b: 0)("x", "y") == 0
    with pytest.raises(TypeError):
        as_comparator(42)
    with pytest.raises(TypeError):
        from_function("not callable")


def test_as_key_matches_builtin_sorted() -> None:
    words = ["pear", "fig", "apple", "kiwi"]
    assert sorted(words, key=comparing(len).then(natural_order()).as_key()) == ["fig", "kiwi", "pear", "apple"]


@settings(deadline=None, max_examples=100)
@given(st.integers(), st.integers())
def test_antisymmetry_natural(a: int, b: int) -> None:
    cmp = natural_order()
    assert Ordering.of(cmp(a, b)) is Ordering.of(cmp(b, a)).reverse()


@settings(deadline=None, max_examples=100)
@given(st.integers(), st.integers(), st.integers())
def test_transitivity_natural(a: int, b: int, c: int) -> None:
    cmp = natural_order()
    if cmp(a, b) < 0 and cmp(b, c) < 0:
        assert cmp(a, c) < 0
