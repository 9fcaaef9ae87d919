"""Tests for the oracle, the property helpers and the comparator consistency checker."""

from __future__ import annotations

import numpy as np
import pytest

from sortkit.errors import InconsistentComparator
from sortkit.ordering import comparing, natural_order, reverse_order
from sortkit.validate import (
    assert_no_mutation,
    check_comparator,
    equals_oracle,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    is_stable,
    oracle_sort,
    permutation_counter_diff,
)


def test_oracle_does_not_mutate() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert a == [3, 1, 2]


def test_oracle_with_comparator() -> None:
    assert oracle_sort([1, 3, 2], reverse_order()) == [3, 2, 1]
    assert equals_oracle(["bb", "a"], ["a", "bb"], comparing(len))
    assert not equals_oracle([2, 1], [2, 1])


def test_order_checks() -> None:
    assert is_ordered([])
    assert is_ordered([1, 1, 2])
    assert first_order_violation_index([1, 3, 2, 4]) == 1
    assert is_ordered([3, 2, 2], reverse_order())
    assert first_order_violation_index(["aaa", "b"], comparing(len)) == 0


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert permutation_counter_diff([1, 1, 2], [1, 3]) == {1: 1, 2: 1, 3: -1}
    assert permutation_counter_diff("abc", "cab") == {}


def test_assert_no_mutation() -> None:
    assert_no_mutation([1, 2], [1, 2])
    with pytest.raises(AssertionError, match="index 1"):
        assert_no_mutation([1, 2], [1, 5])
    with pytest.raises(AssertionError, match="length"):
        assert_no_mutation([1], [1, 2])


def test_is_stable_detects_swapped_equal_keys() -> None:
    records = [(1, "a"), (0, "b"), (1, "c")]
    by_key = comparing(lambda r: r[0])
    good = [records[1], records[0], records[2]]
    bad = [records[1], records[2], records[0]]
    assert is_stable(records, good, by_key)
    assert not is_stable(records, bad, by_key)
    assert not is_stable(records, good[:2], by_key)


# ------------------------- consistency checker ------------------------- #


def test_consistent_comparators_pass() -> None:
    rng = np.random.default_rng(0)
    check_comparator(natural_order(), list(range(-20, 20)), rng=rng)
    check_comparator(comparing(len).then(natural_order()), ["a", "bb", "ab", "c", ""], rng=rng)
    check_comparator(natural_order(), [], rng=rng)


def test_reflexivity_violation() -> None:
    with pytest.raises(InconsistentComparator) as exc:
        check_comparator(lambda a, b: 1, [1, 2, 3], rng=np.random.default_rng(1))
    assert exc.value.law == "reflexivity"
    assert isinstance(exc.value, ValueError)


def test_antisymmetry_violation() -> None:
    always_less = lambda a, b: 0 if a == b else -1  # noqa: E731
    with pytest.raises(InconsistentComparator) as exc:
        check_comparator(always_less, [1, 2, 3], rng=np.random.default_rng(2))
    assert exc.value.law == "antisymmetry"


def test_transitivity_violation() -> None:
    beats = {("paper", "rock"), ("scissors", "paper"), ("rock", "scissors")}

    def rps(a: str, b: str) -> int:
        if a == b:
            return 0
        return 1 if (a, b) in beats else -1

    with pytest.raises(InconsistentComparator) as exc:
        check_comparator(rps, ["rock", "paper", "scissors"], rng=np.random.default_rng(3), trials=500)
    assert exc.value.law == "transitivity"
    assert len(exc.value.witness) == 3


def test_negative_trials_rejected() -> None:
    with pytest.raises(ValueError):
        check_comparator(natural_order(), [1], trials=-1)
