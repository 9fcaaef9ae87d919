"""
Probabilistic consistency check for comparators.

A comparator that is not a strict weak ordering never hangs the engine, but it
makes the output order meaningless. `check_comparator` samples triples from
user-supplied values and tests the three laws on each:

    reflexivity    compare(a, a) == 0
    antisymmetry   sign(compare(a, b)) == -sign(compare(b, a))
    transitivity   a <= b and b <= c  implies  a <= c

Passing is evidence, not proof.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np

from sortkit.errors import InconsistentComparator
from sortkit.ordering.comparators import as_comparator
from sortkit.ordering.three_way import Ordering

__all__ = ["check_comparator"]

logger = logging.getLogger(__name__)


def check_comparator(
    comparator: Any,
    samples: Sequence[Any],
    rng: Optional[np.random.Generator] = None,
    trials: int = 200,
) -> None:
    """
    Raise InconsistentComparator if a sampled triple violates an ordering law.

    Parameters
    ----------
    comparator : Comparator or callable(a, b) -> int
    samples : sequence
        Values to draw triples from (with replacement).
    rng : numpy.random.Generator, optional
        Random source; a fresh unseeded generator is used if omitted.
    trials : int
        Number of triples to test.
    """
    if trials < 0:
        raise ValueError("trials must be nonnegative")
    cmp = as_comparator(comparator)
    n = len(samples)
    if n == 0 or trials == 0:
        return
    rng = rng if rng is not None else np.random.default_rng()

    for i, j, k in rng.integers(0, n, size=(trials, 3)).tolist():
        a, b, c = samples[i], samples[j], samples[k]

        if cmp.compare(a, a) != 0:
            raise InconsistentComparator("reflexivity", (a,))

        ab = Ordering.of(cmp.compare(a, b))
        if ab is not Ordering.of(cmp.compare(b, a)).reverse():
            raise InconsistentComparator("antisymmetry", (a, b))

        if ab <= 0 and Ordering.of(cmp.compare(b, c)) <= 0 and cmp.compare(a, c) > 0:
            raise InconsistentComparator("transitivity", (a, b, c))

    logger.debug("comparator %r passed %d sampled triples", cmp, trials)
