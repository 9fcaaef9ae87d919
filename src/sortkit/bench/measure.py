"""
Timing harness for sorting algorithms.

We measure exactly one call to an algorithm's
`sort(a, config=..., comparator=...)` per sample, using a monotonic
high-resolution clock. Copying, GC control, warmup and output validation all
happen outside the timed block.

The strategy handed to the algorithm is wrapped in a `CountingComparator`, so
each sample also records how many comparisons the call made. Counting adds a
constant per-comparison overhead that is identical for every algorithm.

Public API (stable):
    CountingComparator
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "comparisons": list[int],           # comparisons for each completed sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # populated for "error" and "invalid"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from sortkit.ordering.comparators import Comparator, as_comparator, natural_order
from sortkit.validate.properties import first_order_violation_index, is_permutation

__all__ = ["CountingComparator", "time_sort_call"]


class CountingComparator(Comparator):
    """Delegating comparator that counts calls to `compare`."""

    def __init__(self, base: Comparator) -> None:
        self.base = base
        self.count = 0

    def compare(self, a: Any, b: Any) -> int:
        self.count += 1
        return self.base.compare(a, b)

    def reset(self) -> None:
        self.count = 0

    def __repr__(self) -> str:
        return f"CountingComparator({self.base!r}, count={self.count})"


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
    comparator: Any = None,
    validate: bool = False,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config, comparator=...)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., list]
        Callable with signature sort(a, *, config=None, comparator=None).
    a : list
        Input array. The algorithm must not mutate it.
    config : dict | None
        Algorithm configuration passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold; exceeding it sets status="timeout" and stops sampling.
    defensive_copy : bool
        If True, copy the input outside each timed call.
    comparator : Comparator | callable | None
        Ordering strategy; None means natural order.
    validate : bool
        If True, check every output for order and permutation; a failure sets
        status="invalid" and stops sampling.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    strategy = natural_order() if comparator is None else as_comparator(comparator)
    counter = CountingComparator(strategy)

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "comparisons": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup and repeats > 0:
        try:
            algo_fn(list(a) if defensive_copy else a, config=config, comparator=strategy)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    # ---- GC control ----
    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a) if defensive_copy else a
            counter.reset()
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, config=config, comparator=counter)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["comparisons"].append(counter.count)

            if validate:
                problem = _check_output(a, out, strategy)
                if problem is not None:
                    result["status"] = "invalid"
                    result["error"] = f"repeat {r}: {problem}"
                    break

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result


def _check_output(a: List[Any], out: List[Any], strategy: Comparator) -> Optional[str]:
    i = first_order_violation_index(out, strategy)
    if i is not None:
        return f"out of order at index {i}: {out[i]!r} > {out[i + 1]!r}"
    if not is_permutation(a, out):
        return "output is not a permutation of the input"
    return None
