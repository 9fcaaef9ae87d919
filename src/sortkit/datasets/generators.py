"""
Dataset generators for sort inputs.

Distributions:
- "random":        ints drawn uniformly from params["range"] (inclusive, required).
- "nearly_sorted": [0..n-1] degraded by ceil(swap_frac * n) random swaps.
- "few_uniques":   at most k distinct ints from an optional inclusive range.
- "reversed":      [n-1, ..., 0]; ignores params and RNG.
- "words":         lowercase ASCII strings of length 1..max_len.
- "keyed":         (key, tag) tuples; keys from a small inclusive range and
                   tag == original position, so equal keys stay
                   distinguishable for stability checks.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list

Conventions:
- The caller owns the RNG (seeded upstream) so runs are reproducible.
- Results are plain Python lists of Python scalars; nothing downstream sees NumPy types.
"""

from __future__ import annotations

import string
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_LETTERS = np.array(list(string.ascii_lowercase))


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Generate a dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; see the module docstring.
    rng : numpy.random.Generator
        Random source owned by the caller.

    Raises
    ------
    ValueError
        If `n` or `spec` is invalid or the distribution is unsupported.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    gen = _GENERATORS.get(dist)
    if gen is None:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(n, params, rng)


# ------------------------- generators ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range(params["range"], "random")
    if n == 0:
        return []
    # integers() is half-open; +1 makes hi inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_fraction(params.get("swap_frac", 0.05), "nearly_sorted.params.swap_frac")
    arr = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps <= 0:
        return arr
    idxs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in idxs.tolist():
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", (0, 2**32 - 1)), "few_uniques")
    if n == 0:
        return []
    actual_k = min(k, n, hi - lo + 1)

    # Draw with the caller's RNG until actual_k distinct values are collected.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        need = actual_k - len(chosen)
        for v in rng.integers(lo, hi + 1, size=need * 2, dtype=np.int64).tolist():
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break

    return [chosen[t] for t in rng.integers(0, actual_k, size=n).tolist()]


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _words(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[str]:
    max_len = params.get("max_len", 8)
    if not _is_int_like(max_len) or int(max_len) < 1:
        raise ValueError(f"words.params.max_len must be an integer >= 1; got {max_len!r}")
    if n == 0:
        return []
    lengths = rng.integers(1, int(max_len) + 1, size=n)
    letters = rng.integers(0, len(_LETTERS), size=int(lengths.sum()))
    out: List[str] = []
    pos = 0
    for length in lengths.tolist():
        out.append("".join(_LETTERS[letters[pos:pos + length]].tolist()))
        pos += length
    return out


def _keyed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[Tuple[int, int]]:
    lo, hi = _parse_range(params.get("key_range", (0, 9)), "keyed")
    if n == 0:
        return []
    keys = rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()
    return [(key, tag) for tag, key in enumerate(keys)]


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[Any]]] = {
    "random": _random,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "reversed": _reversed,
    "words": _words,
    "keyed": _keyed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(spec: Any, dist: str) -> Tuple[int, int]:
    """Parse an inclusive [min, max] pair."""
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}: range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}: range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}: range invalid, min > max ({lo} > {hi})")
    return lo, hi


def _parse_fraction(val: Any, name: str) -> float:
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a float in [0.0, 1.0]; got {val!r}") from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"{name} must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
