"""
Benchmark harness public API.

Re-exports:
    time_sort_call, CountingComparator   (timing + comparison counting)
    run_experiment                       (YAML-driven sweep)
"""

from .measure import CountingComparator, time_sort_call
from .runner import ExperimentConfig, run_experiment

__all__ = ["CountingComparator", "time_sort_call", "ExperimentConfig", "run_experiment"]
