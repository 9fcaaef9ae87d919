"""
Experiment runner: orchestrates a full benchmarking sweep from a YAML config.

Usage (from repo root):
    sortkit-bench experiments/configs/01_random_scaling.yaml
    python -m sortkit.bench.runner experiments/configs/01_random_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR time, median comparisons per (algo, n)
    - (console) rich summary table

Design notes:
- For each size n, we generate ONE dataset and give the same input to every algorithm.
- The ordering strategy comes from the `order` key: natural order or its reversal.
- On timeout/error/invalid output for an algorithm at size n, we skip larger sizes for that algo.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from sortkit.bench.measure import time_sort_call
from sortkit.datasets import SUPPORTED_DISTS, make_dataset
from sortkit.ordering.comparators import Comparator, natural_order, reverse_order

logger = logging.getLogger(__name__)

_console = Console()

_ORDERS = {"ascending": natural_order, "descending": reverse_order}

_SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "median_comparisons"]


# ------------------------- data structures ------------------------- #


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: List[int]
    algorithms: List[Dict[str, Any]]
    order: str = "ascending"
    validate: bool = True
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    REQUIRED = (
        "experiment_name",
        "output_dir",
        "seed",
        "repeats",
        "warmup",
        "disable_gc",
        "timeout_seconds",
        "dataset",
        "sizes",
        "algorithms",
    )

    @classmethod
    def from_dict(cls, cfg: Any) -> "ExperimentConfig":
        if not isinstance(cfg, dict):
            raise ValueError("Experiment config must be a YAML mapping")
        missing = [k for k in cls.REQUIRED if k not in cfg]
        if missing:
            raise ValueError(f"Missing required config keys: {missing}")

        sizes = [int(n) for n in cfg["sizes"]]
        if not sizes or any(n < 0 for n in sizes):
            raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

        dataset = dict(cfg["dataset"])
        if dataset.get("dist") not in SUPPORTED_DISTS:
            raise ValueError(f"Unsupported dataset dist: {dataset.get('dist')!r}. Supported: {sorted(SUPPORTED_DISTS)}")

        order = str(cfg.get("order", "ascending"))
        if order not in _ORDERS:
            raise ValueError(f"Config 'order' must be one of {sorted(_ORDERS)}; got {order!r}")

        algorithms = list(cfg["algorithms"])
        if not algorithms:
            raise ValueError("Config 'algorithms' must be a non-empty list")

        return cls(
            experiment_name=str(cfg["experiment_name"]),
            output_dir=Path(cfg["output_dir"]),
            seed=int(cfg["seed"]),
            repeats=int(cfg["repeats"]),
            warmup=bool(cfg["warmup"]),
            disable_gc=bool(cfg["disable_gc"]),
            timeout_seconds=float(cfg["timeout_seconds"]),
            dataset=dataset,
            sizes=sizes,
            algorithms=algorithms,
            order=order,
            validate=bool(cfg.get("validate", True)),
            raw=cfg,
        )

    def comparator(self) -> Comparator:
        return _ORDERS[self.order]()


# ------------------------- helpers: IO & meta ------------------------- #


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stem = f"{_timestamp()}_{experiment_name}"
    run_dir = base_dir / stem
    suffix = 1
    # Two runs within the same second must not collide.
    while run_dir.exists():
        run_dir = base_dir / f"{stem}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name", None) if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        try:
            mod = importlib.import_module(f"sortkit.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module 'sortkit.algorithms.{name}': {e!r}") from e

        if not callable(getattr(mod, "sort", None)):
            raise AttributeError(
                f"Algorithm module '{name}' must define a callable `sort(a, *, config=None, comparator=None)`"
            )

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=name, sort_fn=mod.sort, config=config))
    return specs


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    empty = pd.DataFrame(columns=_SUMMARY_COLUMNS)
    if not jsonl_path.exists() or jsonl_path.stat().st_size == 0:
        return empty
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return empty
    df = df[df["time_ns"].notna()]
    if df.empty:
        return empty

    out = df.groupby(["algo", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        q1_ns=("time_ns", lambda s: s.quantile(0.25)),
        q3_ns=("time_ns", lambda s: s.quantile(0.75)),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
        median_comparisons=("comparisons", "median"),
    )
    out["iqr_ns"] = out["q3_ns"] - out["q1_ns"]
    int_cols = ["n", "median_ns", "iqr_ns", "min_ns", "max_ns", "median_comparisons"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms / median comparisons)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, int]] = []
    for npick in dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]):
        picks.append((f"n={npick}", npick))
        table.add_column(f"n={npick}", justify="right")

    def _format_cell(median_ns: int, iqr_ns: int, comparisons: int) -> str:
        return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f} / {comparisons}"

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                row.append(
                    _format_cell(
                        int(s["median_ns"].values[0]),
                        int(s["iqr_ns"].values[0]),
                        int(s["median_comparisons"].values[0]),
                    )
                )
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #


def run_experiment(config_path: Path) -> Path:
    cfg = ExperimentConfig.from_dict(_load_yaml(config_path))

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    resolved = dict(cfg.raw)
    resolved.update(order=cfg.order, validate=cfg.validate)
    _write_yaml(resolved, cfg_resolved_path)

    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    algos = _resolve_algorithms(cfg.algorithms)
    comparator = cfg.comparator()
    rng = np.random.default_rng(cfg.seed)
    per_algo_skip = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name} ({cfg.order})")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    _console.print()

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, cfg.dataset, rng)

        for a_spec in algos:
            if per_algo_skip[a_spec.name]:
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
                defensive_copy=True,
                comparator=comparator,
                validate=cfg.validate,
            )

            for trial_idx, (t_ns, n_cmp) in enumerate(zip(res["samples_ns"], res["comparisons"])):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": cfg.dataset,
                        "order": cfg.order,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "comparisons": int(n_cmp),
                        "config": a_spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                per_algo_skip[a_spec.name] = True
                logger.warning("%s stopped at n=%d: %s %s", a_spec.name, n, status, res.get("error") or "")
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": status,
                        "error": res.get("error"),
                        "timed_out_on_repeat": res.get("timed_out_on_repeat"),
                        "config": a_spec.config,
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_rich_summary(summary_df, cfg.sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
