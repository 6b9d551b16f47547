"""
Orchestrator for running one logging strategy across the repetition sweep.

Usage (example from CLI):
    from debuglog_bench.orchestrator import RunConfig, run_benchmark

    results = run_benchmark(RunConfig(strategy_name="guarded_check", sweep=[10, 100]))
    print(results)

When `results_dir` is set, outputs are saved there:
- `<results_dir>/latest.json` (last run)
- `<results_dir>/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from debuglog_bench.config import get_settings
from debuglog_bench.domain.generator import generate_records
from debuglog_bench.strategies.abstract import LoggingStrategy, StrategyResult
from debuglog_bench.strategies.deferred_evaluation import DeferredEvaluationStrategy
from debuglog_bench.strategies.eager_formatted_deferred import EagerFormattedDeferredStrategy
from debuglog_bench.strategies.guarded_check import GuardedCheckStrategy
from debuglog_bench.strategies.precomputed_flag import PrecomputedFlagStrategy
from debuglog_bench.utils.logging import get_logger, get_payload_logger
from debuglog_bench.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)

BANNER = "Debug logging benchmark: comparing idioms for disabled debug statements"

# CamelCase names and the legacy enum identifiers, keyed by normalized form.
_ALIASES: Dict[str, str] = {
    "guardedcheck": "guarded_check",
    "isdebugenabled": "guarded_check",
    "deferredevaluation": "deferred_evaluation",
    "lambda": "deferred_evaluation",
    "eagerformatteddeferred": "eager_formatted_deferred",
    "lambdawithstringformat": "eager_formatted_deferred",
    "precomputedstaticflag": "precomputed_static_flag",
    "staticisdebugenabled": "precomputed_static_flag",
}


@dataclass
class RunConfig:
    """
    Parameters for a single benchmark run.

    Fields left as None fall back to `Settings`.
    """

    strategy_name: Optional[str] = None
    dataset_size: Optional[int] = None
    sweep: Optional[Sequence[int]] = None
    seed: Optional[int] = None
    results_dir: Optional[Path | str] = None
    sample_memory: Optional[bool] = None


def _round_float(value: float, decimals: int = 3) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def _strategy_factories(
    logger: logging.Logger, debug_enabled: bool
) -> Dict[str, Callable[[], LoggingStrategy]]:
    """Registry of available strategies."""
    return {
        "guarded_check": lambda: GuardedCheckStrategy(logger=logger),
        "deferred_evaluation": lambda: DeferredEvaluationStrategy(logger=logger),
        "eager_formatted_deferred": lambda: EagerFormattedDeferredStrategy(logger=logger),
        "precomputed_static_flag": lambda: PrecomputedFlagStrategy(
            debug_enabled=debug_enabled, logger=logger
        ),
    }


def available_strategies() -> List[str]:
    """List available strategy names."""
    return sorted(_strategy_factories(get_payload_logger(), False).keys())


def canonical_name(name: str) -> Optional[str]:
    """Map a user-supplied strategy name to its registry key, or None if unknown."""
    names = available_strategies()
    if name in names:
        return name
    normalized = _normalize(name)
    for candidate in names:
        if _normalize(candidate) == normalized:
            return candidate
    return _ALIASES.get(normalized)


def resolve_strategy(
    name: str, logger: logging.Logger, debug_enabled: bool
) -> LoggingStrategy:
    factories = _strategy_factories(logger, debug_enabled)
    key = canonical_name(name)
    if key is None or key not in factories:
        raise ValueError(f"Unknown logging strategy '{name}'. Available: {', '.join(factories)}")
    return factories[key]()


def _persist_results(payload: dict, results_dir: Path) -> None:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    with latest_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    with archive_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})


def _merge_result(result: StrategyResult, stats: ProfileStats) -> dict:
    """Merge strategy counters with profiler stats, rounding floats for readability."""
    merged = dict(result)
    merged.setdefault("attempts", 0)
    merged["elapsed_ms"] = _round_float(stats.elapsed_ms)
    merged["attempts_per_sec"] = (
        _round_float(merged["attempts"] / stats.duration_seconds, 2)
        if stats.duration_seconds > 0
        else 0.0
    )
    merged["peak_rss_bytes"] = stats.peak_rss_bytes
    merged["cpu_percent"] = (
        _round_float(stats.cpu_percent, 1) if stats.cpu_percent is not None else None
    )
    merged["profile"] = {
        "label": stats.label,
        "start_ts": _round_float(stats.start_ts),
        "end_ts": _round_float(stats.end_ts),
        "duration_seconds": _round_float(stats.duration_seconds, 6),
    }
    return merged


def run_benchmark(
    config: Optional[RunConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> List[dict]:
    """
    Run the selected strategy across the repetition sweep.

    Parameters
    ----------
    config : RunConfig | None
        Run parameters; unset fields fall back to settings.
    logger : logging.Logger | None
        Logger the strategy emits on. Defaults to the payload logger.

    Returns
    -------
    List[dict]
        One result per sweep point, in sweep order. Empty when the strategy name
        is missing or unknown.
    """
    config = config or RunConfig()
    settings = get_settings()
    payload_logger = logger if logger is not None else get_payload_logger()

    dataset_size = (
        config.dataset_size if config.dataset_size is not None else settings.benchmark_dataset_size
    )
    sweep = list(config.sweep) if config.sweep is not None else list(settings.benchmark_sweep)
    seed = config.seed if config.seed is not None else settings.benchmark_seed
    sample_memory = (
        config.sample_memory
        if config.sample_memory is not None
        else settings.benchmark_profile_memory
    )

    log.info(BANNER)

    # Snapshot taken once; never refreshed for the rest of the run.
    debug_enabled = payload_logger.isEnabledFor(logging.DEBUG)

    if not config.strategy_name:
        log.error("Please provide a logging strategy: %s", ", ".join(available_strategies()))
        return []

    try:
        strategy = resolve_strategy(config.strategy_name, payload_logger, debug_enabled)
    except ValueError:
        log.error("Unknown logging strategy: %s", config.strategy_name)
        return []

    dataset = generate_records(dataset_size, seed=seed)
    log.debug(
        "Dataset of %d records created", len(dataset), extra={"dataset_size": len(dataset)}
    )

    log.info("%s", strategy.describe(), extra={"strategy": strategy.name})

    results: List[dict] = []
    for repetitions in sweep:
        log.info("repetition count = %d", repetitions, extra={"repetitions": repetitions})
        with profile_block(
            f"{strategy.name} x{repetitions}", sample_memory=sample_memory
        ) as stats:
            result = strategy.execute(dataset, repetitions)
        merged = _merge_result(result, stats)
        results.append(merged)
        log.info(
            "elapsed time = %.3f ms",
            stats.elapsed_ms,
            extra={
                "strategy": strategy.name,
                "repetitions": repetitions,
                "attempts": merged["attempts"],
                "elapsed_ms": merged["elapsed_ms"],
            },
        )

    if config.results_dir is not None:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "strategy": strategy.name,
            "dataset_size": len(dataset),
            "sweep": sweep,
            "debug_enabled_snapshot": debug_enabled,
            "results": results,
        }
        _persist_results(payload, Path(config.results_dir))

    return results


__all__ = [
    "BANNER",
    "RunConfig",
    "available_strategies",
    "canonical_name",
    "resolve_strategy",
    "run_benchmark",
]
