from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from debuglog_bench.config import get_settings
from debuglog_bench.orchestrator import RunConfig, available_strategies, run_benchmark
from debuglog_bench.reporter import print_results
from debuglog_bench.utils.logging import configure_logging

app = typer.Typer(help="Debug Logging Benchmark CLI.", add_completion=False)


def _parse_sweep(value: Optional[str]) -> Optional[List[int]]:
    if value is None:
        return None
    try:
        counts = [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise typer.BadParameter(f"sweep must be comma-separated integers, got '{value}'") from exc
    if not counts or any(count <= 0 for count in counts):
        raise typer.BadParameter("sweep must contain positive repetition counts")
    return counts


def _validate_level(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    level = value.upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"unknown log level '{value}'")
    return level


@app.command()
def run(
    strategy: Optional[str] = typer.Argument(
        None,
        help="Strategy to run (guarded_check, deferred_evaluation, eager_formatted_deferred, "
        "precomputed_static_flag).",
        show_default=False,
    ),
    list_strategies: bool = typer.Option(
        False, "--list", "-l", help="List available strategies and exit."
    ),
    dataset_size: Optional[int] = typer.Option(
        None, "--dataset-size", "-n", min=0, help="Override number of generated records."
    ),
    sweep: Optional[str] = typer.Option(
        None, "--sweep", help="Comma-separated repetition counts (e.g. 10,100,1000)."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="RNG seed for the dataset."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", callback=_validate_level, help="Root log level."
    ),
    payload_log_level: Optional[str] = typer.Option(
        None,
        "--payload-log-level",
        callback=_validate_level,
        help="Level of the benchmarked logger (e.g. DEBUG).",
    ),
    json_logs: Optional[bool] = typer.Option(
        None, "--json-logs/--no-json-logs", help="Emit logs as JSON."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Directory to persist JSON results to."
    ),
    no_table: bool = typer.Option(False, "--no-table", help="Skip the summary table."),
) -> None:
    """
    Time one logging strategy across the repetition sweep.
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(
        level=log_level or settings.log_level,
        json_logs=settings.log_json if json_logs is None else json_logs,
        payload_level=payload_log_level or settings.payload_log_level,
    )

    if list_strategies:
        typer.echo("Available strategies: " + ", ".join(available_strategies()))
        return

    results = run_benchmark(
        RunConfig(
            strategy_name=strategy,
            dataset_size=dataset_size,
            sweep=_parse_sweep(sweep),
            seed=seed,
            results_dir=output,
        )
    )
    if results and not no_table:
        print_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
