from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table


def print_results(results: List[Dict[str, Any]], console: Optional[Console] = None) -> None:
    """
    Render sweep results as a rich table, one row per repetition count.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    strategy = results[0].get("strategy", "Unknown")
    dataset_size = results[0].get("dataset_size", 0)

    table = Table(
        title=f"Debug Logging Benchmark: {strategy}\n[dim]Dataset: {dataset_size:,} records[/dim]",
        box=box.ROUNDED,
        caption="In sweep order",
    )

    table.add_column("Repetitions", justify="right", style="cyan", no_wrap=True)
    table.add_column("Attempts", justify="right", style="magenta")
    table.add_column("Elapsed (ms)", justify="right", style="green")
    table.add_column("Attempts/s", justify="right", style="bold green")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")
    table.add_column("CPU %", justify="right", style="red")

    for res in results:
        repetitions = f"{res.get('repetitions', 0):,}"
        attempts = f"{res.get('attempts', 0):,}"
        elapsed_str = f"{res.get('elapsed_ms', 0.0):,.3f}"
        throughput_str = f"{res.get('attempts_per_sec', 0.0):,.0f}"

        mem_bytes = res.get("peak_rss_bytes")
        mem_str = f"{mem_bytes / (1024 * 1024):.2f}" if mem_bytes else "N/A"

        cpu = res.get("cpu_percent")
        cpu_str = f"{cpu:.1f}" if cpu is not None else "N/A"

        table.add_row(repetitions, attempts, elapsed_str, throughput_str, mem_str, cpu_str)

    console.print(table)


__all__ = ["print_results"]
