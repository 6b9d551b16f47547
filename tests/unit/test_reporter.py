from __future__ import annotations

from rich.console import Console

from debuglog_bench.reporter import print_results


def _render(results) -> str:
    console = Console(record=True, width=160)
    print_results(results, console=console)
    return console.export_text()


def test_print_results_renders_one_row_per_sweep_point():
    results = [
        {
            "strategy": "guarded_check",
            "dataset_size": 10_000,
            "repetitions": repetitions,
            "attempts": 10_000 * repetitions,
            "elapsed_ms": 1.5 * repetitions,
            "attempts_per_sec": 1_000_000.0,
            "peak_rss_bytes": 50 * 1024 * 1024,
            "cpu_percent": 99.5,
        }
        for repetitions in (10, 100)
    ]

    text = _render(results)

    assert "guarded_check" in text
    assert "10,000 records" in text
    assert "1,000,000" in text
    assert "50.00" in text


def test_print_results_handles_missing_profile_values():
    text = _render([{"strategy": "guarded_check", "repetitions": 1, "attempts": 3}])
    assert "N/A" in text


def test_print_results_empty():
    assert "No results to display." in _render([])
