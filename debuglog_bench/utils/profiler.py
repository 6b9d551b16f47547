"""
Profiling utilities for the Debug Logging Benchmark.

`profile_block` is the timer around each sweep point. It measures:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- Peak RSS via an optional background sampling thread (psutil)

Usage example:
    from debuglog_bench.utils.profiler import profile_block

    with profile_block("guarded_check x1000") as stats:
        strategy.execute(dataset, 1000)

    print(stats.elapsed_ms, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed_ms(self) -> float:
        return self.duration_seconds * 1000.0


@contextlib.contextmanager
def profile_block(
    label: str, sample_memory: bool = False, sample_interval_ms: int = 50
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to time a block of code and sample its resource usage.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_memory : bool
        Whether to run a daemon thread sampling RSS while the block executes.
        When False, peak RSS is the larger of the start and end snapshots.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling.

    Notes
    -----
    The sampling thread wakes up every `sample_interval_ms` and competes with the
    measured code for the GIL. Disable it for the tightest timings.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    peak_rss = process.memory_info().rss
    stop_sampling = threading.Event()

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except psutil.Error:
                return
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    sampler: Optional[threading.Thread] = None
    if sample_memory:
        sampler = threading.Thread(target=_sample_memory, daemon=True)
        sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stop_sampling.set()
        if sampler is not None:
            sampler.join(timeout=1.0)

        peak_rss = max(peak_rss, process.memory_info().rss)
        stats.peak_rss_bytes = peak_rss if peak_rss > 0 else None
        stats.cpu_percent = process.cpu_percent(interval=None)


__all__ = ["ProfileStats", "profile_block"]
