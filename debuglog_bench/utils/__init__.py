"""
Utilities package for the Debug Logging Benchmark.

Exports shared helpers for logging, lazy log producers and profiling.
Keep this package lightweight and free of strategy-specific logic.
"""

from debuglog_bench.utils.lazy import LazyMessage, LazyValue
from debuglog_bench.utils.logging import configure_logging, get_logger, get_payload_logger
from debuglog_bench.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "get_payload_logger",
    "LazyMessage",
    "LazyValue",
    "ProfileStats",
    "profile_block",
]
