"""
Debug Logging Benchmark - timing idioms for disabled debug log statements.

This package compares four ways of writing a debug-level log call that is usually
switched off in production:

- Guarded check (`if logger.isEnabledFor(DEBUG): ...`)
- Deferred evaluation of the argument (lazy producer)
- Lazy producer that formats the message eagerly inside its body
- A precomputed "debug enabled" flag captured once at startup

Each strategy logs every record of a synthetic dataset, repeated across a sweep
of repetition counts, and the elapsed time per sweep point is reported.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from debuglog_bench.config import Settings, get_settings
from debuglog_bench.domain import Record, generate_records
from debuglog_bench.orchestrator import RunConfig, available_strategies, run_benchmark
from debuglog_bench.strategies.abstract import (
    AbstractLoggingStrategy,
    LoggingStrategy,
    StrategyResult,
)
from debuglog_bench.utils.lazy import LazyMessage, LazyValue
from debuglog_bench.utils.logging import configure_logging, get_logger
from debuglog_bench.utils.profiler import ProfileStats, profile_block

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "generate_records",
    # Orchestration
    "RunConfig",
    "available_strategies",
    "run_benchmark",
    # Strategy abstractions
    "LoggingStrategy",
    "AbstractLoggingStrategy",
    "StrategyResult",
    # Lazy producers
    "LazyMessage",
    "LazyValue",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]
