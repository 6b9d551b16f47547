"""
Strategies package for the Debug Logging Benchmark.

This module re-exports the abstract interfaces and the concrete strategy classes
so downstream code can import from `debuglog_bench.strategies` directly.
"""

from debuglog_bench.strategies.abstract import (
    MESSAGE_TEMPLATE,
    AbstractLoggingStrategy,
    LoggingStrategy,
    StrategyResult,
)
from debuglog_bench.strategies.deferred_evaluation import DeferredEvaluationStrategy
from debuglog_bench.strategies.eager_formatted_deferred import EagerFormattedDeferredStrategy
from debuglog_bench.strategies.guarded_check import GuardedCheckStrategy
from debuglog_bench.strategies.precomputed_flag import PrecomputedFlagStrategy

__all__ = [
    # Abstracts
    "AbstractLoggingStrategy",
    "LoggingStrategy",
    "MESSAGE_TEMPLATE",
    "StrategyResult",
    # Concrete strategies
    "DeferredEvaluationStrategy",
    "EagerFormattedDeferredStrategy",
    "GuardedCheckStrategy",
    "PrecomputedFlagStrategy",
]
