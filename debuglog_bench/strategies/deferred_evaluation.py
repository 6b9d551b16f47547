"""
Deferred evaluation strategy: always call the logger, pass the record lazily.

Every attempt pays for the `debug()` call and for building one `LazyValue`
wrapper. The logger's own enablement check decides whether the producer runs.
"""

from __future__ import annotations

from debuglog_bench.domain.models import Record
from debuglog_bench.strategies.abstract import MESSAGE_TEMPLATE, AbstractLoggingStrategy
from debuglog_bench.utils.lazy import LazyValue


class DeferredEvaluationStrategy(AbstractLoggingStrategy):
    name: str = "deferred_evaluation"
    description: str = "Using lazy argument (deferred producer) logging strategy"

    def log_record(self, record: Record) -> None:
        self._logger.debug(MESSAGE_TEMPLATE, LazyValue(lambda: record))


__all__ = ["DeferredEvaluationStrategy"]
