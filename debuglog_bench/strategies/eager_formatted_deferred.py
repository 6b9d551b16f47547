"""
Eager formatted deferred strategy: the producer formats the whole message itself.

The `debug()` call receives a `LazyMessage` whose producer does `template % record`
eagerly. Whether that formatting is skipped depends on when the logging facility
invokes the producer. Stdlib logging renders the message only when a handler
formats the record, so a disabled level never runs it; a facility that
stringified messages up front would pay the formatting cost every time.
"""

from __future__ import annotations

from debuglog_bench.domain.models import Record
from debuglog_bench.strategies.abstract import MESSAGE_TEMPLATE, AbstractLoggingStrategy
from debuglog_bench.utils.lazy import LazyMessage


class EagerFormattedDeferredStrategy(AbstractLoggingStrategy):
    name: str = "eager_formatted_deferred"
    description: str = "Using lazy message with eager %-formatting logging strategy"

    def log_record(self, record: Record) -> None:
        self._logger.debug(LazyMessage(lambda: MESSAGE_TEMPLATE % (record,)))


__all__ = ["EagerFormattedDeferredStrategy"]
