"""
Guarded check strategy: ask the logger before building the message.

The traditional idiom. `isEnabledFor` is consulted on every call, so the strategy
always reflects the live logger configuration.
"""

from __future__ import annotations

import logging

from debuglog_bench.domain.models import Record
from debuglog_bench.strategies.abstract import MESSAGE_TEMPLATE, AbstractLoggingStrategy


class GuardedCheckStrategy(AbstractLoggingStrategy):
    """
    `if logger.isEnabledFor(DEBUG): logger.debug(...)` for every record.
    """

    name: str = "guarded_check"
    description: str = "Using traditional if-enabled guard logging strategy"

    def log_record(self, record: Record) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(MESSAGE_TEMPLATE, record)


__all__ = ["GuardedCheckStrategy"]
