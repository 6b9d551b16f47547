"""
Precomputed flag strategy: check a boolean captured once at startup.

WARNING: the flag is a snapshot. If the logger level changes after the snapshot
is taken (e.g. a runtime log level switch), this strategy keeps acting on the old
value. That staleness is part of what the benchmark compares.
"""

from __future__ import annotations

import logging
from typing import Optional

from debuglog_bench.domain.models import Record
from debuglog_bench.strategies.abstract import MESSAGE_TEMPLATE, AbstractLoggingStrategy


class PrecomputedFlagStrategy(AbstractLoggingStrategy):
    """
    `if debug_enabled: logger.debug(...)` with `debug_enabled` fixed at construction.
    """

    name: str = "precomputed_static_flag"
    description: str = "Using precomputed flag for debug level logging strategy"

    def __init__(self, debug_enabled: bool, logger: Optional[logging.Logger] = None) -> None:
        super().__init__(logger)
        self._debug_enabled = debug_enabled

    @property
    def debug_enabled(self) -> bool:
        return self._debug_enabled

    def log_record(self, record: Record) -> None:
        if self._debug_enabled:
            self._logger.debug(MESSAGE_TEMPLATE, record)


__all__ = ["PrecomputedFlagStrategy"]
