"""
Structured logging utilities for the Debug Logging Benchmark.

Centralizes logging configuration so the CLI, orchestrator and strategies stay
consistent. It favors standard library logging with a human-readable formatter
by default and an optional JSON formatter for structured logs (useful for
pipelines/CI).

The benchmarked debug statements go to a dedicated payload logger
(`PAYLOAD_LOGGER_NAME`) whose level can be set apart from the root level, so a
run can enable debug output for the payload without flooding the console with
the harness's own debug lines.

Usage:
    from debuglog_bench.utils.logging import configure_logging, get_logger

    configure_logging(level="INFO", json_logs=False)
    log = get_logger(__name__)
    log.info("message", extra={"repetitions": 1000})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

PAYLOAD_LOGGER_NAME = "debuglog_bench.payload"

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "extra"}


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    for key, value in vars(record).items():
        if key not in _STANDARD_RECORD_ATTRS:
            payload[key] = value
    # legacy: extra={"extra": {...}} nests fields one level down
    nested = getattr(record, "extra", None)
    if isinstance(nested, dict):
        payload.update(nested)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    payload_level: Optional[str] = None,
    force: bool = True,
) -> None:
    """
    Configure root logging and the payload logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g., "DEBUG", "INFO", "WARNING").
    json_logs : bool
        Whether to emit logs as JSON. If False, uses a concise human formatter.
    payload_level : str | None
        Level for the benchmarked payload logger. None inherits from root.
    force : bool
        Whether to drop handlers already attached to the root logger.
    """
    formatter_name = "json" if json_logs else "console"

    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": JsonFormatter,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": formatter_name,
            }
        },
        "loggers": {
            PAYLOAD_LOGGER_NAME: {
                "level": payload_level or "NOTSET",
            },
        },
        "root": {
            "handlers": ["default"],
            "level": level,
        },
    }

    if not force and logging.getLogger().handlers:
        # Keep the caller's handlers, only adjust levels.
        logging.getLogger().setLevel(level)
        logging.getLogger(PAYLOAD_LOGGER_NAME).setLevel(payload_level or logging.NOTSET)
        return

    logging.config.dictConfig(config)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the root logger.
    """
    return logging.getLogger(name)


def get_payload_logger() -> logging.Logger:
    """Logger the strategies emit their debug statements on."""
    return logging.getLogger(PAYLOAD_LOGGER_NAME)


__all__ = [
    "PAYLOAD_LOGGER_NAME",
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "get_payload_logger",
]
