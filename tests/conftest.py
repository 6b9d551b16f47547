"""
Pytest configuration for the Debug Logging Benchmark.

Provides fixtures for:
- An isolated payload logger with a counting sink
- Small synthetic datasets
- Settings cache reset between tests
"""

from __future__ import annotations

import logging
from typing import Callable, Generator, List

import pytest

from debuglog_bench.config import Settings, get_settings
from debuglog_bench.domain import Record, generate_records

TEST_LOGGER_NAME = "debuglog_bench.tests.payload"


class CountingHandler(logging.Handler):
    """
    Logging sink that counts emitted records.

    Each record is formatted on emit, the same as a real handler would, so lazy
    producers attached to it are forced to run.
    """

    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)
        self.count = 0
        self.messages: List[str] = []
        self.keep_messages = False

    def emit(self, record: logging.LogRecord) -> None:
        message = self.format(record)
        self.count += 1
        if self.keep_messages:
            self.messages.append(message)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        log_level="DEBUG",
        benchmark_dataset_size=3,
        benchmark_sweep=[1, 2],
        benchmark_profile_memory=False,
    )


@pytest.fixture
def counting_handler() -> CountingHandler:
    return CountingHandler()


@pytest.fixture
def payload_logger(counting_handler: CountingHandler) -> Generator[logging.Logger, None, None]:
    """
    Isolated logger with the counting sink attached, DEBUG disabled by default.

    Tests flip the level with `payload_logger.setLevel(logging.DEBUG)`.
    """
    logger = logging.getLogger(TEST_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(counting_handler)
    try:
        yield logger
    finally:
        logger.removeHandler(counting_handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def sole_sink(
    payload_logger: logging.Logger, counting_handler: CountingHandler
) -> Callable[[], logging.Logger]:
    """
    Detach every handler but the counting sink from the payload logger.

    pytest's logging plugin may attach its own capture handlers for the test call
    phase, after fixtures are set up, so tests call this from the test body.
    """

    def _detach_others() -> logging.Logger:
        for handler in payload_logger.handlers[:]:
            if handler is not counting_handler:
                payload_logger.removeHandler(handler)
        return payload_logger

    return _detach_others


@pytest.fixture
def small_dataset() -> List[Record]:
    """Three seeded records."""
    return generate_records(3, seed=42)
