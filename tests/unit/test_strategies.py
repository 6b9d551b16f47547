from __future__ import annotations

import logging
from typing import List

import pytest

from debuglog_bench.domain import generate_records
from debuglog_bench.strategies import (
    MESSAGE_TEMPLATE,
    DeferredEvaluationStrategy,
    EagerFormattedDeferredStrategy,
    GuardedCheckStrategy,
    LoggingStrategy,
    PrecomputedFlagStrategy,
)

REPETITIONS = 4


def _build(name: str, logger: logging.Logger, debug_enabled: bool):
    if name == "precomputed_static_flag":
        return PrecomputedFlagStrategy(debug_enabled=debug_enabled, logger=logger)
    classes = {
        "guarded_check": GuardedCheckStrategy,
        "deferred_evaluation": DeferredEvaluationStrategy,
        "eager_formatted_deferred": EagerFormattedDeferredStrategy,
    }
    return classes[name](logger=logger)


ALL_NAMES = [
    "guarded_check",
    "deferred_evaluation",
    "eager_formatted_deferred",
    "precomputed_static_flag",
]


@pytest.mark.parametrize("name", ALL_NAMES)
def test_strategy_satisfies_protocol(name, payload_logger):
    strategy = _build(name, payload_logger, debug_enabled=False)
    assert isinstance(strategy, LoggingStrategy)
    assert strategy.name == name
    assert strategy.describe() == strategy.description
    assert strategy.describe()


@pytest.mark.parametrize("name", ALL_NAMES)
def test_execute_makes_dataset_times_repetitions_attempts(
    name, payload_logger, counting_handler, small_dataset
):
    payload_logger.setLevel(logging.DEBUG)
    strategy = _build(name, payload_logger, debug_enabled=True)

    result = strategy.execute(small_dataset, REPETITIONS)

    expected = len(small_dataset) * REPETITIONS
    assert counting_handler.count == expected
    assert result["attempts"] == expected
    assert result["dataset_size"] == len(small_dataset)
    assert result["repetitions"] == REPETITIONS
    assert result["strategy"] == name


@pytest.mark.parametrize("name", ALL_NAMES)
def test_execute_emits_nothing_when_debug_disabled(
    name, payload_logger, counting_handler, small_dataset
):
    strategy = _build(name, payload_logger, debug_enabled=False)

    result = strategy.execute(small_dataset, REPETITIONS)

    assert counting_handler.count == 0
    assert result["attempts"] == len(small_dataset) * REPETITIONS


@pytest.mark.parametrize("name", ALL_NAMES)
def test_emitted_message_renders_the_record(name, payload_logger, counting_handler):
    payload_logger.setLevel(logging.DEBUG)
    counting_handler.keep_messages = True
    record = generate_records(1, seed=3)[0]

    _build(name, payload_logger, debug_enabled=True).execute([record], 1)

    assert counting_handler.messages == [MESSAGE_TEMPLATE % (record,)]


@pytest.mark.parametrize("name", ALL_NAMES)
def test_zero_repetitions_and_empty_dataset(name, payload_logger, counting_handler, small_dataset):
    payload_logger.setLevel(logging.DEBUG)
    strategy = _build(name, payload_logger, debug_enabled=True)

    assert strategy.execute(small_dataset, 0)["attempts"] == 0
    assert strategy.execute([], REPETITIONS)["attempts"] == 0
    assert counting_handler.count == 0


def test_negative_repetitions_rejected(payload_logger, small_dataset):
    with pytest.raises(ValueError, match="non-negative"):
        GuardedCheckStrategy(logger=payload_logger).execute(small_dataset, -1)


def test_precomputed_flag_keeps_stale_snapshot(payload_logger, counting_handler, small_dataset):
    strategy = PrecomputedFlagStrategy(debug_enabled=False, logger=payload_logger)
    payload_logger.setLevel(logging.DEBUG)

    strategy.execute(small_dataset, 1)

    assert strategy.debug_enabled is False
    assert counting_handler.count == 0


def test_guarded_check_follows_live_level(payload_logger, counting_handler, small_dataset):
    strategy = GuardedCheckStrategy(logger=payload_logger)

    strategy.execute(small_dataset, 1)
    assert counting_handler.count == 0

    payload_logger.setLevel(logging.DEBUG)
    strategy.execute(small_dataset, 1)
    assert counting_handler.count == len(small_dataset)


def test_precomputed_flag_skips_logger_entirely_when_disabled(small_dataset):
    class _ExplodingLogger(logging.Logger):
        def isEnabledFor(self, level):  # noqa: N802 - stdlib name
            raise AssertionError("enablement must not be queried")

        def debug(self, *args, **kwargs):
            raise AssertionError("debug must not be called")

    strategy = PrecomputedFlagStrategy(debug_enabled=False, logger=_ExplodingLogger("x"))
    assert strategy.execute(small_dataset, 2)["attempts"] == len(small_dataset) * 2


def test_strategy_defaults_to_payload_logger():
    strategy = GuardedCheckStrategy()
    assert strategy.logger.name == "debuglog_bench.payload"


@pytest.mark.parametrize("name", ALL_NAMES)
def test_every_record_reaches_the_idiom_when_debug_disabled(
    name, payload_logger, counting_handler, small_dataset
):
    strategy = _build(name, payload_logger, debug_enabled=False)
    idiom = strategy.log_record
    calls: List[str] = []

    def counting_log_record(record):
        calls.append(record.name)
        idiom(record)

    strategy.log_record = counting_log_record

    result = strategy.execute(small_dataset, REPETITIONS)

    assert len(calls) == len(small_dataset) * REPETITIONS
    assert calls[: len(small_dataset)] == [record.name for record in small_dataset]
    assert result["attempts"] == len(calls)
    assert counting_handler.count == 0
