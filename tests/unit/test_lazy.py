from __future__ import annotations

import io
import logging

from debuglog_bench.utils.lazy import LazyMessage, LazyValue


class _Producer:
    def __init__(self, value: str) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.value


def test_lazy_value_not_invoked_when_level_disabled(sole_sink, counting_handler):
    logger = sole_sink()
    producer = _Producer("payload")

    logger.debug("value: %s", LazyValue(producer))

    assert producer.calls == 0
    assert counting_handler.count == 0


def test_lazy_value_invoked_once_per_emitted_record(sole_sink, counting_handler):
    logger = sole_sink()
    logger.setLevel(logging.DEBUG)
    counting_handler.keep_messages = True
    producer = _Producer("payload")

    logger.debug("value: %s", LazyValue(producer))

    assert producer.calls == 1
    assert counting_handler.messages == ["value: payload"]


def test_lazy_message_not_invoked_when_level_disabled(sole_sink, counting_handler):
    logger = sole_sink()
    producer = _Producer("whole message")

    logger.debug(LazyMessage(producer))

    assert producer.calls == 0


def test_lazy_message_invoked_once_per_emitted_record(sole_sink, counting_handler):
    logger = sole_sink()
    logger.setLevel(logging.DEBUG)
    counting_handler.keep_messages = True
    producer = _Producer("whole message")

    logger.debug(LazyMessage(producer))

    assert producer.calls == 1
    assert counting_handler.messages == ["whole message"]


def test_producers_run_once_with_several_handlers(sole_sink, counting_handler):
    logger = sole_sink()
    logger.setLevel(logging.DEBUG)
    first, second = io.StringIO(), io.StringIO()
    extra_handlers = [logging.StreamHandler(first), logging.StreamHandler(second)]
    for handler in extra_handlers:
        logger.addHandler(handler)
    value_producer = _Producer("payload")
    message_producer = _Producer("whole message")

    try:
        logger.debug("value: %s", LazyValue(value_producer))
        logger.debug(LazyMessage(message_producer))
    finally:
        for handler in extra_handlers:
            logger.removeHandler(handler)

    assert value_producer.calls == 1
    assert message_producer.calls == 1
    assert counting_handler.count == 2
    assert first.getvalue() == second.getvalue() == "value: payload\nwhole message\n"


def test_lazy_value_repr_delegates_to_produced_value():
    producer = _Producer("abc")
    value = LazyValue(producer)

    assert repr(value) == "'abc'"
    assert str(value) == "abc"
    assert producer.calls == 1
