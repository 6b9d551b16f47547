"""
Lazy producers for stdlib logging.

The `logging` module only turns a record's message and arguments into text when a
handler actually formats the record (`LogRecord.getMessage`). Wrapping a
zero-argument callable in an object whose `__str__` calls it hands the decision
of *whether* to run the callable to the logging facility.

Two wrappers keep two kinds of laziness apart:

- `LazyValue` stands in for a `%s` argument. The template is formatted by the
  facility; only the argument is produced on demand.
- `LazyMessage` stands in for the whole message. Whatever the producer does
  (including eager `%` formatting) runs only when the message is rendered.

Usage:
    log.debug("Record: %s", LazyValue(lambda: record))
    log.debug(LazyMessage(lambda: "Record: %s" % record))
"""
from __future__ import annotations

from typing import Any, Callable

_UNSET: Any = object()


class LazyValue:
    """Log argument whose value is produced on first rendering."""

    __slots__ = ("_producer", "_value")

    def __init__(self, producer: Callable[[], Any]) -> None:
        self._producer = producer
        self._value = _UNSET

    def _get(self) -> Any:
        # Every handler re-renders the record; produce once per record.
        if self._value is _UNSET:
            self._value = self._producer()
        return self._value

    def __str__(self) -> str:
        return str(self._get())

    def __repr__(self) -> str:
        return repr(self._get())


class LazyMessage:
    """Log message whose text is produced when the record is first rendered."""

    __slots__ = ("_producer", "_text")

    def __init__(self, producer: Callable[[], str]) -> None:
        self._producer = producer
        self._text: str | None = None

    def __str__(self) -> str:
        if self._text is None:
            self._text = self._producer()
        return self._text


__all__ = ["LazyMessage", "LazyValue"]
