"""
Abstract strategy interfaces and result contracts for the Debug Logging Benchmark.

Concrete strategies (guarded check, deferred evaluation, eager formatted deferred,
precomputed flag) implement the LoggingStrategy protocol and return a
StrategyResult TypedDict so the orchestrator and reporter can treat them alike.
"""

from __future__ import annotations

import abc
import logging
from typing import Optional, Protocol, Sequence, TypedDict, runtime_checkable

from debuglog_bench.domain.models import Record
from debuglog_bench.utils.logging import get_payload_logger

MESSAGE_TEMPLATE = "Record object: %s"


class StrategyResult(TypedDict, total=False):
    """
    Work counters returned by strategies.

    Timing is not part of the contract; the orchestrator measures it around
    `execute` so every strategy is timed the same way.
    """

    strategy: str
    dataset_size: int
    repetitions: int
    attempts: int
    notes: Optional[str]


@runtime_checkable
class LoggingStrategy(Protocol):
    """
    Common interface all logging strategies must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the idiom.
    """

    name: str
    description: str

    def execute(self, dataset: Sequence[Record], repetitions: int) -> StrategyResult:
        """
        Iterate the dataset `repetitions` times, logging every record.

        Parameters
        ----------
        dataset : Sequence[Record]
            Records to log on each pass.
        repetitions : int
            Number of full passes over the dataset.

        Returns
        -------
        StrategyResult
            Counters including the number of logging attempts made.
        """
        ...

    def describe(self) -> str:
        """Return the human-readable description logged before a sweep."""
        ...


class AbstractLoggingStrategy(abc.ABC):
    """
    ABC helper for class-based implementations.

    Subclasses set `name` and `description` and implement `log_record`, the
    one-line idiom under test. The iteration loop is shared so the only
    difference between strategies is that idiom.
    """

    name: str
    description: str

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger if logger is not None else get_payload_logger()

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abc.abstractmethod
    def log_record(self, record: Record) -> None:  # pragma: no cover - interface only
        """Apply the strategy's logging idiom to one record."""
        raise NotImplementedError

    def describe(self) -> str:
        return self.description

    def execute(self, dataset: Sequence[Record], repetitions: int) -> StrategyResult:
        if repetitions < 0:
            raise ValueError(f"repetitions must be non-negative, got {repetitions}")
        log_record = self.log_record
        for _ in range(repetitions):
            for record in dataset:
                log_record(record)

        return StrategyResult(
            strategy=self.name,
            dataset_size=len(dataset),
            repetitions=repetitions,
            attempts=len(dataset) * repetitions,
        )


__all__ = [
    "MESSAGE_TEMPLATE",
    "StrategyResult",
    "LoggingStrategy",
    "AbstractLoggingStrategy",
]
