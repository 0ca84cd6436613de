"""
Reporters receive failures from assertion chains.

A reporter is the only object shared between chains. The core calls
``report()`` synchronously and returns an inert result right after, so
a reporter is free to either raise (abort the test) or record the
failure and return normally.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .models import FailureRecord, RunReport


def format_message(message: str, args: tuple[Any, ...]) -> str:
    """Format a failure message the way ``logging`` formats records."""
    if not args:
        return message
    try:
        return message % args
    except (TypeError, ValueError):
        return " ".join([message, *(repr(a) for a in args)])


class ExpectationError(AssertionError):
    """Raised by reporters that abort the current test."""

    def __init__(self, message: str, failures: list[FailureRecord] | None = None):
        super().__init__(message)
        self.failures = failures or []


class Reporter(ABC):
    """
    Abstract failure sink.

    Implementations must tolerate being called from several chains
    in turn; they are never called twice for the same chain.
    """

    @abstractmethod
    def report(self, message: str, *args: Any) -> None:
        """
        Report a failure.

        Args:
            message: Failure message with ``%``-style placeholders
            *args: Values substituted into the message
        """
        pass


class RequireReporter(Reporter):
    """Aborts the test on the first failure by raising ExpectationError."""

    def report(self, message: str, *args: Any) -> None:
        raise ExpectationError(format_message(message, args))


class AssertReporter(Reporter):
    """
    Records failures and lets the test continue.

    Call ``verify()`` at the end of the test (or use the reporter as a
    context manager) to turn recorded failures into an ExpectationError.

    Example:
        reporter = AssertReporter()
        number = Number(reporter, 10)
        number.gt(20)

        reporter.failures   # one FailureRecord
        reporter.verify()   # raises ExpectationError
    """

    def __init__(self, name: str = ""):
        self.run_report = RunReport(name=name)
        self.run_report.start()

    @property
    def failures(self) -> list[FailureRecord]:
        return self.run_report.failures

    @property
    def failed(self) -> bool:
        return bool(self.run_report.failures)

    def report(self, message: str, *args: Any) -> None:
        self.run_report.add_failure(format_message(message, args))

    def reset(self) -> None:
        """Forget all recorded failures."""
        self.run_report.failures.clear()

    def finish(self) -> RunReport:
        """Mark the run as completed and return the report."""
        self.run_report.complete()
        return self.run_report

    def verify(self) -> None:
        """Raise ExpectationError if any failure was recorded."""
        if not self.failed:
            return
        count = len(self.failures)
        lines = [f"{count} expectation(s) failed:"]
        lines.extend(str(f) for f in self.failures)
        raise ExpectationError("\n".join(lines), list(self.failures))

    def get_summary(self) -> str:
        """Get a human-readable summary of the run."""
        return self.run_report.summary()

    def save_json(self, path: str | Path) -> None:
        """
        Save the report to a JSON file.

        Args:
            path: Path to save the JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.run_report.to_json())

    def __enter__(self) -> AssertReporter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.finish()
        if exc_type is None:
            self.verify()


class LoggingReporter(Reporter):
    """Logs failures and continues."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.ERROR):
        self.logger = logger or logging.getLogger("httpexpect")
        self.level = level
        self.count = 0

    def report(self, message: str, *args: Any) -> None:
        self.count += 1
        self.logger.log(self.level, format_message(message, args))
