"""
Reporting for expectation failures

This package provides the Reporter interface consumed by assertion
chains, the stock reporter implementations, and the run report model
used to capture and serialize recorded failures.

Reporters:
    - RequireReporter: raise ExpectationError on the first failure
    - AssertReporter: record failures, raise on verify()
    - LoggingReporter: log failures through the logging module

Usage:
    from httpexpect.reporting import AssertReporter

    reporter = AssertReporter(name="users api")
    ...
    report = reporter.finish()
    print(report.summary())
    reporter.save_json("reports/run.json")
    reporter.verify()
"""

# Models
from .models import FailureRecord, RunReport, RunStatus

# Reporters
from .reporter import (
    AssertReporter,
    ExpectationError,
    LoggingReporter,
    Reporter,
    RequireReporter,
    format_message,
)

__all__ = [
    # Models
    "FailureRecord",
    "RunReport",
    "RunStatus",
    # Reporters
    "AssertReporter",
    "ExpectationError",
    "LoggingReporter",
    "Reporter",
    "RequireReporter",
    "format_message",
]
