"""
Tests for httpexpect.reporting.

Tests the stock reporters and the run report model.
"""

import json
import logging

import pytest

from httpexpect import (
    AssertReporter,
    ExpectationError,
    LoggingReporter,
    Number,
    RequireReporter,
    RunStatus,
)
from httpexpect.reporting import format_message


class TestFormatMessage:
    def test_formats_args(self):
        assert format_message("got %s and %s", (1, "a")) == "got 1 and a"

    def test_no_args_left_alone(self):
        assert format_message("100% done", ()) == "100% done"

    def test_mismatched_args(self):
        """A bad format string never raises."""
        assert format_message("no placeholders", (1,)) == "no placeholders 1"


class TestRequireReporter:
    def test_raises_on_first_failure(self):
        reporter = RequireReporter()
        with pytest.raises(ExpectationError, match="expected number > 20, but got 10"):
            Number(reporter, 10).gt(20)


class TestAssertReporter:
    """Tests for AssertReporter class."""

    def test_records_and_verifies(self):
        reporter = AssertReporter(name="numbers")
        Number(reporter, 10).gt(20)
        Number(reporter, 10).lt(5)

        assert reporter.failed
        assert len(reporter.failures) == 2
        with pytest.raises(ExpectationError) as exc_info:
            reporter.verify()
        assert len(exc_info.value.failures) == 2
        assert "2 expectation(s) failed" in str(exc_info.value)

    def test_verify_passes_without_failures(self):
        reporter = AssertReporter()
        Number(reporter, 10).gt(5)
        reporter.verify()

    def test_reset(self):
        reporter = AssertReporter()
        reporter.report("boom")
        reporter.reset()
        assert not reporter.failed

    def test_finish_sets_status(self):
        reporter = AssertReporter()
        assert reporter.finish().status is RunStatus.PASSED

        reporter = AssertReporter()
        reporter.report("boom")
        report = reporter.finish()
        assert report.status is RunStatus.FAILED
        assert report.duration_ms is not None
        assert "boom" in report.summary()

    def test_context_manager_verifies(self):
        with pytest.raises(ExpectationError):
            with AssertReporter() as reporter:
                Number(reporter, 1).equal(2)

    def test_save_json(self, tmp_path):
        reporter = AssertReporter(name="save")
        reporter.report("expected %s", "x")
        reporter.finish()
        path = tmp_path / "reports" / "run.json"
        reporter.save_json(path)

        data = json.loads(path.read_text())
        assert data["name"] == "save"
        assert data["status"] == "failed"
        assert data["summary"]["failures"] == 1
        assert data["failures"][0]["message"] == "expected x"


class TestLoggingReporter:
    def test_logs_failures(self, caplog):
        reporter = LoggingReporter(logger=logging.getLogger("tests.reporter"))
        with caplog.at_level(logging.ERROR, logger="tests.reporter"):
            Number(reporter, 1).equal(2)
            Number(reporter, 1).equal(1)

        assert reporter.count == 1
        assert "expected number == 2, but got 1" in caplog.text
