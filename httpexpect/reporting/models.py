"""
Report data models for expectation runs.

This module defines the data structures for capturing the failures
recorded while a test exercises an API, including timing and status.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class RunStatus(str, Enum):
    """Overall status of an expectation run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class FailureRecord:
    """A single reported failure."""
    message: str
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "message": self.message,
            "recorded_at": self.recorded_at.isoformat(),
        }

    def __str__(self) -> str:
        return f"❌ {self.message}"


@dataclass
class RunReport:
    """
    Record of everything reported during one run.

    A run usually spans a single test function or a single CLI
    invocation. Failures are appended in the order they were reported.
    """
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    status: RunStatus = RunStatus.PENDING
    failures: list[FailureRecord] = field(default_factory=list)

    def start(self) -> None:
        """Mark the run as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Mark the run as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000
        self.status = RunStatus.FAILED if self.failures else RunStatus.PASSED

    def add_failure(self, message: str) -> FailureRecord:
        """Append a failure to the run."""
        record = FailureRecord(message)
        self.failures.append(record)
        return record

    @property
    def passed(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "name": self.name,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "status": self.status.value,
            "summary": {
                "failures": len(self.failures),
            },
            "failures": [f.to_dict() for f in self.failures],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        title = self.name or "expectations"
        lines = [
            f"═══════════════════════════════════════════════════════════",
            f"  Run Report: {title}",
            f"═══════════════════════════════════════════════════════════",
            f"  Run ID:     {self.run_id}",
            f"  Status:     {_status_icon(self.status)} {self.status.value.upper()}",
            f"  Duration:   {self.duration_ms:.0f}ms" if self.duration_ms else "  Duration:   N/A",
            f"───────────────────────────────────────────────────────────",
            f"  Failures: {len(self.failures)}",
        ]

        for failure in self.failures:
            first, _, rest = failure.message.partition("\n")
            lines.append(f"  ❌ {first}")
            for extra in rest.splitlines():
                lines.append(f"      {extra}")

        lines.append(f"═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def _status_icon(status: RunStatus) -> str:
    """Get icon for run status."""
    return {
        RunStatus.PENDING: "⏳",
        RunStatus.RUNNING: "🔄",
        RunStatus.PASSED: "✅",
        RunStatus.FAILED: "❌",
    }.get(status, "❓")
