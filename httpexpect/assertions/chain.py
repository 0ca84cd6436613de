"""
Failure state shared along an assertion chain.

A chain pairs a reporter with a failed flag. Each wrapper owns one;
navigating to a child wrapper derives a new chain that starts with a
copy of the flag. Once failed, a chain never reports again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..reporting import Reporter


class Chain:
    """Tracks whether checks on a wrapper (and its descendants) still run."""

    __slots__ = ("reporter", "_failed")

    def __init__(self, reporter: Reporter, failed: bool = False):
        if reporter is None:
            raise ValueError("reporter is None")
        self.reporter = reporter
        self._failed = failed

    @property
    def failed(self) -> bool:
        return self._failed

    def fail(self, message: str, *args: Any) -> None:
        """
        Mark the chain failed and report the failure.

        Does nothing if the chain has already failed. The flag is set
        before the reporter runs, so a reporter that raises still leaves
        the chain failed.
        """
        if self._failed:
            return
        self._failed = True
        self.reporter.report(message, *args)

    def derive(self) -> Chain:
        """Return a child chain with the same reporter and a copy of the flag."""
        return Chain(self.reporter, self._failed)

    def reset(self) -> None:
        """Clear the failed flag. Meant for test suites only."""
        self._failed = False

    def __repr__(self) -> str:
        status = "failed" if self._failed else "ok"
        return f"Chain({status})"
