"""
String wrapper (Python representation of a JSON string).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from .base import Wrapper
from .models import format_value
from .number import Number

if TYPE_CHECKING:
    from ..reporting import Reporter


class String(Wrapper):
    """
    Provides methods to inspect an attached str value.

    Example:
        string = String(reporter, "Hello")
        string.equal_fold("hello").contains("ell").length().equal(5)
    """

    __slots__ = ()
    zero = ""

    def __init__(self, reporter: Reporter, value: Any):
        super().__init__(reporter, "")
        if not isinstance(value, str):
            self.chain.fail("expected string value, but got %s", format_value(value))
            return
        self._value = value

    def raw(self) -> str:
        return self._value

    def length(self) -> Number:
        """Returns a Number holding the string length."""
        return Number._wrap(self.chain.derive(), float(len(self._value)))

    def empty(self) -> String:
        """Succeeds if string is empty."""
        if self.chain.failed:
            return self
        if self._value != "":
            self.chain.fail("expected empty string, but got %s", format_value(self._value))
        return self

    def not_empty(self) -> String:
        """Succeeds if string is non-empty."""
        if self.chain.failed:
            return self
        if self._value == "":
            self.chain.fail("expected non-empty string")
        return self

    def equal(self, value: str) -> String:
        """Succeeds if string is equal to given value."""
        if self.chain.failed:
            return self
        if not self._value == value:
            self.chain.fail(
                "expected string == %s, but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def not_equal(self, value: str) -> String:
        """Succeeds if string is not equal to given value."""
        if self.chain.failed:
            return self
        if not self._value != value:
            self.chain.fail(
                "expected string != %s, but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def equal_fold(self, value: str) -> String:
        """
        Succeeds if string is equal to given value ignoring case.

        Example:
            string = String(reporter, "Hello")
            string.equal_fold("hELLo")
        """
        if self.chain.failed:
            return self
        if not _fold(self._value) == _fold(value):
            self.chain.fail(
                "expected string == %s (case-insensitive), but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def not_equal_fold(self, value: str) -> String:
        """Succeeds if string is not equal to given value ignoring case."""
        if self.chain.failed:
            return self
        if _fold(self._value) == _fold(value):
            self.chain.fail(
                "expected string != %s (case-insensitive), but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def contains(self, value: str) -> String:
        """Succeeds if string contains given substring."""
        if self.chain.failed:
            return self
        if not (isinstance(value, str) and value in self._value):
            self.chain.fail(
                "expected string containing %s, but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def not_contains(self, value: str) -> String:
        """Succeeds if string doesn't contain given substring."""
        if self.chain.failed:
            return self
        if isinstance(value, str) and value in self._value:
            self.chain.fail(
                "expected string not containing %s, but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def contains_fold(self, value: str) -> String:
        """Succeeds if string contains given substring ignoring case."""
        if self.chain.failed:
            return self
        if not (isinstance(value, str) and _fold(value) in _fold(self._value)):
            self.chain.fail(
                "expected string containing %s (case-insensitive), but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def not_contains_fold(self, value: str) -> String:
        """Succeeds if string doesn't contain given substring ignoring case."""
        if self.chain.failed:
            return self
        if isinstance(value, str) and _fold(value) in _fold(self._value):
            self.chain.fail(
                "expected string not containing %s (case-insensitive), but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def match(self, pattern: str | re.Pattern[str]) -> String:
        """
        Succeeds if the regular expression matches somewhere in the string.

        Example:
            string = String(reporter, "http://example.com/users/john")
            string.match(r"/users/\\w+$")
        """
        if self.chain.failed:
            return self
        regexp = _compile(self, pattern)
        if regexp is None:
            return self
        if not regexp.search(self._value):
            self.chain.fail(
                "expected string matching %s, but got %s",
                format_value(regexp.pattern), format_value(self._value),
            )
        return self

    def not_match(self, pattern: str | re.Pattern[str]) -> String:
        """Succeeds if the regular expression matches nowhere in the string."""
        if self.chain.failed:
            return self
        regexp = _compile(self, pattern)
        if regexp is None:
            return self
        if regexp.search(self._value):
            self.chain.fail(
                "expected string not matching %s, but got %s",
                format_value(regexp.pattern), format_value(self._value),
            )
        return self


def _fold(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


def _compile(string: String, pattern: str | re.Pattern[str]) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as e:
        string.chain.fail("invalid regular expression %s: %s", format_value(pattern), e)
        return None
