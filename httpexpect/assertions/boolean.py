"""
Boolean wrapper (Python representation of a JSON boolean).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import Wrapper
from .models import format_value

if TYPE_CHECKING:
    from ..reporting import Reporter


class Boolean(Wrapper):
    """
    Provides methods to inspect an attached bool value.

    Example:
        boolean = Boolean(reporter, True)
        boolean.true()
    """

    __slots__ = ()
    zero = False

    def __init__(self, reporter: Reporter, value: Any):
        super().__init__(reporter, False)
        if not isinstance(value, bool):
            self.chain.fail("expected boolean value, but got %s", format_value(value))
            return
        self._value = value

    def raw(self) -> bool:
        return self._value

    def equal(self, value: bool) -> Boolean:
        """Succeeds if boolean is equal to given value."""
        if self.chain.failed:
            return self
        if not self._value == value:
            self.chain.fail(
                "expected boolean == %s, but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def not_equal(self, value: bool) -> Boolean:
        """Succeeds if boolean is not equal to given value."""
        if self.chain.failed:
            return self
        if not self._value != value:
            self.chain.fail(
                "expected boolean != %s, but got %s",
                format_value(value), format_value(self._value),
            )
        return self

    def true(self) -> Boolean:
        """Succeeds if boolean is true."""
        return self.equal(True)

    def false(self) -> Boolean:
        """Succeeds if boolean is false."""
        return self.equal(False)
