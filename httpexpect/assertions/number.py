"""
Number wrapper (Python representation of a JSON number).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import Wrapper
from .canon import canon_number
from .models import format_value

if TYPE_CHECKING:
    from ..reporting import Reporter


class Number(Wrapper):
    """
    Provides methods to inspect an attached float value.

    Every operand is converted to float before comparison, so any real
    number type may be passed.

    Example:
        number = Number(reporter, 123.4)
        number.gt(100).lt(200)
        number.in_range(100, 200)
    """

    __slots__ = ()
    zero = 0.0

    def __init__(self, reporter: Reporter, value: Any):
        super().__init__(reporter, 0.0)
        number, ok = canon_number(self.chain, value)
        if ok:
            self._value = number

    def raw(self) -> float:
        return self._value

    def equal(self, value: Any) -> Number:
        """
        Succeeds if number is equal to given value.

        Example:
            number = Number(reporter, 123)
            number.equal(123.0)
            number.equal(Decimal("123"))
        """
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        if not self._value == v:
            self.chain.fail("expected number == %s, but got %s", format_value(v), format_value(self._value))
        return self

    def not_equal(self, value: Any) -> Number:
        """Succeeds if number is not equal to given value."""
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        if not self._value != v:
            self.chain.fail("expected number != %s, but got %s", format_value(v), format_value(self._value))
        return self

    def equal_delta(self, value: Any, delta: Any) -> Number:
        """
        Succeeds if number is equal to given value within delta.

        Example:
            number = Number(reporter, 123.0)
            number.equal_delta(123.2, 0.3)
        """
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        d, ok = canon_number(self.chain, delta)
        if not ok:
            return self
        if not abs(self._value - v) <= d:
            self.chain.fail(
                "expected number == %s (delta %s), but got %s",
                format_value(v), format_value(d), format_value(self._value),
            )
        return self

    def not_equal_delta(self, value: Any, delta: Any) -> Number:
        """Succeeds if number is not equal to given value within delta."""
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        d, ok = canon_number(self.chain, delta)
        if not ok:
            return self
        if abs(self._value - v) <= d:
            self.chain.fail(
                "expected number != %s (delta %s), but got %s",
                format_value(v), format_value(d), format_value(self._value),
            )
        return self

    def gt(self, value: Any) -> Number:
        """Succeeds if number is greater than given value."""
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        if not self._value > v:
            self.chain.fail("expected number > %s, but got %s", format_value(v), format_value(self._value))
        return self

    def ge(self, value: Any) -> Number:
        """Succeeds if number is greater than or equal to given value."""
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        if not self._value >= v:
            self.chain.fail("expected number >= %s, but got %s", format_value(v), format_value(self._value))
        return self

    def lt(self, value: Any) -> Number:
        """Succeeds if number is lesser than given value."""
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        if not self._value < v:
            self.chain.fail("expected number < %s, but got %s", format_value(v), format_value(self._value))
        return self

    def le(self, value: Any) -> Number:
        """Succeeds if number is lesser than or equal to given value."""
        if self.chain.failed:
            return self
        v, ok = canon_number(self.chain, value)
        if not ok:
            return self
        if not self._value <= v:
            self.chain.fail("expected number <= %s, but got %s", format_value(v), format_value(self._value))
        return self

    def in_range(self, min: Any, max: Any) -> Number:
        """
        Succeeds if number is in given range [min; max].

        Bounds are inclusive and not validated: an inverted range
        matches nothing.

        Example:
            number = Number(reporter, 123)
            number.in_range(100, 200)   # success
            number.in_range(123, 123)   # success
            number.in_range(200, 100)   # failure
        """
        if self.chain.failed:
            return self
        a, ok = canon_number(self.chain, min)
        if not ok:
            return self
        b, ok = canon_number(self.chain, max)
        if not ok:
            return self
        if not (a <= self._value <= b):
            self.chain.fail(
                "expected number in range [%s; %s], but got %s",
                format_value(a), format_value(b), format_value(self._value),
            )
        return self
