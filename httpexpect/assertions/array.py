"""
Array wrapper (Python representation of a JSON array).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import Wrapper
from .canon import canon_array, canon_contains, canon_equal
from .models import format_value
from .number import Number

if TYPE_CHECKING:
    from ..reporting import Reporter
    from .value import Value


class Array(Wrapper):
    """
    Provides methods to inspect an attached list of canonical values.

    Example:
        array = Array(reporter, ["foo", 123])
        array.element(0).string().equal("foo")
        array.element(1).number().equal(123)
        array.contains_only(123, "foo")
    """

    __slots__ = ()
    zero: list[Any] = []

    def __init__(self, reporter: Reporter, value: Any):
        super().__init__(reporter, [])
        if value is None:
            self.chain.fail("expected non-null array value")
            return
        data, ok = canon_array(self.chain, value)
        if ok:
            self._value = data

    def raw(self) -> list[Any]:
        return self._value

    def length(self) -> Number:
        """Returns a Number holding the array length."""
        return Number._wrap(self.chain.derive(), float(len(self._value)))

    def element(self, index: int) -> Value:
        """
        Returns a Value for the element at the given index.

        A non-integer, negative or out-of-range index fails the chain.

        Example:
            array = Array(reporter, ["foo", 123])
            array.element(0).string().equal("foo")
        """
        from .value import Value

        if self.chain.failed:
            return Value._failed(self.chain)
        if isinstance(index, bool) or not isinstance(index, int):
            self.chain.fail("expected integer array index, but got %s", format_value(index))
            return Value._failed(self.chain)
        if not 0 <= index < len(self._value):
            self.chain.fail(
                "array index out of bounds:\n  index %s\n\n  bounds [%s; %s)",
                index, 0, len(self._value),
            )
            return Value._failed(self.chain)
        return Value._wrap(self.chain.derive(), self._value[index])

    def first(self) -> Value:
        """Returns a Value for the first element; fails on an empty array."""
        from .value import Value

        if self.chain.failed:
            return Value._failed(self.chain)
        if not self._value:
            self.chain.fail("expected non-empty array")
            return Value._failed(self.chain)
        return Value._wrap(self.chain.derive(), self._value[0])

    def last(self) -> Value:
        """Returns a Value for the last element; fails on an empty array."""
        from .value import Value

        if self.chain.failed:
            return Value._failed(self.chain)
        if not self._value:
            self.chain.fail("expected non-empty array")
            return Value._failed(self.chain)
        return Value._wrap(self.chain.derive(), self._value[-1])

    def iter(self) -> list[Value]:
        """
        Returns a list of Values, one per element.

        Example:
            for value in array.iter():
                value.object().contains_key("id")
        """
        from .value import Value

        return [Value._wrap(self.chain.derive(), e) for e in self._value]

    def empty(self) -> Array:
        """Succeeds if array is empty."""
        if self.chain.failed:
            return self
        if self._value:
            self.chain.fail("expected empty array, but got %s", format_value(self._value))
        return self

    def not_empty(self) -> Array:
        """Succeeds if array is non-empty."""
        if self.chain.failed:
            return self
        if not self._value:
            self.chain.fail("expected non-empty array")
        return self

    def equal(self, value: Any) -> Array:
        """
        Succeeds if array is equal to given sequence.

        Before comparison, both are converted to canonical form.

        Example:
            array = Array(reporter, ["foo", 123])
            array.equal(["foo", 123])
        """
        if self.chain.failed:
            return self
        expected, ok = canon_array(self.chain, value)
        if not ok:
            return self
        if not canon_equal(expected, self._value):
            self.chain.fail(
                "expected array equal to:\n%s\n\nbut got:\n%s",
                format_value(expected), format_value(self._value),
            )
        return self

    def not_equal(self, value: Any) -> Array:
        """Succeeds if array is not equal to given sequence."""
        if self.chain.failed:
            return self
        expected, ok = canon_array(self.chain, value)
        if not ok:
            return self
        if canon_equal(expected, self._value):
            self.chain.fail(
                "expected array not equal to:\n%s",
                format_value(expected),
            )
        return self

    def elements(self, *values: Any) -> Array:
        """
        Succeeds if array contains exactly the given elements, in order.

        Example:
            array = Array(reporter, ["foo", 123])
            array.elements("foo", 123)
        """
        if self.chain.failed:
            return self
        expected, ok = canon_array(self.chain, list(values))
        if not ok:
            return self
        if len(expected) != len(self._value):
            self.chain.fail(
                "expected array of length == %s:\n%s\n\nbut got array of length %s:\n%s",
                len(expected), format_value(expected),
                len(self._value), format_value(self._value),
            )
            return self
        if not canon_equal(expected, self._value):
            self.chain.fail(
                "expected array equal to:\n%s\n\nbut got:\n%s",
                format_value(expected), format_value(self._value),
            )
        return self

    def contains(self, *values: Any) -> Array:
        """
        Succeeds if array contains all given elements, in any order.

        Example:
            array = Array(reporter, ["foo", 123])
            array.contains(123)
        """
        if self.chain.failed:
            return self
        expected, ok = canon_array(self.chain, list(values))
        if not ok:
            return self
        for e in expected:
            if not canon_contains(self._value, e):
                self.chain.fail(
                    "expected array containing element:\n%s\n\nbut got:\n%s",
                    format_value(e), format_value(self._value),
                )
                return self
        return self

    def not_contains(self, *values: Any) -> Array:
        """Succeeds if array contains none of the given elements."""
        if self.chain.failed:
            return self
        expected, ok = canon_array(self.chain, list(values))
        if not ok:
            return self
        for e in expected:
            if canon_contains(self._value, e):
                self.chain.fail(
                    "expected array not containing element:\n%s\n\nbut got:\n%s",
                    format_value(e), format_value(self._value),
                )
                return self
        return self

    def contains_only(self, *values: Any) -> Array:
        """
        Succeeds if array holds exactly the given elements, in any order.

        Multiplicity counts: [1, 2, 2] does not contain only (1, 2).

        Example:
            array = Array(reporter, ["foo", 123])
            array.contains_only(123, "foo")
        """
        if self.chain.failed:
            return self
        expected, ok = canon_array(self.chain, list(values))
        if not ok:
            return self
        if len(expected) != len(self._value):
            self.chain.fail(
                "expected array of length == %s:\n%s\n\nbut got array of length %s:\n%s",
                len(expected), format_value(expected),
                len(self._value), format_value(self._value),
            )
            return self
        remaining = list(self._value)
        for e in expected:
            for i, actual in enumerate(remaining):
                if canon_equal(actual, e):
                    del remaining[i]
                    break
            else:
                self.chain.fail(
                    "expected array containing only:\n%s\n\nbut got:\n%s",
                    format_value(expected), format_value(self._value),
                )
                return self
        return self
