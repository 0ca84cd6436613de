"""
Object wrapper (Python representation of a JSON object).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .array import Array
from .base import Wrapper
from .canon import canon_equal, canon_map, canon_value
from .models import format_value

if TYPE_CHECKING:
    from ..reporting import Reporter
    from .value import Value


class Object(Wrapper):
    """
    Provides methods to inspect an attached dict of canonical values.

    Example:
        obj = Object(reporter, {"foo": 123})
        obj.contains_key("foo").value_equal("foo", 123)
        obj.value("foo").number().gt(100)
    """

    __slots__ = ()
    zero: dict[str, Any] = {}

    def __init__(self, reporter: Reporter, value: Any):
        super().__init__(reporter, {})
        if value is None:
            self.chain.fail("expected non-null map value")
            return
        data, ok = canon_map(self.chain, value)
        if ok:
            self._value = data

    def raw(self) -> dict[str, Any]:
        return self._value

    def keys(self) -> Array:
        """
        Returns an Array of the object keys.

        Key order follows the payload and should not be relied upon.

        Example:
            obj = Object(reporter, {"foo": 123, "bar": 456})
            obj.keys().contains_only("bar", "foo")
        """
        return Array._wrap(self.chain.derive(), list(self._value.keys()))

    def values(self) -> Array:
        """
        Returns an Array of the object values, in the same order as keys().

        Example:
            obj = Object(reporter, {"foo": 123, "bar": 456})
            obj.values().contains_only(456, 123)
        """
        return Array._wrap(self.chain.derive(), list(self._value.values()))

    def value(self, key: str) -> Value:
        """
        Returns a Value for the given key; a missing key fails the chain.

        Example:
            obj = Object(reporter, {"foo": 123})
            obj.value("foo").number().equal(123)
        """
        from .value import Value

        if self.chain.failed:
            return Value._failed(self.chain)
        if key not in self._value:
            self.chain.fail(
                "expected map containing %s key, but got:\n%s",
                format_value(key), format_value(self._value),
            )
            return Value._failed(self.chain)
        return Value._wrap(self.chain.derive(), self._value[key])

    def empty(self) -> Object:
        """Succeeds if object is empty."""
        if self.chain.failed:
            return self
        if self._value:
            self.chain.fail("expected empty map, but got:\n%s", format_value(self._value))
        return self

    def not_empty(self) -> Object:
        """Succeeds if object is non-empty."""
        if self.chain.failed:
            return self
        if not self._value:
            self.chain.fail("expected non-empty map")
        return self

    def equal(self, value: Any) -> Object:
        """
        Succeeds if object is equal to given mapping.

        Before comparison, both are converted to canonical form; the
        expected value may also be any object implementing ``to_dict()``.

        Example:
            obj = Object(reporter, {"foo": 123})
            obj.equal({"foo": 123})
        """
        if self.chain.failed:
            return self
        expected, ok = canon_map(self.chain, value)
        if not ok:
            return self
        if not canon_equal(expected, self._value):
            self.chain.fail(
                "expected map equal to:\n%s\n\nbut got:\n%s",
                format_value(expected), format_value(self._value),
            )
        return self

    def not_equal(self, value: Any) -> Object:
        """Succeeds if object is not equal to given mapping."""
        if self.chain.failed:
            return self
        expected, ok = canon_map(self.chain, value)
        if not ok:
            return self
        if canon_equal(expected, self._value):
            self.chain.fail("expected map not equal to:\n%s", format_value(expected))
        return self

    def contains_key(self, key: str) -> Object:
        """Succeeds if object contains given key."""
        if self.chain.failed:
            return self
        if key not in self._value:
            self.chain.fail(
                "expected map containing %s key, but got:\n%s",
                format_value(key), format_value(self._value),
            )
        return self

    def not_contains_key(self, key: str) -> Object:
        """Succeeds if object doesn't contain given key."""
        if self.chain.failed:
            return self
        if key in self._value:
            self.chain.fail(
                "expected map not containing %s key, but got:\n%s",
                format_value(key), format_value(self._value),
            )
        return self

    def contains_map(self, value: Any) -> Object:
        """
        Succeeds if object contains given sub-object.

        Nested objects are matched recursively; arrays and scalars must
        be equal.

        Example:
            obj = Object(reporter, {"foo": 123, "bar": {"a": 1, "b": 2}})
            obj.contains_map({"bar": {"b": 2}})
        """
        if self.chain.failed:
            return self
        expected, ok = canon_map(self.chain, value)
        if not ok:
            return self
        if not _contains_map(self._value, expected):
            self.chain.fail(
                "expected map including sub-map:\n%s\n\nbut got:\n%s",
                format_value(expected), format_value(self._value),
            )
        return self

    def not_contains_map(self, value: Any) -> Object:
        """Succeeds if object doesn't contain given sub-object."""
        if self.chain.failed:
            return self
        expected, ok = canon_map(self.chain, value)
        if not ok:
            return self
        if _contains_map(self._value, expected):
            self.chain.fail(
                "expected map not including sub-map:\n%s\n\nbut got:\n%s",
                format_value(expected), format_value(self._value),
            )
        return self

    def value_equal(self, key: str, value: Any) -> Object:
        """
        Succeeds if object's value for given key is equal to given value.

        A missing key fails the chain as well.

        Example:
            obj = Object(reporter, {"foo": 123})
            obj.value_equal("foo", 123)
        """
        if self.chain.failed:
            return self
        if key not in self._value:
            self.chain.fail(
                "expected map containing %s key, but got:\n%s",
                format_value(key), format_value(self._value),
            )
            return self
        expected, ok = canon_value(self.chain, value)
        if not ok:
            return self
        if not canon_equal(expected, self._value[key]):
            self.chain.fail(
                "expected value for key %s equal to:\n%s\n\nbut got:\n%s",
                format_value(key), format_value(expected), format_value(self._value[key]),
            )
        return self

    def value_not_equal(self, key: str, value: Any) -> Object:
        """
        Succeeds if object's value for given key is not equal to given value.

        A missing key fails the chain.
        """
        if self.chain.failed:
            return self
        if key not in self._value:
            self.chain.fail(
                "expected map containing %s key, but got:\n%s",
                format_value(key), format_value(self._value),
            )
            return self
        expected, ok = canon_value(self.chain, value)
        if not ok:
            return self
        if canon_equal(expected, self._value[key]):
            self.chain.fail(
                "expected value for key %s not equal to:\n%s",
                format_value(key), format_value(expected),
            )
        return self


def _contains_map(outer: dict[str, Any], inner: dict[str, Any]) -> bool:
    for key, expected in inner.items():
        if key not in outer:
            return False
        actual = outer[key]
        if isinstance(expected, dict) and isinstance(actual, dict):
            if not _contains_map(actual, expected):
                return False
        elif not canon_equal(actual, expected):
            return False
    return True
