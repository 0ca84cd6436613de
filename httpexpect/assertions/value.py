"""
Untyped entry point into a decoded JSON payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from .array import Array
from .base import Wrapper
from .boolean import Boolean
from .canon import canon_equal, canon_value
from .models import Kind, format_value
from .null import Null
from .number import Number
from .object import Object
from .string import String

if TYPE_CHECKING:
    from ..reporting import Reporter


class Value(Wrapper):
    """
    Wraps a value of any JSON kind and narrows it to a typed wrapper.

    Narrowing to the wrong kind fails the chain and returns the
    requested wrapper type holding its zero payload, so the rest of the
    expression can still run (as no-ops).

    Example:
        value = Value(reporter, {"users": [{"name": "john"}]})
        value.object().value("users").array().element(0).object() \\
            .value_equal("name", "john")
    """

    __slots__ = ()
    zero = None

    def __init__(self, reporter: Reporter, value: Any):
        super().__init__(reporter, None)
        if value is not None:
            data, ok = canon_value(self.chain, value)
            if ok:
                self._value = data

    def raw(self) -> Any:
        return self._value

    @property
    def kind(self) -> Kind:
        return Kind.of(self._value)

    def path(self, expr: str) -> Value:
        """
        Returns a Value for the result of a JSONPath expression.

        A single match yields that value, several matches yield an array
        of them; no match or an invalid expression fails the chain.

        Example:
            value = Value(reporter, {"users": [{"name": "john"}, {"name": "bob"}]})
            value.path("$.users[0].name").string().equal("john")
            value.path("$.users[*].name").array().elements("john", "bob")
        """
        if self.chain.failed:
            return Value._failed(self.chain)
        try:
            jsonpath_expr = parse_jsonpath(expr)
        except JSONPathError as e:
            self.chain.fail("invalid JSONPath expression %s: %s", format_value(expr), e)
            return Value._failed(self.chain)

        try:
            matches = jsonpath_expr.find(self._value)
        except Exception as e:
            self.chain.fail("failed to evaluate JSONPath expression %s: %s", format_value(expr), e)
            return Value._failed(self.chain)
        # strings are leaves, not sequences of characters
        matches = [m for m in matches if not _inside_string(m)]
        if not matches:
            self.chain.fail(
                "expected JSONPath %s to match, but got no matches in:\n%s",
                format_value(expr), format_value(self._value),
            )
            return Value._failed(self.chain)

        if len(matches) == 1:
            return Value._wrap(self.chain.derive(), matches[0].value)
        return Value._wrap(self.chain.derive(), [m.value for m in matches])

    def object(self) -> Object:
        """Returns an Object over the payload if it is an object."""
        if not self._expect_kind(Kind.OBJECT):
            return Object._failed(self.chain)
        return Object._wrap(self.chain.derive(), self._value)

    def array(self) -> Array:
        """Returns an Array over the payload if it is an array."""
        if not self._expect_kind(Kind.ARRAY):
            return Array._failed(self.chain)
        return Array._wrap(self.chain.derive(), self._value)

    def string(self) -> String:
        """Returns a String over the payload if it is a string."""
        if not self._expect_kind(Kind.STRING):
            return String._failed(self.chain)
        return String._wrap(self.chain.derive(), self._value)

    def number(self) -> Number:
        """Returns a Number over the payload if it is a number."""
        if not self._expect_kind(Kind.NUMBER):
            return Number._failed(self.chain)
        return Number._wrap(self.chain.derive(), self._value)

    def boolean(self) -> Boolean:
        """Returns a Boolean over the payload if it is a boolean."""
        if not self._expect_kind(Kind.BOOLEAN):
            return Boolean._failed(self.chain)
        return Boolean._wrap(self.chain.derive(), self._value)

    def null(self) -> Null:
        """Succeeds if the payload is null."""
        if not self._expect_kind(Kind.NULL):
            return Null._failed(self.chain)
        return Null._wrap(self.chain.derive(), None)

    def not_null(self) -> Value:
        """Succeeds if the payload is not null."""
        if self.chain.failed:
            return self
        if self._value is None:
            self.chain.fail("expected non-null value")
        return self

    def equal(self, value: Any) -> Value:
        """
        Succeeds if the payload is equal to given value.

        Before comparison, both are converted to canonical form.

        Example:
            value = Value(reporter, {"foo": 123})
            value.equal({"foo": 123.0})
        """
        if self.chain.failed:
            return self
        expected, ok = canon_value(self.chain, value)
        if not ok:
            return self
        if not canon_equal(expected, self._value):
            self.chain.fail(
                "expected value equal to:\n%s\n\nbut got:\n%s",
                format_value(expected), format_value(self._value),
            )
        return self

    def not_equal(self, value: Any) -> Value:
        """Succeeds if the payload is not equal to given value."""
        if self.chain.failed:
            return self
        expected, ok = canon_value(self.chain, value)
        if not ok:
            return self
        if canon_equal(expected, self._value):
            self.chain.fail("expected value not equal to:\n%s", format_value(expected))
        return self

    def _expect_kind(self, kind: Kind) -> bool:
        if self.chain.failed:
            return False
        actual = Kind.of(self._value)
        if actual != kind:
            self.chain.fail(
                "expected %s value, but got %s:\n%s",
                kind.value, actual.value, format_value(self._value),
            )
            return False
        return True


def _inside_string(match: Any) -> bool:
    context = match.context
    return context is not None and isinstance(context.value, str)
