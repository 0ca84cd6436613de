"""
Tests for httpexpect.assertions.canon.

Tests conversion of values to canonical form and canonical equality.
"""

from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest

from httpexpect import Chain, canon_equal, canon_value
from httpexpect.assertions import canon_array, canon_map, canon_number


class Color(str, Enum):
    RED = "red"


@dataclass
class User:
    name: str
    age: int

    def to_dict(self):
        return {"name": self.name, "age": self.age}


def cyclic_dict():
    data = {"a": 1}
    data["self"] = data
    return data


def cyclic_list():
    data = [1]
    data.append(data)
    return data


class TestCanonValue:
    """Tests for canon_value()."""

    @pytest.mark.parametrize("value, expected", [
        (None, None),
        (True, True),
        (123, 123.0),
        (Decimal("1.5"), 1.5),
        (Fraction(1, 4), 0.25),
        ("foo", "foo"),
        ((1, 2), [1.0, 2.0]),
        ({1: "a"}, {"1": "a"}),
        (Color.RED, "red"),
        (OrderedDict([("a", 1)]), {"a": 1.0}),
        (User("john", 30), {"name": "john", "age": 30.0}),
    ])
    def test_converts(self, reporter, value, expected):
        """Supported values convert to their JSON round-trip form."""
        result, ok = canon_value(Chain(reporter), value)
        assert ok
        assert canon_equal(result, expected)
        assert not reporter.failed

    @pytest.mark.parametrize("value", [
        {1, 2},
        b"bytes",
        float("nan"),
        float("inf"),
        object(),
        {(1, 2): "tuple key"},
        Decimal("sNaN"),
        Decimal("NaN"),
        cyclic_dict(),
        cyclic_list(),
        {"nested": [cyclic_list()]},
    ])
    def test_rejects(self, reporter, value):
        """Unrepresentable values fail the chain."""
        chain = Chain(reporter)
        _, ok = canon_value(chain, value)
        assert not ok
        assert chain.failed
        assert len(reporter.failures) == 1

    def test_idempotent(self, reporter):
        """Canonicalizing a canonical value yields an equal value."""
        chain = Chain(reporter)
        data = {"foo": [1, Decimal(2), (3, None)], "bar": {"baz": Color.RED}}
        once, _ = canon_value(chain, data)
        twice, _ = canon_value(chain, once)
        assert canon_equal(once, twice)
        assert canon_equal(once, once)
        assert not chain.failed

    def test_shared_references_are_not_cycles(self, reporter):
        """The same container may appear more than once if it does not contain itself."""
        shared = [1, 2]
        chain = Chain(reporter)
        result, ok = canon_value(chain, {"a": shared, "b": [shared, shared]})
        assert ok
        assert canon_equal(result, {"a": [1.0, 2.0], "b": [[1.0, 2.0], [1.0, 2.0]]})
        assert not reporter.failed

    def test_numbers_compare_equal(self, reporter):
        """Decimal, Fraction, int and float spellings of a number are equal."""
        chain = Chain(reporter)
        values = [Decimal(123), Fraction(246, 2), 123, 123.0]
        canonical = [canon_value(chain, v)[0] for v in values]
        for a in canonical:
            for b in canonical:
                assert canon_equal(a, b)


class TestCanonHelpers:
    """Tests for canon_number(), canon_array() and canon_map()."""

    def test_number_rejects_bool(self, reporter):
        chain = Chain(reporter)
        _, ok = canon_number(chain, True)
        assert not ok
        assert chain.failed

    def test_number_rejects_string(self, reporter):
        chain = Chain(reporter)
        _, ok = canon_number(chain, "123")
        assert not ok

    def test_array_rejects_string(self, reporter):
        """A str is not treated as a sequence of characters."""
        chain = Chain(reporter)
        _, ok = canon_array(chain, "abc")
        assert not ok

    def test_map_rejects_list(self, reporter):
        chain = Chain(reporter)
        _, ok = canon_map(chain, [1, 2])
        assert not ok

    def test_map_accepts_to_dict(self, reporter):
        chain = Chain(reporter)
        value, ok = canon_map(chain, User("bob", 5))
        assert ok
        assert value == {"name": "bob", "age": 5.0}


class TestCanonEqual:
    """Tests for canon_equal()."""

    def test_kinds_must_match(self):
        assert not canon_equal(True, 1.0)
        assert not canon_equal(None, False)
        assert not canon_equal("1", 1.0)
        assert not canon_equal([], {})

    def test_nested(self):
        assert canon_equal({"a": [1.0, {"b": None}]}, {"a": [1.0, {"b": None}]})
        assert not canon_equal({"a": [1.0]}, {"a": [1.0, 2.0]})
        assert not canon_equal({"a": 1.0}, {"b": 1.0})
