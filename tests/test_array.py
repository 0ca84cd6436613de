"""
Tests for httpexpect.assertions.array.
"""

import pytest

from httpexpect import Array, Value


class TestArray:
    """Tests for Array class."""

    def test_null_fails(self, reporter):
        assert Array(reporter, None).failed

    def test_string_is_not_array(self, reporter):
        Array(reporter, "abc")
        assert len(reporter.failures) == 1

    def test_length_and_empty(self, reporter):
        Array(reporter, []).empty().length().equal(0)
        Array(reporter, (1, 2)).not_empty().length().equal(2)
        assert not reporter.failed

        Array(reporter, []).not_empty()
        assert len(reporter.failures) == 1

    def test_element(self, reporter):
        array = Array(reporter, ["foo", 123])
        array.element(0).string().equal("foo")
        array.element(1).number().equal(123)
        array.first().string().equal("foo")
        array.last().number().equal(123)
        assert not reporter.failed

    def test_element_out_of_bounds(self, reporter):
        array = Array(reporter, ["foo"])
        element = array.element(1)
        assert isinstance(element, Value)
        assert element.failed
        assert array.failed
        assert len(reporter.failures) == 1

    @pytest.mark.parametrize("index", [True, 1.0, "0"])
    def test_element_non_integer_index(self, reporter, index):
        """Only true integers index an array."""
        array = Array(reporter, ["foo", "bar"])
        element = array.element(index)
        assert element.failed
        assert array.failed
        assert len(reporter.failures) == 1
        assert "expected integer array index" in reporter.messages[0]

    def test_negative_index(self, reporter):
        Array(reporter, ["foo"]).element(-1)
        assert len(reporter.failures) == 1

    def test_first_on_empty(self, reporter):
        Array(reporter, []).first()
        assert reporter.messages == ["expected non-empty array"]

    def test_iter(self, reporter):
        values = Array(reporter, [1, 2, 3]).iter()
        assert len(values) == 3
        for i, value in enumerate(values, start=1):
            value.number().equal(i)
        assert not reporter.failed

    def test_equal(self, reporter):
        Array(reporter, [1, "a"]).equal((1.0, "a")).not_equal(["a", 1])
        assert not reporter.failed

    def test_elements_order_sensitive(self, reporter):
        """elements() compares in order."""
        Array(reporter, ["foo", 123]).elements("foo", 123)
        assert not reporter.failed

        Array(reporter, ["foo", 123]).elements(123, "foo")
        assert len(reporter.failures) == 1

    def test_elements_length_mismatch(self, reporter):
        Array(reporter, [1, 2]).elements(1)
        assert "length" in reporter.messages[0]

    def test_contains(self, reporter):
        Array(reporter, [1, "a", None]).contains(None, 1).not_contains("b", 2)
        assert not reporter.failed

        Array(reporter, [1]).contains(2)
        Array(reporter, [1]).not_contains(1)
        assert len(reporter.failures) == 2

    def test_contains_only(self, reporter):
        Array(reporter, [1, 2, 3]).contains_only(3, 2, 1)
        assert not reporter.failed

    def test_contains_only_counts_duplicates(self, reporter):
        """Multiplicity matters for contains_only."""
        Array(reporter, [1, 2, 2]).contains_only(1, 2)
        assert len(reporter.failures) == 1

        Array(reporter, [1, 2, 2]).contains_only(1, 1, 2)
        assert len(reporter.failures) == 2

        Array(reporter, [1, 2, 2]).contains_only(2, 1, 2)
        assert len(reporter.failures) == 2

    def test_failed_array_is_inert(self, reporter):
        array = Array(reporter, None)
        array.contains(1).elements(1).element(0).string().equal("x")
        assert len(reporter.failures) == 1
