"""
Tests for httpexpect.assertions.string.
"""

import re

from httpexpect import String


class TestString:
    """Tests for String class."""

    def test_non_string_fails(self, reporter):
        string = String(reporter, 123)
        assert string.failed
        assert string.raw() == ""

    def test_length_and_empty(self, reporter):
        String(reporter, "").empty().length().equal(0)
        String(reporter, "héllo").not_empty().length().equal(5)
        assert not reporter.failed

        String(reporter, "x").empty()
        assert len(reporter.failures) == 1

    def test_equal(self, reporter):
        String(reporter, "foo").equal("foo").not_equal("FOO")
        assert not reporter.failed

        String(reporter, "foo").equal("bar")
        assert reporter.messages == ["expected string == 'bar', but got 'foo'"]

    def test_equal_fold(self, reporter):
        String(reporter, "Hello").equal_fold("hELLo").not_equal_fold("world")
        String(reporter, "Straße").equal_fold("STRASSE")
        assert not reporter.failed

    def test_contains(self, reporter):
        s = String(reporter, "Hello, World")
        s.contains("World").not_contains("world")
        s.contains_fold("world").not_contains_fold("moon")
        assert not reporter.failed

        String(reporter, "Hello").contains("bye")
        assert len(reporter.failures) == 1

    def test_match(self, reporter):
        s = String(reporter, "http://example.com/users/john")
        s.match(r"/users/\w+$").not_match(r"^https")
        s.match(re.compile(r"EXAMPLE", re.IGNORECASE))
        assert not reporter.failed

        String(reporter, "abc").match(r"\d")
        assert len(reporter.failures) == 1

    def test_invalid_regex(self, reporter):
        string = String(reporter, "abc")
        string.match("(")
        assert string.failed
        assert "invalid regular expression" in reporter.messages[0]

    def test_failed_chain_is_inert(self, reporter):
        string = String(reporter, None)
        string.equal("x").contains("y").length().gt(10)
        assert len(reporter.failures) == 1
