"""
Tests for httpexpect.assertions.boolean and httpexpect.assertions.null.
"""

from httpexpect import Boolean, Null


class TestBoolean:
    """Tests for Boolean class."""

    def test_rejects_non_bool(self, reporter):
        assert Boolean(reporter, 1).failed
        assert Boolean(reporter, None).failed
        assert len(reporter.failures) == 2

    def test_true_false(self, reporter):
        Boolean(reporter, True).true().equal(True).not_equal(False)
        Boolean(reporter, False).false()
        assert not reporter.failed

        Boolean(reporter, True).false()
        assert reporter.messages == ["expected boolean == false, but got true"]

    def test_failed_is_inert(self, reporter):
        boolean = Boolean(reporter, True)
        boolean.false()
        boolean.true().false()
        assert len(reporter.failures) == 1


class TestNull:
    """Tests for Null class."""

    def test_null(self, reporter):
        assert not Null(reporter).failed
        assert not Null(reporter, None).failed
        assert Null(reporter).raw() is None

    def test_non_null_fails(self, reporter):
        assert Null(reporter, 0).failed
        assert reporter.messages == ["expected null value, but got 0"]
