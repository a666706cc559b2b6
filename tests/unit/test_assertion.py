"""Tests for the assert_that entry point."""

import logging

import pytest

from matchkit import (
    MatcherAssertionError,
    assert_that,
    contains_string,
    equal_to,
    greater_than,
)


class TestAssertThat:
    """Test matcher-form assertions."""

    def test_passes_silently(self):
        assert assert_that(3, equal_to(3)) is None

    def test_failure_message(self):
        with pytest.raises(MatcherAssertionError) as excinfo:
            assert_that(4, equal_to(3))

        assert str(excinfo.value) == "\nExpected: <3>\n     but: was <4>"

    def test_failure_message_with_reason(self):
        with pytest.raises(MatcherAssertionError) as excinfo:
            assert_that("bar", contains_string("foo"), "greeting")

        assert str(excinfo.value) == \
            'greeting\nExpected: a string containing "foo"\n     but: was "bar"'

    def test_error_carries_actual_and_matcher(self):
        matcher = greater_than(10)
        with pytest.raises(MatcherAssertionError) as excinfo:
            assert_that(5, matcher)

        err = excinfo.value
        assert err.actual == 5
        assert err.matcher is matcher
        assert err.expected == "a value greater than <10>"

    def test_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            assert_that(None, equal_to(1))

    def test_rejects_non_matcher(self):
        with pytest.raises(TypeError):
            assert_that(1, 1)

    def test_failure_is_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="matchkit.assertion"):
            with pytest.raises(MatcherAssertionError):
                assert_that(4, equal_to(3))

        assert any("Expected: <3>" in r.getMessage() for r in caplog.records)


class TestBooleanForm:
    """Test assert_that(condition, reason=...)."""

    def test_true_passes(self):
        assert_that(True, reason="never shown")

    def test_false_raises_reason(self):
        with pytest.raises(MatcherAssertionError, match="list was empty"):
            assert_that([], reason="list was empty")

    def test_positional_reason(self):
        assert_that(True, "never shown")
        with pytest.raises(MatcherAssertionError, match="^no items$"):
            assert_that(False, "no items")

    def test_expected_is_none(self):
        with pytest.raises(MatcherAssertionError) as excinfo:
            assert_that(0, reason="zero")

        assert excinfo.value.expected is None
        assert excinfo.value.actual == 0
