"""Tests for string matchers."""

import pytest
import regex

from matchkit import (
    StringDescription,
    contains_string,
    contains_string_ignoring_case,
    ends_with,
    ends_with_ignoring_case,
    equal_to_compressing_white_space,
    equal_to_ignoring_case,
    matches_pattern,
    starts_with,
    starts_with_ignoring_case,
)


def mismatch_of(matcher, item):
    d = StringDescription()
    matcher.describe_mismatch(item, d)
    return str(d)


class TestSubstringMatchers:
    """Test containing / starting with / ending with."""

    def test_contains(self):
        m = contains_string("ring")
        assert m.matches("myStringOfNote") is True
        assert m.matches("nope") is False

    def test_contains_ignoring_case(self):
        assert contains_string_ignoring_case("RING").matches("myStringOfNote") is True
        assert contains_string("RING").matches("myStringOfNote") is False

    def test_starts_and_ends_with(self):
        assert starts_with("my").matches("myString") is True
        assert starts_with("My").matches("myString") is False
        assert starts_with_ignoring_case("My").matches("myString") is True
        assert ends_with("ing").matches("myString") is True
        assert ends_with_ignoring_case("ING").matches("myString") is True

    def test_descriptions(self):
        assert str(contains_string("foo")) == 'a string containing "foo"'
        assert str(starts_with("foo")) == 'a string starting with "foo"'
        assert str(ends_with("foo")) == 'a string ending with "foo"'
        assert str(ends_with_ignoring_case("foo")) == 'a string ending with "foo" ignoring case'

    def test_mismatch(self):
        assert mismatch_of(contains_string("foo"), "bar") == 'was "bar"'

    def test_none_and_wrong_type(self):
        m = contains_string("foo")

        assert m.matches(None) is False
        assert mismatch_of(m, None) == "was null"
        assert mismatch_of(m, 12) == "was a int (<12>)"

    def test_none_substring_rejected(self):
        with pytest.raises(ValueError):
            contains_string(None)


class TestMatchesPattern:
    def test_full_match_required(self):
        m = matches_pattern(r"\d+")

        assert m.matches("123") is True
        assert m.matches("123a") is False

    def test_precompiled_pattern(self):
        assert matches_pattern(regex.compile(r"[a-z]+")).matches("abc") is True

    def test_flags(self):
        assert matches_pattern("abc", regex.IGNORECASE).matches("ABC") is True

    def test_description(self):
        assert str(matches_pattern(r"a\d")) == 'a string matching the pattern "a\\\\d"'

    def test_bad_pattern_fails_at_construction(self):
        with pytest.raises(regex.error):
            matches_pattern("(unclosed")


class TestEqualityVariants:
    def test_ignoring_case(self):
        m = equal_to_ignoring_case("Hello")

        assert m.matches("hELLO") is True
        assert m.matches("help") is False
        assert str(m) == 'a string equal to "Hello" ignoring case'

    def test_compressing_white_space(self):
        m = equal_to_compressing_white_space(" my  foo bar")

        assert m.matches("   my\tfoo  bar ") is True
        assert m.matches("my foo\n bar") is True
        assert m.matches("my foobar") is False

    def test_compressing_unicode_separators(self):
        """Non-breaking spaces count as white space."""
        assert equal_to_compressing_white_space("a b").matches("a\u00a0\u2003b") is True

    def test_compressing_description_and_mismatch(self):
        m = equal_to_compressing_white_space("a b")

        assert str(m) == 'a string equal to "a b" compressing white space'
        assert mismatch_of(m, "ab") == 'was "ab"'
