"""String matchers.

Patterns go through the third-party ``regex`` module, which understands the
Unicode property classes (``\\p{Z}``, ``\\p{C}``) used for white-space
compression and accepts the same syntax as ``re`` otherwise.

Exports
-------
SubstringMatcher
    Base for containing / starting with / ending with, optionally ignoring case.

StringContains, StringStartsWith, StringEndsWith
    The three concrete substring relations.

MatchesPattern
    The whole string matches a regular expression.

IsEqualIgnoringCase
    Case-insensitive equality (``str.casefold``).

IsEqualCompressingWhiteSpace
    Equality after collapsing runs of white space / control characters.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

import regex

from ..core import Description, TypeSafeMatcher

_WHITESPACE_RUN = regex.compile(r"[\p{Z}\p{C}]+")


class _StringMatcher(TypeSafeMatcher):
    expected_type = str

    def describe_mismatch_safely(self, item: str, mismatch_description: Description) -> None:
        mismatch_description.append_text("was ").append_value(item)


def _require_text(value: Any, who: str) -> str:
    if value is None:
        raise ValueError(f"{who} needs a non-None string")
    if not isinstance(value, str):
        raise TypeError(f"{who} needs a string, got {type(value).__name__}")
    return value


class SubstringMatcher(_StringMatcher):
    """``a string <relationship> "<substring>"`` (+ `` ignoring case``)."""

    relationship: str = ""

    def __init__(self, substring: str, ignoring_case: bool = False) -> None:
        super().__init__()
        self._substring = _require_text(substring, type(self).__name__)
        self._ignoring_case = ignoring_case

    def _converted(self, text: str) -> str:
        return text.casefold() if self._ignoring_case else text

    def matches_safely(self, item: str) -> bool:
        return self._eval_substring_of(self._converted(item), self._converted(self._substring))

    @abstractmethod
    def _eval_substring_of(self, item: str, substring: str) -> bool: ...

    def describe_to(self, description: Description) -> None:
        description.append_text("a string ") \
            .append_text(self.relationship) \
            .append_text(" ") \
            .append_value(self._substring)
        if self._ignoring_case:
            description.append_text(" ignoring case")


class StringContains(SubstringMatcher):
    relationship = "containing"

    def _eval_substring_of(self, item: str, substring: str) -> bool:
        return substring in item


class StringStartsWith(SubstringMatcher):
    relationship = "starting with"

    def _eval_substring_of(self, item: str, substring: str) -> bool:
        return item.startswith(substring)


class StringEndsWith(SubstringMatcher):
    relationship = "ending with"

    def _eval_substring_of(self, item: str, substring: str) -> bool:
        return item.endswith(substring)


class MatchesPattern(_StringMatcher):
    """The *entire* string matches *pattern*.

    ::

        MatchesPattern(r"\\d+").matches("123")    # True
        MatchesPattern(r"\\d+").matches("123a")   # False

    The pattern is compiled here, so a malformed one raises ``regex.error``
    at construction.
    """

    def __init__(self, pattern: str | regex.Pattern, flags: int = 0) -> None:
        super().__init__()
        if pattern is None:
            raise ValueError("MatchesPattern needs a pattern")
        self._pattern = pattern if isinstance(pattern, regex.Pattern) else regex.compile(pattern, flags)

    def matches_safely(self, item: str) -> bool:
        return self._pattern.fullmatch(item) is not None

    def describe_to(self, description: Description) -> None:
        description.append_text("a string matching the pattern ").append_value(self._pattern.pattern)


class IsEqualIgnoringCase(_StringMatcher):

    def __init__(self, string: str) -> None:
        super().__init__()
        self._string = _require_text(string, "IsEqualIgnoringCase")

    def matches_safely(self, item: str) -> bool:
        return self._string.casefold() == item.casefold()

    def describe_to(self, description: Description) -> None:
        description.append_text("a string equal to ") \
            .append_value(self._string) \
            .append_text(" ignoring case")


class IsEqualCompressingWhiteSpace(_StringMatcher):
    """Equality after white-space compression.

    * leading and trailing white space is ignored
    * any inner run of separator / control characters counts as one space

    ::

        IsEqualCompressingWhiteSpace(" my  foo bar").matches("   my\\tfoo  bar ")   # True
    """

    def __init__(self, string: str) -> None:
        super().__init__()
        self._string = _require_text(string, "IsEqualCompressingWhiteSpace")

    @staticmethod
    def strip_spaces(text: str) -> str:
        return _WHITESPACE_RUN.sub(" ", text).strip()

    def matches_safely(self, item: str) -> bool:
        return self.strip_spaces(self._string) == self.strip_spaces(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("a string equal to ") \
            .append_value(self._string) \
            .append_text(" compressing white space")
