"""Structural matchers over iterables.

Strings are iterable in Python but are never treated as collections here; a
``str`` item is a type mismatch (``was a str ("abc")``).

Exports
-------
EveryItem
    Every element matches a sub-matcher.

HasItem
    At least one element matches a sub-matcher.

ContainsInOrder
    Elements match a list of sub-matchers one-to-one, in order.

IsEmpty
    The collection has no elements.

HasLength
    ``len()`` matches a sub-matcher.
"""

from __future__ import annotations

from collections.abc import Iterable as IterableABC
from collections.abc import Sized
from typing import Any, Iterable, List

from ..core import (
    Description,
    Matcher,
    TypeSafeDiagnosingMatcher,
    TypeSafeMatcher,
    describe_type_mismatch,
    discards,
)


def _not_text(item: Any) -> bool:
    return not isinstance(item, (str, bytes))


class _CollectionDiagnosingMatcher(TypeSafeDiagnosingMatcher):
    expected_type = IterableABC

    def matches(self, item: Any) -> bool:
        return _not_text(item) and super().matches(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is not None and not _not_text(item):
            describe_type_mismatch(item, mismatch_description)
        else:
            super().describe_mismatch(item, mismatch_description)


class EveryItem(_CollectionDiagnosingMatcher):
    """``every item is <desc>``; reports the first failing element."""

    def __init__(self, item_matcher: Matcher) -> None:
        super().__init__()
        self._matcher = item_matcher

    def matches_safely(self, item: Iterable[Any], mismatch_description: Description) -> bool:
        for element in item:
            if not self._matcher.matches(element):
                if not discards(mismatch_description):
                    mismatch_description.append_text("an item ")
                    self._matcher.describe_mismatch(element, mismatch_description)
                return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("every item is ").append_description_of(self._matcher)


class HasItem(_CollectionDiagnosingMatcher):
    """``a collection containing <desc>``.

    Mismatch lists every element's own mismatch, or ``was empty``.
    """

    def __init__(self, element_matcher: Matcher) -> None:
        super().__init__()
        self._matcher = element_matcher

    def matches_safely(self, item: Iterable[Any], mismatch_description: Description) -> bool:
        elements = list(item)
        if not elements:
            mismatch_description.append_text("was empty")
            return False
        for element in elements:
            if self._matcher.matches(element):
                return True
        if discards(mismatch_description):
            return False

        mismatch_description.append_text("mismatches were: [")
        past_first = False
        for element in elements:
            if past_first:
                mismatch_description.append_text(", ")
            self._matcher.describe_mismatch(element, mismatch_description)
            past_first = True
        mismatch_description.append_text("]")
        return False

    def describe_to(self, description: Description) -> None:
        description.append_text("a collection containing ").append_description_of(self._matcher)


class ContainsInOrder(_CollectionDiagnosingMatcher):
    """Elements match *matchers* pairwise, same length, same order.

    Mismatches::

        item 1: was <5>           element 1 rejected
        no item was <3>           collection too short
        not matched: <4>          surplus element
    """

    def __init__(self, matchers: Iterable[Matcher]) -> None:
        super().__init__()
        self._matchers: List[Matcher] = list(matchers)

    def matches_safely(self, item: Iterable[Any], mismatch_description: Description) -> bool:
        next_match = 0
        for element in item:
            if next_match >= len(self._matchers):
                mismatch_description.append_text("not matched: ").append_value(element)
                return False
            matcher = self._matchers[next_match]
            if not matcher.matches(element):
                if not discards(mismatch_description):
                    mismatch_description.append_text(f"item {next_match}: ")
                    matcher.describe_mismatch(element, mismatch_description)
                return False
            next_match += 1

        if next_match < len(self._matchers):
            mismatch_description.append_text("no item was ") \
                .append_description_of(self._matchers[next_match])
            return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("iterable containing ") \
            .append_list("[", ", ", "]", self._matchers)


class IsEmpty(TypeSafeMatcher):
    """``an empty collection``; any ``Sized`` except strings."""

    expected_type = Sized

    def matches_safely(self, item: Sized) -> bool:
        return _not_text(item) and len(item) == 0

    def describe_to(self, description: Description) -> None:
        description.append_text("an empty collection")


class HasLength(TypeSafeMatcher):
    """``a collection with size <desc>``."""

    expected_type = Sized

    def __init__(self, size_matcher: Matcher) -> None:
        super().__init__()
        self._size_matcher = size_matcher

    def matches_safely(self, item: Sized) -> bool:
        return self._size_matcher.matches(len(item))

    def describe_mismatch_safely(self, item: Sized, mismatch_description: Description) -> None:
        mismatch_description.append_text("collection size ")
        self._size_matcher.describe_mismatch(len(item), mismatch_description)

    def describe_to(self, description: Description) -> None:
        description.append_text("a collection with size ").append_description_of(self._size_matcher)
