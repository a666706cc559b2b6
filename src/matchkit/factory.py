"""Matcher factory: the single place where every matcher gets a short,
readable constructor function.

Test code should use these rather than the classes::

    assert_that(result, all_of(instance_of(int), greater_than(0)))
    assert_that(user, has_property("name", starts_with("A")))
    assert_that(name, either(equal_to("Bob")).or_(equal_to("Alice")))

Python keywords get a trailing underscore: ``is_``, ``not_``, ``and_``,
``or_``.

Wrapping rule for arguments that accept "a matcher or a value": a
``Matcher`` is used as is, anything else is wrapped in ``equal_to``.
"""

from __future__ import annotations

from typing import Any, Sequence

import jmespath

from .core import CustomMatcher, Matcher
from .matchers.basic import DescribedAs, Is, IsAnything, IsEqual, IsInstanceOf, IsNull, IsSame
from .matchers.beans import HasProperty, SamePropertyValuesAs
from .matchers.collection import ContainsInOrder, EveryItem, HasItem, HasLength, IsEmpty
from .matchers.document import HasPath
from .matchers.logical import (
    AllOf, AnyOf, IsNot,
    CombinableBothMatcher, CombinableEitherMatcher,
)
from .matchers.number import EQUAL, GREATER_THAN, LESS_THAN, IsCloseTo, OrderingComparison
from .matchers.text import (
    IsEqualCompressingWhiteSpace, IsEqualIgnoringCase, MatchesPattern,
    StringContains, StringEndsWith, StringStartsWith,
)


# Default for arguments where None is a legitimate expected value.
_ANY = object()


def wrap_matcher(value: Any) -> Matcher:
    """Return *value* if it is a matcher, otherwise ``equal_to(value)``."""
    if isinstance(value, Matcher):
        return value
    return IsEqual(value)


def _flatten(matchers: Sequence[Any]) -> list:
    # all_of([a, b]) and all_of(a, b) are the same thing
    if len(matchers) == 1 and isinstance(matchers[0], (list, tuple)):
        matchers = matchers[0]
    return [wrap_matcher(m) for m in matchers]


# ─────────────────────────────────────────────────────────────────────────────
# basic
# ─────────────────────────────────────────────────────────────────────────────


def equal_to(expected: Any) -> Matcher:
    return IsEqual(expected)


def same_instance(obj: Any) -> Matcher:
    return IsSame(obj)


def anything(description: str = "ANYTHING") -> Matcher:
    return IsAnything(description)


def none_value() -> Matcher:
    return IsNull()


def not_none_value() -> Matcher:
    return IsNot(IsNull())


def instance_of(cls: type | tuple[type, ...]) -> Matcher:
    return IsInstanceOf(cls)


def is_(value: Any) -> Matcher:
    """``is <desc>``.  A class becomes ``instance_of``, a plain value ``equal_to``."""
    if isinstance(value, type):
        return Is(IsInstanceOf(value))
    return Is(wrap_matcher(value))


def described_as(template: str, matcher: Matcher, *values: Any) -> Matcher:
    return DescribedAs(template, matcher, *values)


def custom(description: str, predicate: Any) -> Matcher:
    return CustomMatcher(description, predicate)


# ─────────────────────────────────────────────────────────────────────────────
# logical
# ─────────────────────────────────────────────────────────────────────────────


def all_of(*matchers: Any) -> Matcher:
    return AllOf(_flatten(matchers))


def any_of(*matchers: Any) -> Matcher:
    return AnyOf(_flatten(matchers))


def not_(value: Any) -> Matcher:
    return IsNot(wrap_matcher(value))


def both(matcher: Matcher) -> CombinableBothMatcher:
    return CombinableBothMatcher(matcher)


def either(matcher: Matcher) -> CombinableEitherMatcher:
    return CombinableEitherMatcher(matcher)


# ─────────────────────────────────────────────────────────────────────────────
# collection
# ─────────────────────────────────────────────────────────────────────────────


def every_item(item_matcher: Any) -> Matcher:
    return EveryItem(wrap_matcher(item_matcher))


def has_item(item: Any) -> Matcher:
    return HasItem(wrap_matcher(item))


def has_items(*items: Any) -> Matcher:
    if not items:
        raise ValueError("has_items needs at least one item")
    return AllOf([HasItem(wrap_matcher(i)) for i in items])


def contains_exactly(*items: Any) -> Matcher:
    return ContainsInOrder([wrap_matcher(i) for i in items])


def empty() -> Matcher:
    return IsEmpty()


def has_length(length: Any) -> Matcher:
    return HasLength(wrap_matcher(length))


# ─────────────────────────────────────────────────────────────────────────────
# text
# ─────────────────────────────────────────────────────────────────────────────


def contains_string(substring: str) -> Matcher:
    return StringContains(substring)


def contains_string_ignoring_case(substring: str) -> Matcher:
    return StringContains(substring, ignoring_case=True)


def starts_with(prefix: str) -> Matcher:
    return StringStartsWith(prefix)


def starts_with_ignoring_case(prefix: str) -> Matcher:
    return StringStartsWith(prefix, ignoring_case=True)


def ends_with(suffix: str) -> Matcher:
    return StringEndsWith(suffix)


def ends_with_ignoring_case(suffix: str) -> Matcher:
    return StringEndsWith(suffix, ignoring_case=True)


def matches_pattern(pattern: Any, flags: int = 0) -> Matcher:
    return MatchesPattern(pattern, flags)


def equal_to_ignoring_case(string: str) -> Matcher:
    return IsEqualIgnoringCase(string)


def equal_to_compressing_white_space(string: str) -> Matcher:
    return IsEqualCompressingWhiteSpace(string)


# ─────────────────────────────────────────────────────────────────────────────
# number
# ─────────────────────────────────────────────────────────────────────────────


def greater_than(value: Any) -> Matcher:
    return OrderingComparison(value, GREATER_THAN, GREATER_THAN)


def greater_than_or_equal_to(value: Any) -> Matcher:
    return OrderingComparison(value, EQUAL, GREATER_THAN)


def less_than(value: Any) -> Matcher:
    return OrderingComparison(value, LESS_THAN, LESS_THAN)


def less_than_or_equal_to(value: Any) -> Matcher:
    return OrderingComparison(value, LESS_THAN, EQUAL)


def comparable_to(value: Any) -> Matcher:
    return OrderingComparison(value, EQUAL, EQUAL)


def close_to(value: Any, delta: Any) -> Matcher:
    return IsCloseTo(value, delta)


# ─────────────────────────────────────────────────────────────────────────────
# beans / documents
# ─────────────────────────────────────────────────────────────────────────────


def same_property_values_as(expected: Any, *ignored_properties: str) -> Matcher:
    return SamePropertyValuesAs(expected, list(ignored_properties))


def has_property(name: str, value: Any = _ANY) -> Matcher:
    """Without *value* the property only has to exist; ``None`` means equal to ``None``."""
    return HasProperty(name, None if value is _ANY else wrap_matcher(value))


def has_path(expression: str, value: Any = _ANY,
             *, options: jmespath.Options | None = None) -> Matcher:
    """Without *value* the path has to resolve to something other than ``None``."""
    return HasPath(expression, None if value is _ANY else wrap_matcher(value), options=options)


__all__ = [
    "wrap_matcher",
    "equal_to", "same_instance", "anything", "none_value", "not_none_value",
    "instance_of", "is_", "described_as", "custom",
    "all_of", "any_of", "not_", "both", "either",
    "every_item", "has_item", "has_items", "contains_exactly", "empty", "has_length",
    "contains_string", "contains_string_ignoring_case",
    "starts_with", "starts_with_ignoring_case",
    "ends_with", "ends_with_ignoring_case",
    "matches_pattern", "equal_to_ignoring_case", "equal_to_compressing_white_space",
    "greater_than", "greater_than_or_equal_to", "less_than", "less_than_or_equal_to",
    "comparable_to", "close_to",
    "same_property_values_as", "has_property", "has_path",
]
