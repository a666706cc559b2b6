"""Ordering and closeness matchers.

Exports
-------
OrderingComparison
    Compare against an expected value with ``<`` / ``==`` / ``>``.

IsCloseTo
    Absolute distance from an expected real number within a delta.
"""

from __future__ import annotations

import numbers
from typing import Any

from ..core import Description, TypeSafeMatcher

LESS_THAN, EQUAL, GREATER_THAN = -1, 0, 1

_COMPARISON_TEXT = {
    LESS_THAN: "less than",
    EQUAL: "equal to",
    GREATER_THAN: "greater than",
}


def _compare(actual: Any, expected: Any) -> int:
    if actual < expected:
        return LESS_THAN
    if actual > expected:
        return GREATER_THAN
    return EQUAL


def _expected_type_for(value: Any) -> type:
    # bool is an int; treat it as a number like any other
    if isinstance(value, numbers.Real):
        return numbers.Real
    return type(value)


class OrderingComparison(TypeSafeMatcher):
    """Match when ``compare(item, expected)`` falls in ``[min_compare, max_compare]``.

    ::

        OrderingComparison(5, GREATER_THAN, GREATER_THAN)   # a value greater than <5>
        OrderingComparison(5, EQUAL, GREATER_THAN)          # a value equal to or greater than <5>

    Real numbers of any kind compare with each other; other values only with
    values of the expected value's own type.
    """

    def __init__(self, expected: Any, min_compare: int, max_compare: int) -> None:
        if expected is None:
            raise ValueError("OrderingComparison needs a non-None expected value")
        if min_compare not in _COMPARISON_TEXT or max_compare not in _COMPARISON_TEXT \
                or min_compare > max_compare:
            raise ValueError(f"invalid comparison range [{min_compare}, {max_compare}]")
        super().__init__(expected_type=_expected_type_for(expected))
        self._expected = expected
        self._min_compare = min_compare
        self._max_compare = max_compare

    def matches_safely(self, item: Any) -> bool:
        return self._min_compare <= _compare(item, self._expected) <= self._max_compare

    def describe_mismatch_safely(self, item: Any, mismatch_description: Description) -> None:
        mismatch_description.append_value(item) \
            .append_text(" was ") \
            .append_text(_COMPARISON_TEXT[_compare(item, self._expected)]) \
            .append_text(" ") \
            .append_value(self._expected)

    def describe_to(self, description: Description) -> None:
        description.append_text("a value ").append_text(_COMPARISON_TEXT[self._min_compare])
        if self._min_compare != self._max_compare:
            description.append_text(" or ").append_text(_COMPARISON_TEXT[self._max_compare])
        description.append_text(" ").append_value(self._expected)


class IsCloseTo(TypeSafeMatcher):
    """``a numeric value within <delta> of <value>``.

    Mismatch reports how far *beyond* the delta the item was.
    """

    expected_type = numbers.Real

    def __init__(self, value: numbers.Real, delta: numbers.Real) -> None:
        super().__init__()
        if not isinstance(value, numbers.Real) or not isinstance(delta, numbers.Real):
            raise TypeError("IsCloseTo needs real numbers")
        if delta < 0:
            raise ValueError(f"delta must not be negative, got {delta!r}")
        self._value = value
        self._delta = delta

    def _actual_delta(self, item: numbers.Real) -> Any:
        return abs(item - self._value) - self._delta

    def matches_safely(self, item: numbers.Real) -> bool:
        return self._actual_delta(item) <= 0

    def describe_mismatch_safely(self, item: numbers.Real, mismatch_description: Description) -> None:
        mismatch_description.append_value(item) \
            .append_text(" differed by ") \
            .append_value(self._actual_delta(item)) \
            .append_text(" more than delta ") \
            .append_value(self._delta)

    def describe_to(self, description: Description) -> None:
        description.append_text("a numeric value within ") \
            .append_value(self._delta) \
            .append_text(" of ") \
            .append_value(self._value)
