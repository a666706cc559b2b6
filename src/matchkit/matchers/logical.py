"""Logical combinators: AND, OR, NOT and the fluent ``both`` / ``either``.

Evaluation order is part of the contract: sub-matchers are consulted left to
right and evaluation stops at the first one that decides the result.  A
sub-matcher after that point is never called.

Exports
-------
AllOf
    Every sub-matcher must match.  Reports the first failing one.

AnyOf
    At least one sub-matcher must match.

IsNot
    Logical negation of a single matcher.

CombinableMatcher
    Fluent ``both(a).and_(b)`` / ``either(a).or_(b)`` builder.  Each call
    returns a new matcher; the receiver is left untouched.

CombinableBothMatcher / CombinableEitherMatcher
    The first half of a ``both`` / ``either`` pair.
"""

from __future__ import annotations

from typing import Any, Iterable, Tuple

from ..core import Description, DiagnosingMatcher, Matcher, discards


def _matcher_tuple(matchers: Iterable[Any], who: str) -> Tuple[Matcher, ...]:
    result = tuple(matchers)
    if not result:
        raise ValueError(f"{who} needs at least one matcher")
    for m in result:
        if not isinstance(m, Matcher):
            raise TypeError(f"{who} needs Matcher instances, got {m!r}")
    return result


class AllOf(DiagnosingMatcher):
    """Match when every sub-matcher matches.

    ::

        AllOf([greater_than(0), less_than(10)])
        # describes as "(a value greater than <0> and a value less than <10>)"

    Mismatch: ``<failing desc> <failing mismatch>`` for the first sub-matcher
    that rejects the item; later sub-matchers are not evaluated.  ``matches``
    renders nothing, so each sub-matcher runs at most once per call.
    """

    def __init__(self, matchers: Iterable[Matcher]) -> None:
        self._matchers = _matcher_tuple(matchers, "AllOf")

    @property
    def matchers(self) -> Tuple[Matcher, ...]:
        return self._matchers

    def matches(self, item: Any) -> bool:
        for matcher in self._matchers:
            if not matcher.matches(item):
                return False
        return True

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        for matcher in self._matchers:
            if not matcher.matches(item):
                if not discards(mismatch_description):
                    mismatch_description.append_description_of(matcher).append_text(" ")
                    matcher.describe_mismatch(item, mismatch_description)
                return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " and ", ")", self._matchers)


class AnyOf(Matcher):
    """Match when at least one sub-matcher matches.

    When every branch fails the mismatch is the default ``was <item>``; the
    branches' own mismatch texts are not concatenated.
    """

    def __init__(self, matchers: Iterable[Matcher]) -> None:
        self._matchers = _matcher_tuple(matchers, "AnyOf")

    @property
    def matchers(self) -> Tuple[Matcher, ...]:
        return self._matchers

    def matches(self, item: Any) -> bool:
        for matcher in self._matchers:
            if matcher.matches(item):
                return True
        return False

    def describe_to(self, description: Description) -> None:
        description.append_list("(", " or ", ")", self._matchers)


class IsNot(Matcher):
    """Invert a matcher.

    ::

        IsNot(equal_to(3)).matches(4)   # True
        str(IsNot(equal_to(3)))         # 'not <3>'
    """

    def __init__(self, matcher: Matcher) -> None:
        if not isinstance(matcher, Matcher):
            raise TypeError(f"IsNot needs a Matcher, got {matcher!r}")
        self._matcher = matcher

    def matches(self, item: Any) -> bool:
        return not self._matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("not ").append_description_of(self._matcher)


# ─────────────────────────────────────────────────────────────────────────────
# Fluent combination
# ─────────────────────────────────────────────────────────────────────────────


class CombinableMatcher(Matcher):
    """Left-associative fluent combination.

    Matching and mismatch description delegate straight to the combined
    ``AllOf`` / ``AnyOf``.

    ``and_`` / ``or_`` never mutate the receiver; they return a new
    ``CombinableMatcher`` over a new, one-longer list::

        both_3 = both(equal_to(3))           # CombinableBothMatcher
        m1 = both_3.and_(not_(equal_to(4)))  # AllOf([=3, not =4])
        m2 = m1.and_(greater_than(0))        # AllOf([=3, not =4, >0]); m1 unchanged

    Chaining an operator of the same kind extends the flat list instead of
    nesting, so ``either(a).or_(b).or_(c)`` describes as ``(a or b or c)``.
    """

    def __init__(self, matcher: Matcher, *, _chained: type | None = None) -> None:
        if not isinstance(matcher, Matcher):
            raise TypeError(f"CombinableMatcher needs a Matcher, got {matcher!r}")
        self._matcher = matcher
        # AllOf / AnyOf when self._matcher was built by and_ / or_
        self._chained = _chained

    def matches(self, item: Any) -> bool:
        return self._matcher.matches(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self._matcher.describe_mismatch(item, mismatch_description)

    def describe_to(self, description: Description) -> None:
        description.append_description_of(self._matcher)

    def and_(self, other: Matcher) -> 'CombinableMatcher':
        return CombinableMatcher(AllOf(self._extended_with(other, AllOf)), _chained=AllOf)

    def or_(self, other: Matcher) -> 'CombinableMatcher':
        return CombinableMatcher(AnyOf(self._extended_with(other, AnyOf)), _chained=AnyOf)

    def _extended_with(self, other: Matcher, kind: type) -> list:
        if self._chained is kind:
            return [*self._matcher.matchers, other]
        return [self._matcher, other]


class CombinableBothMatcher:
    """First half of ``both(a).and_(b)``.  Not a matcher on its own."""

    def __init__(self, matcher: Matcher) -> None:
        if not isinstance(matcher, Matcher):
            raise TypeError(f"both() needs a Matcher, got {matcher!r}")
        self._first = matcher

    def and_(self, other: Matcher) -> CombinableMatcher:
        return CombinableMatcher(self._first).and_(other)


class CombinableEitherMatcher:
    """First half of ``either(a).or_(b)``.  Not a matcher on its own."""

    def __init__(self, matcher: Matcher) -> None:
        if not isinstance(matcher, Matcher):
            raise TypeError(f"either() needs a Matcher, got {matcher!r}")
        self._first = matcher

    def or_(self, other: Matcher) -> CombinableMatcher:
        return CombinableMatcher(self._first).or_(other)
