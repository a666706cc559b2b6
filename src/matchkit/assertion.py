"""Assertion entry point.

Exports
-------
assert_that
    Check a value against a matcher (or a plain boolean) and raise
    ``MatcherAssertionError`` with a rendered message on failure.

MatcherAssertionError
    ``AssertionError`` carrying the actual value and the matcher, so tooling
    (IDE diff views, reporters) can introspect them.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .core import Matcher
from .descriptions import StringDescription

logger = logging.getLogger(__name__)


class MatcherAssertionError(AssertionError):
    """Raised by ``assert_that`` when a value does not match.

    Attributes:
        actual:      The value that was checked.
        matcher:     The matcher it was checked against (``None`` for boolean
                     assertions).
        description: The full rendered message.
        expected:    ``str(matcher)``, or ``None``.
    """

    def __init__(self, description: str, actual: Any = None, matcher: Optional[Matcher] = None) -> None:
        super().__init__(description)
        self.description = description
        self.actual = actual
        self.matcher = matcher

    @property
    def expected(self) -> Optional[str]:
        return None if self.matcher is None else str(self.matcher)

    def __str__(self) -> str:
        return self.description


def assert_that(actual: Any, matcher: Optional[Matcher | str] = None, reason: str = "") -> None:
    """Assert that *actual* satisfies *matcher*.

    Two forms::

        assert_that(value, equal_to(3))
        assert_that(value, equal_to(3), "answer")
        assert_that(len(items) > 0, reason="no items")     # boolean form
        assert_that(len(items) > 0, "no items")            # same, positional reason

    The failure message for the matcher form is::

        <reason>
        Expected: <matcher description>
             but: <mismatch description>

    Raises:
        MatcherAssertionError: on failure.
        TypeError: *matcher* is neither ``None``, a reason string, nor a ``Matcher``.
    """
    if isinstance(matcher, str):
        matcher, reason = None, matcher

    if matcher is None:
        if not actual:
            logger.debug("boolean assertion failed: %s", reason)
            raise MatcherAssertionError(reason, actual=actual)
        return

    if not isinstance(matcher, Matcher):
        raise TypeError(f"assert_that needs a Matcher, got {matcher!r}")

    if matcher.matches(actual):
        return

    description = StringDescription()
    description.append_text(reason) \
        .append_text("\nExpected: ") \
        .append_description_of(matcher) \
        .append_text("\n     but: ")
    matcher.describe_mismatch(actual, description)
    message = str(description)
    logger.debug("assertion failed: %s", message)
    raise MatcherAssertionError(message, actual=actual, matcher=matcher)
