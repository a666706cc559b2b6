"""Matchers over JSON-like documents, addressed with JMESPath.

A *document* is a mapping or a list (tuples are accepted and seen as lists,
because JMESPath does not recognise tuples).

Exports
-------
HasPath
    Query a document with a JMESPath expression and match the result.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import jmespath

from ..core import (
    Description,
    DiagnosingMatcher,
    Matcher,
    describe_default_mismatch,
    describe_type_mismatch,
    discards,
)
from .basic import IsNull
from .logical import IsNot


def _tuples_to_lists(obj: Any) -> Any:
    """Recursively convert tuples → lists (JMESPath does not see tuples)."""
    if isinstance(obj, (tuple, list)):
        return [_tuples_to_lists(x) for x in obj]
    if isinstance(obj, Mapping):
        return {k: _tuples_to_lists(v) for k, v in obj.items()}
    return obj


class HasPath(DiagnosingMatcher):
    """``a document with path "<expr>" <desc>``.

    ::

        HasPath("user.name", equal_to("Alice")).matches({"user": {"name": "Alice"}})   # True
        HasPath("items[?price > `10`].id", contains_exactly(2))

    Without a *matcher* the path only has to resolve to something other than
    ``None`` (JMESPath yields ``None`` for missing keys).  The expression is
    compiled at construction, so a syntax error raises
    ``jmespath.exceptions.ParseError`` immediately.

    Args:
        expression: JMESPath expression.
        matcher:    Applied to the query result.  ``None`` → ``not null``.
        options:    ``jmespath.Options`` for custom functions / dict classes.
    """

    def __init__(
            self,
            expression: str,
            matcher: Optional[Matcher] = None,
            *,
            options: jmespath.Options | None = None,
    ) -> None:
        if not expression:
            raise ValueError("HasPath needs a JMESPath expression")
        if matcher is not None and not isinstance(matcher, Matcher):
            raise TypeError(f"HasPath needs a Matcher, got {matcher!r}")
        self._expression = expression
        self._compiled = jmespath.compile(expression)
        self._matcher = matcher if matcher is not None else IsNot(IsNull())
        self._options = options

    def _search(self, document: Any) -> Any:
        return self._compiled.search(_tuples_to_lists(document), options=self._options)

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        if item is None:
            describe_default_mismatch(item, mismatch_description)
            return False
        if not isinstance(item, (Mapping, list, tuple)):
            describe_type_mismatch(item, mismatch_description)
            return False

        result = self._search(item)
        if not self._matcher.matches(result):
            if discards(mismatch_description):
                return False
            mismatch_description.append_text("path ").append_value(self._expression).append_text(" ")
            self._matcher.describe_mismatch(result, mismatch_description)
            return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("a document with path ") \
            .append_value(self._expression) \
            .append_text(" ") \
            .append_description_of(self._matcher)
