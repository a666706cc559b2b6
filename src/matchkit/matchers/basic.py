"""Leaf matchers on plain values: equality, identity, type, ``None``.

Exports
-------
IsEqual
    ``==`` against an expected value.  Renders as the expected value.

IsSame
    Identity (``is``) against an expected object.

IsAnything
    Unconditional match, the catch-all sentinel.

IsNull
    Matches only ``None``.

IsInstanceOf
    ``isinstance`` against a class (or tuple of classes).

Is
    Decorator that reads better in assertions: ``is <desc>``.

DescribedAs
    Wraps a matcher with a custom description template.
"""

from __future__ import annotations

import re
from typing import Any

from ..core import Description, Matcher, qualified_name
from ..formatting import is_boxed


def _require_matcher(matcher: Any, who: str) -> Matcher:
    if not isinstance(matcher, Matcher):
        raise TypeError(f"{who} needs a Matcher, got {matcher!r}")
    return matcher


class IsEqual(Matcher):
    """Match values equal to *expected*.

    ::

        IsEqual(3).matches(3)         # True
        IsEqual([1, 2]).matches([1, 2])  # True
        str(IsEqual("x"))             # '"x"'
        IsEqual(c_byte(5)).matches(c_byte(5))   # True, compared by held value
    """

    def __init__(self, expected: Any) -> None:
        self._expected = expected

    def matches(self, item: Any) -> bool:
        if self._expected is None:
            return item is None
        if item is None:
            return False
        if is_boxed(self._expected) and type(item) is type(self._expected):
            # ctypes scalars compare by identity; compare what they hold
            return self._expected.value == item.value
        return bool(self._expected == item)

    def describe_to(self, description: Description) -> None:
        description.append_value(self._expected)


class IsSame(Matcher):
    """Match the very same object (``is``)."""

    def __init__(self, obj: Any) -> None:
        self._object = obj

    def matches(self, item: Any) -> bool:
        return item is self._object

    def describe_to(self, description: Description) -> None:
        description.append_text("sameInstance(").append_value(self._object).append_text(")")


class IsAnything(Matcher):
    """Unconditional match.

    ::

        IsAnything().matches(anything)   # True
    """

    def __init__(self, message: str = "ANYTHING") -> None:
        self._message = message

    def matches(self, item: Any) -> bool:
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text(self._message)


class IsNull(Matcher):

    def matches(self, item: Any) -> bool:
        return item is None

    def describe_to(self, description: Description) -> None:
        description.append_text("null")


class IsInstanceOf(Matcher):
    """Match instances of *expected_class*.

    Mismatch text is ``null`` for ``None`` and ``<value> is a <type>``
    otherwise.
    """

    def __init__(self, expected_class: type | tuple[type, ...]) -> None:
        if isinstance(expected_class, tuple):
            if not expected_class or not all(isinstance(c, type) for c in expected_class):
                raise TypeError(f"IsInstanceOf needs classes, got {expected_class!r}")
        elif not isinstance(expected_class, type):
            raise TypeError(f"IsInstanceOf needs a class, got {expected_class!r}")
        self._expected_class = expected_class

    def matches(self, item: Any) -> bool:
        return item is not None and isinstance(item, self._expected_class)

    def describe_to(self, description: Description) -> None:
        description.append_text("an instance of ").append_text(self._class_names())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is None:
            mismatch_description.append_text("null")
            return
        mismatch_description.append_value(item) \
            .append_text(" is a ") \
            .append_text(qualified_name(type(item)))

    def _class_names(self) -> str:
        if isinstance(self._expected_class, tuple):
            return " or ".join(qualified_name(c) for c in self._expected_class)
        return qualified_name(self._expected_class)


class Is(Matcher):
    """Decorate another matcher for readability; behaviour is unchanged."""

    def __init__(self, matcher: Matcher) -> None:
        self._matcher = _require_matcher(matcher, "Is")

    def matches(self, item: Any) -> bool:
        return self._matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        description.append_text("is ").append_description_of(self._matcher)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self._matcher.describe_mismatch(item, mismatch_description)


_ARG_PATTERN = re.compile(r"%([0-9]+)")


class DescribedAs(Matcher):
    """Override the description of *matcher*.

    ``%0``, ``%1``, … in *template* are replaced by ``append_value(values[n])``.
    Matching and mismatch description delegate to the wrapped matcher.

    ::

        DescribedAs("a big number %0", greater_than(1000), 1000)
        # → 'a big number <1000>'
    """

    def __init__(self, template: str, matcher: Matcher, *values: Any) -> None:
        if template is None:
            raise ValueError("DescribedAs needs a description template")
        self._template = template
        self._matcher = _require_matcher(matcher, "DescribedAs")
        self._values = values

    def matches(self, item: Any) -> bool:
        return self._matcher.matches(item)

    def describe_to(self, description: Description) -> None:
        text_start = 0
        for m in _ARG_PATTERN.finditer(self._template):
            index = int(m.group(1))
            if index >= len(self._values):
                continue
            description.append_text(self._template[text_start:m.start()])
            description.append_value(self._values[index])
            text_start = m.end()
        if text_start < len(self._template):
            description.append_text(self._template[text_start:])

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self._matcher.describe_mismatch(item, mismatch_description)
