"""Property inspection: compare objects through their named readable properties.

The matchers here never touch raw reflection directly.  They go through
``readable_properties``, which answers "which named fields can be read on
this object?"::

    class declares __matcher_properties__   → that sequence, verbatim
    dataclass instance                      → dataclass field names
    namedtuple                              → _fields
    anything else                           → public instance attributes,
                                              then public ``property`` objects
                                              of the class (MRO order)

A getter that raises while being read is a usage error, not a difference in
values, so it surfaces as ``PropertyAccessError`` instead of a mismatch.

Exports
-------
readable_properties
    The property-enumeration capability.

read_property
    Read one property, wrapping failures in ``PropertyAccessError``.

PropertyAccessError
    Raised when a property cannot be read.

SamePropertyValuesAs
    Every tracked property equals the one on an example object.

HasProperty
    The object has a named property, optionally matching a sub-matcher.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence

from ..core import Description, DiagnosingMatcher, Matcher, describe_default_mismatch, discards
from .basic import IsEqual

logger = logging.getLogger(__name__)


class PropertyAccessError(ValueError):
    """A property getter raised while a matcher was reading it."""


# ─────────────────────────────────────────────────────────────────────────────
# Property enumeration
# ─────────────────────────────────────────────────────────────────────────────


def _public(name: str) -> bool:
    return not name.startswith("_")


def readable_properties(obj: Any) -> List[str]:
    """Return the ordered names of the readable properties of *obj*."""
    cls = type(obj)
    declared = getattr(cls, "__matcher_properties__", None)
    if declared is not None:
        return list(declared)

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [f.name for f in dataclasses.fields(obj)]

    if isinstance(obj, tuple) and hasattr(cls, "_fields"):
        return list(cls._fields)

    names: List[str] = [n for n in getattr(obj, "__dict__", {}) if _public(n)]
    for klass in cls.__mro__:
        for name in getattr(klass, "__slots__", ()):
            if isinstance(name, str) and _public(name) and name not in names:
                names.append(name)
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and _public(name) and name not in names:
                names.append(name)
    return names


def read_property(obj: Any, name: str) -> Any:
    try:
        return getattr(obj, name)
    except Exception as exc:
        raise PropertyAccessError(
            f"Could not read property {name!r} on {type(obj).__name__} instance"
        ) from exc


# ─────────────────────────────────────────────────────────────────────────────
# SamePropertyValuesAs
# ─────────────────────────────────────────────────────────────────────────────


class _PropertyMatcher(DiagnosingMatcher):
    """One tracked property: ``<name>: <expected value>``."""

    def __init__(self, name: str, expected_value: Any) -> None:
        self._name = name
        self._matcher = IsEqual(expected_value)

    @property
    def name(self) -> str:
        return self._name

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        actual_value = read_property(item, self._name)
        if not self._matcher.matches(actual_value):
            if discards(mismatch_description):
                return False
            mismatch_description.append_text(f"{self._name} ")
            self._matcher.describe_mismatch(actual_value, mismatch_description)
            return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text(f"{self._name}: ").append_description_of(self._matcher)


def _bracketed(names: Iterable[str]) -> str:
    return "[" + ", ".join(names) + "]"


class SamePropertyValuesAs(DiagnosingMatcher):
    """Match objects whose properties equal those of *expected*.

    The tracked property names and their expected values are snapshotted at
    construction; later changes to *expected* are not seen.

    ::

        SamePropertyValuesAs(Person("Bob", 30)).matches(Person("Bob", 31))
        # False, mismatch "age was <31>"

        SamePropertyValuesAs(Person("Bob", 30), ["age"]).matches(Person("Bob", 31))
        # True

    Checks, in order (the first failure is reported):

    * ``None``            → ``was null``
    * incompatible type   → ``is incompatible type: Other``
    * extra properties    → ``has extra properties called [nickname]``
    * missing properties  → ``is missing properties called [age]``
    * differing value     → ``age was <31>``
    """

    def __init__(self, expected: Any, ignored_properties: Sequence[str] = ()) -> None:
        if expected is None:
            raise ValueError("SamePropertyValuesAs needs a non-None example object")
        if isinstance(expected, Mapping):
            raise ValueError(
                f"SamePropertyValuesAs compares object properties, not mapping keys; "
                f"got a {type(expected).__name__}"
            )
        if isinstance(ignored_properties, str):
            ignored_properties = [ignored_properties]
        self._expected_type = type(expected)
        self._ignored = list(ignored_properties)
        available = readable_properties(expected)
        if not available:
            raise ValueError(
                f"{type(expected).__name__} instance has no readable properties to compare"
            )
        self._property_names = [name for name in available if name not in self._ignored]
        self._property_matchers = [
            _PropertyMatcher(name, read_property(expected, name)) for name in self._property_names
        ]
        logger.debug(
            "tracking properties %s of %s (ignoring %s)",
            self._property_names, self._expected_type.__name__, self._ignored,
        )

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        return (
            self._is_not_none(item, mismatch_description)
            and self._is_compatible_type(item, mismatch_description)
            and self._has_same_property_names(item, mismatch_description)
            and self._has_matching_values(item, mismatch_description)
        )

    def describe_to(self, description: Description) -> None:
        description.append_text(f"same property values as {self._expected_type.__name__}") \
            .append_list(" [", ", ", "]", self._property_matchers)
        if self._ignored:
            description.append_text(" ignoring ").append_value_list("[", ", ", "]", self._ignored)

    # -- checks ---------------------------------------------------------------

    @staticmethod
    def _is_not_none(item: Any, mismatch_description: Description) -> bool:
        if item is None:
            describe_default_mismatch(item, mismatch_description)
            return False
        return True

    def _is_compatible_type(self, item: Any, mismatch_description: Description) -> bool:
        if isinstance(item, self._expected_type):
            return True
        mismatch_description.append_text(f"is incompatible type: {type(item).__name__}")
        return False

    def _has_same_property_names(self, item: Any, mismatch_description: Description) -> bool:
        actual_names = [n for n in readable_properties(item) if n not in self._ignored]
        extra = [n for n in actual_names if n not in self._property_names]
        if extra:
            mismatch_description.append_text(f"has extra properties called {_bracketed(extra)}")
            return False
        missing = [n for n in self._property_names if n not in actual_names]
        if missing:
            mismatch_description.append_text(f"is missing properties called {_bracketed(missing)}")
            return False
        return True

    def _has_matching_values(self, item: Any, mismatch_description: Description) -> bool:
        for property_matcher in self._property_matchers:
            if not property_matcher.matches(item):
                if not discards(mismatch_description):
                    property_matcher.describe_mismatch(item, mismatch_description)
                return False
        return True


# ─────────────────────────────────────────────────────────────────────────────
# HasProperty
# ─────────────────────────────────────────────────────────────────────────────


class HasProperty(DiagnosingMatcher):
    """``hasProperty("name")`` or ``hasProperty("name", <desc>)``."""

    def __init__(self, name: str, value_matcher: Optional[Matcher] = None) -> None:
        if not name:
            raise ValueError("HasProperty needs a property name")
        if value_matcher is not None and not isinstance(value_matcher, Matcher):
            raise TypeError(f"HasProperty needs a Matcher, got {value_matcher!r}")
        self._name = name
        self._value_matcher = value_matcher

    def _matches(self, item: Any, mismatch_description: Description) -> bool:
        if item is None or self._name not in readable_properties(item):
            mismatch_description.append_text(f'no "{self._name}" in ').append_value(item)
            return False
        if self._value_matcher is None:
            return True
        value = read_property(item, self._name)
        if not self._value_matcher.matches(value):
            if discards(mismatch_description):
                return False
            mismatch_description.append_text(f"property '{self._name}' ")
            self._value_matcher.describe_mismatch(value, mismatch_description)
            return False
        return True

    def describe_to(self, description: Description) -> None:
        description.append_text("hasProperty(").append_value(self._name)
        if self._value_matcher is not None:
            description.append_text(", ").append_description_of(self._value_matcher)
        description.append_text(")")
