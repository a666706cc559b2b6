"""Core abstractions: the description sink, the matcher contract, and the
skeletons concrete matchers build on.

This module owns every *interface* in the system.  Concrete descriptions live
in ``descriptions``; concrete matchers live in the ``matchers`` sub-package.

Rendering flow (``assert_that`` entry point)::

    matcher.matches(actual)            ← pure predicate, no output
      │  False
      ▼
    StringDescription()
      ├── append_description_of(matcher)      → matcher.describe_to(d)
      └── matcher.describe_mismatch(actual, d)
                │
                └── nested matchers append into the *same* description

A ``Description`` is owned by the call that created it and is threaded down
through nested ``describe_to`` / ``describe_mismatch`` calls.  Matchers never
keep a reference to one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional


# ─────────────────────────────────────────────────────────────────────────────
# SelfDescribing / Description
# ─────────────────────────────────────────────────────────────────────────────


class SelfDescribing(ABC):
    """Anything that can render itself into a ``Description``."""

    @abstractmethod
    def describe_to(self, description: 'Description') -> None:
        """Append a human-readable description of *self* to *description*."""


class Description(ABC):
    """Append-only text sink used by matchers to describe themselves.

    Every ``append_*`` method returns the description itself so calls chain::

        description.append_text("was ").append_value(item)

    Default implementation: ``descriptions.StringDescription``.  The
    discarding variant is ``descriptions.NullDescription``.
    """

    @abstractmethod
    def append_text(self, text: str) -> 'Description':
        """Append *text* verbatim."""

    @abstractmethod
    def append_description_of(self, value: SelfDescribing) -> 'Description':
        """Let *value* describe itself into this description."""

    @abstractmethod
    def append_value(self, value: Any) -> 'Description':
        """Append *value* using the value-formatting rules (quoting, tags, …)."""

    @abstractmethod
    def append_value_list(self, start: str, separator: str, end: str,
                          values: Iterable[Any]) -> 'Description':
        """Append every item of *values* through ``append_value``."""

    @abstractmethod
    def append_list(self, start: str, separator: str, end: str,
                    values: Iterable[SelfDescribing]) -> 'Description':
        """Append every item of *values* through ``append_description_of``."""


# ─────────────────────────────────────────────────────────────────────────────
# Shared helpers
# ─────────────────────────────────────────────────────────────────────────────


def describe_default_mismatch(item: Any, description: Description) -> None:
    """The fallback mismatch text: ``was <item>``."""
    description.append_text("was ").append_value(item)


def describe_type_mismatch(item: Any, description: Description) -> None:
    """Mismatch text for a value of the wrong runtime type."""
    description.append_text("was a ") \
        .append_text(qualified_name(type(item))) \
        .append_text(" (") \
        .append_value(item) \
        .append_text(")")


def qualified_name(cls: type) -> str:
    """``module.QualName`` for user classes, bare name for builtins."""
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", cls.__name__)
    if module in (None, "builtins"):
        return name
    return f"{module}.{name}"


def _render(value: SelfDescribing) -> str:
    # Imported lazily: descriptions depends on this module.
    from .descriptions import StringDescription
    return StringDescription.to_string(value)


def _null_description() -> Description:
    from .descriptions import NONE
    return NONE


def discards(description: Description) -> bool:
    """Whether *description* drops everything appended to it.

    Diagnosing matchers check this before asking a failed sub-matcher to
    explain itself, so a plain ``matches`` call evaluates each sub-matcher
    once per value.
    """
    from .descriptions import NullDescription
    return isinstance(description, NullDescription)


# ─────────────────────────────────────────────────────────────────────────────
# Matcher
# ─────────────────────────────────────────────────────────────────────────────


class Matcher(SelfDescribing):
    """A predicate that can explain itself.

    Subclasses implement ``matches`` and ``describe_to``.  ``describe_mismatch``
    defaults to ``was <item>``; override it for a richer diagnosis, but it must
    never disagree with ``matches``.

    Matchers are immutable after construction and hold no per-evaluation
    state, so one instance may be evaluated from several threads at once.

    Examples::

        equal_to(3).matches(3)     → True
        str(equal_to(3))           → "<3>"
    """

    @abstractmethod
    def matches(self, item: Any) -> bool:
        """Return ``True`` iff *item* satisfies this matcher.  Must accept ``None``."""

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        """Explain why *item* did not match."""
        describe_default_mismatch(item, mismatch_description)

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


# ─────────────────────────────────────────────────────────────────────────────
# DiagnosingMatcher: decide and explain in one pass
# ─────────────────────────────────────────────────────────────────────────────


class DiagnosingMatcher(Matcher):
    """Matcher whose decision and explanation are computed together.

    Implement ``_matches(item, mismatch_description)``: return the decision
    and, when returning ``False``, append the reason.  The public methods
    route through it::

        matches(item)                 → _matches(item, NONE)
        describe_mismatch(item, d)    → _matches(item, d)   (result ignored)

    ``_matches`` must be pure: two calls with the same *item* return the same
    result and append the same text.
    """

    @abstractmethod
    def _matches(self, item: Any, mismatch_description: Description) -> bool: ...

    def matches(self, item: Any) -> bool:
        return self._matches(item, _null_description())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self._matches(item, mismatch_description)


# ─────────────────────────────────────────────────────────────────────────────
# Type-safe skeletons: null / type guard before delegating
# ─────────────────────────────────────────────────────────────────────────────


def _check_expected_type(expected_type: Any) -> type | tuple[type, ...]:
    if isinstance(expected_type, type):
        return expected_type
    if isinstance(expected_type, tuple) and expected_type \
            and all(isinstance(t, type) for t in expected_type):
        return expected_type
    raise TypeError(f"expected_type must be a class or tuple of classes, got {expected_type!r}")


class TypeSafeMatcher(Matcher):
    """Matcher for a non-``None`` value of a specific type.

    The expected type is declared, never discovered: set the ``expected_type``
    class attribute, or pass ``expected_type=`` when the implementing class
    does not fix it.  Anything accepted by ``isinstance`` works, including a
    tuple of classes or an ABC such as ``numbers.Real``.

    * ``matches(None)`` and wrong-type values are plain mismatches.
    * ``describe_mismatch(None, d)``  → ``was null``
    * wrong type                      → ``was a <type> (<value>)``
    * otherwise                       → ``describe_mismatch_safely``

    Subclasses implement ``matches_safely`` and may override
    ``describe_mismatch_safely``; they must not override ``matches`` or
    ``describe_mismatch``.
    """

    expected_type: type | tuple[type, ...] = object

    def __init__(self, expected_type: Optional[type | tuple[type, ...]] = None) -> None:
        self._expected_type = _check_expected_type(
            expected_type if expected_type is not None else type(self).expected_type
        )

    def _accepts(self, item: Any) -> bool:
        return item is not None and isinstance(item, self._expected_type)

    @abstractmethod
    def matches_safely(self, item: Any) -> bool:
        """Decide on an *item* already known to be non-``None`` and well typed."""

    def describe_mismatch_safely(self, item: Any, mismatch_description: Description) -> None:
        describe_default_mismatch(item, mismatch_description)

    def matches(self, item: Any) -> bool:
        return self._accepts(item) and self.matches_safely(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is None:
            describe_default_mismatch(item, mismatch_description)
        elif not isinstance(item, self._expected_type):
            describe_type_mismatch(item, mismatch_description)
        else:
            self.describe_mismatch_safely(item, mismatch_description)


class TypeSafeDiagnosingMatcher(Matcher):
    """``TypeSafeMatcher`` and ``DiagnosingMatcher`` combined.

    Subclasses implement ``matches_safely(item, mismatch_description)``.
    ``None`` renders ``was null``; a wrong type renders ``was a <type> (<value>)``.
    """

    expected_type: type | tuple[type, ...] = object

    def __init__(self, expected_type: Optional[type | tuple[type, ...]] = None) -> None:
        self._expected_type = _check_expected_type(
            expected_type if expected_type is not None else type(self).expected_type
        )

    @abstractmethod
    def matches_safely(self, item: Any, mismatch_description: Description) -> bool: ...

    def matches(self, item: Any) -> bool:
        return (
            item is not None
            and isinstance(item, self._expected_type)
            and self.matches_safely(item, _null_description())
        )

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if item is None:
            describe_default_mismatch(item, mismatch_description)
        elif not isinstance(item, self._expected_type):
            describe_type_mismatch(item, mismatch_description)
        else:
            self.matches_safely(item, mismatch_description)


# ─────────────────────────────────────────────────────────────────────────────
# CustomMatcher: one-off matchers with a fixed description
# ─────────────────────────────────────────────────────────────────────────────


class CustomMatcher(Matcher):
    """Matcher with a fixed textual description.

    Either pass a *predicate* or subclass and override ``matches``::

        CustomMatcher("a non empty string", lambda s: isinstance(s, str) and s != "")
    """

    def __init__(self, description: str, predicate: Optional[Callable[[Any], bool]] = None) -> None:
        if description is None:
            raise ValueError("Description should be non null!")
        self._fixed_description = description
        self._predicate = predicate

    def matches(self, item: Any) -> bool:
        if self._predicate is None:
            raise NotImplementedError(
                f"{type(self).__name__} needs a predicate or an overridden matches()"
            )
        return bool(self._predicate(item))

    def describe_to(self, description: Description) -> None:
        description.append_text(self._fixed_description)
