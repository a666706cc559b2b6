"""Concrete ``Description`` implementations.

Exports
-------
BaseDescription
    Implements every ``append_*`` rule on top of a single abstract
    ``_append(text)`` primitive.

StringDescription
    Accumulates into an in-memory buffer; ``str(d)`` returns the text.

NullDescription / NONE
    Discards everything.  Used where a caller needs the decision but not the
    message (``DiagnosingMatcher.matches``).

SelfDescribingValue
    Wraps a plain value so that value lists and matcher lists share the same
    ``append_list`` iteration.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Iterable, List

from .core import Description, SelfDescribing
from .formatting import (
    CHARACTER_TYPES,
    boxed_number_text,
    character_of,
    escape_text,
    is_array_shaped,
    numeric_tag,
    safe_str,
)


class SelfDescribingValue(SelfDescribing):
    """A value that describes itself via ``append_value``."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def describe_to(self, description: Description) -> None:
        description.append_value(self._value)


# ─────────────────────────────────────────────────────────────────────────────
# BaseDescription
# ─────────────────────────────────────────────────────────────────────────────


class BaseDescription(Description):
    """All formatting logic; subclasses decide where text goes."""

    @abstractmethod
    def _append(self, text: str) -> None:
        """Store *text*.  The only mutation a description ever performs."""

    def append_text(self, text: str) -> 'BaseDescription':
        self._append(text)
        return self

    def append_description_of(self, value: SelfDescribing) -> 'BaseDescription':
        value.describe_to(self)
        return self

    def append_value(self, value: Any) -> 'BaseDescription':
        if value is None:
            self._append("null")
        elif isinstance(value, str):
            self._append(f'"{escape_text(value)}"')
        elif isinstance(value, CHARACTER_TYPES):
            self._append(f'"{escape_text(character_of(value))}"')
        elif (tag := numeric_tag(value)) is not None:
            self._append(f"<{boxed_number_text(value)}{tag}>")
        elif is_array_shaped(value):
            self.append_value_list("[", ", ", "]", value)
        else:
            self._append(f"<{safe_str(value)}>")
        return self

    def append_value_list(self, start: str, separator: str, end: str,
                          values: Iterable[Any]) -> 'BaseDescription':
        return self.append_list(start, separator, end, (SelfDescribingValue(v) for v in values))

    def append_list(self, start: str, separator: str, end: str,
                    values: Iterable[SelfDescribing]) -> 'BaseDescription':
        separate = False
        self._append(start)
        for value in values:
            if separate:
                self._append(separator)
            self.append_description_of(value)
            separate = True
        self._append(end)
        return self


# ─────────────────────────────────────────────────────────────────────────────
# StringDescription
# ─────────────────────────────────────────────────────────────────────────────


class StringDescription(BaseDescription):
    """Description that accumulates text in memory.

    ::

        d = StringDescription()
        d.append_text("was ").append_value("x")
        str(d)   # → 'was "x"'
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def _append(self, text: str) -> None:
        self._parts.append(text)

    def __str__(self) -> str:
        return "".join(self._parts)

    @classmethod
    def to_string(cls, self_describing: SelfDescribing) -> str:
        """Render *self_describing* into a fresh description and return the text."""
        return str(cls().append_description_of(self_describing))

    # Alias kept for readers used to the ``asString`` spelling.
    as_string = to_string


# ─────────────────────────────────────────────────────────────────────────────
# NullDescription
# ─────────────────────────────────────────────────────────────────────────────


class NullDescription(Description):
    """Description that ignores every call.

    Nothing is formatted, so even values whose ``str()`` is expensive cost
    nothing here.
    """

    def append_text(self, text: str) -> 'NullDescription':
        return self

    def append_description_of(self, value: SelfDescribing) -> 'NullDescription':
        return self

    def append_value(self, value: Any) -> 'NullDescription':
        return self

    def append_value_list(self, start: str, separator: str, end: str,
                          values: Iterable[Any]) -> 'NullDescription':
        return self

    def append_list(self, start: str, separator: str, end: str,
                    values: Iterable[SelfDescribing]) -> 'NullDescription':
        return self

    def __str__(self) -> str:
        return ""


#: Shared discarding description.  Safe to share: it holds no state.
NONE = NullDescription()
