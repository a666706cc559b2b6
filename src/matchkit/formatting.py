"""Value-formatting rules used by ``Description.append_value``.

This module holds the tables and small pure functions that turn an arbitrary
Python value into the text that appears in a failure message.  Descriptions
apply them in this order::

    None                     → null
    str                      → "quoted", with \\" \\n \\r \\t \\\\ escaped
    ctypes.c_char / c_wchar  → "quoted" single character
    fixed-width wrappers     → <5b> <5s> <5L> <5.0F> <0.1F>
    list / tuple / array     → [<1>, <2>]   (each item formatted recursively)
    anything else            → <str(value)>, or <module.Type@id> if str() raises

Exports
-------
NUMERIC_TYPE_TAGS
    Mapping of ctypes wrapper classes to their one-letter tag.

escape_text
    Escape a string the way it appears inside double quotes.

numeric_tag
    Tag for a fixed-width wrapper value, or ``None``.

is_boxed
    Whether a value is a ctypes scalar standing in for a boxed value.

boxed_number_text
    Text of a fixed-width wrapper value; single-precision floats use the
    shortest decimal that round-trips.

is_array_shaped
    Whether a value is rendered as a bracketed item list.

safe_str
    ``str(value)`` that never raises.
"""

from __future__ import annotations

import array
import ctypes
import logging
from typing import Any

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Built-in tables
# ─────────────────────────────────────────────────────────────────────────────

#: Python has no boxed byte/short/long/float, so the ctypes scalars stand in
#: for them.  ``c_int64`` is an alias of ``c_long`` or ``c_longlong``
#: depending on the platform.
NUMERIC_TYPE_TAGS: dict[type, str] = {
    ctypes.c_byte: "b",
    ctypes.c_short: "s",
    ctypes.c_int64: "L",
    ctypes.c_float: "F",
}

CHARACTER_TYPES: tuple[type, ...] = (ctypes.c_char, ctypes.c_wchar)

BOXED_TYPES: tuple[type, ...] = (*NUMERIC_TYPE_TAGS, *CHARACTER_TYPES)

ARRAY_TYPES: tuple[type, ...] = (list, tuple, array.array)

_ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\\": "\\\\",
}


# ─────────────────────────────────────────────────────────────────────────────
# Rules
# ─────────────────────────────────────────────────────────────────────────────


def escape_text(text: str) -> str:
    """Escape quote, newline, carriage return, tab and backslash.

    Every other character, non-ASCII included, passes through unchanged.
    """
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def character_of(value: Any) -> str:
    """The single character held by a ``c_char`` / ``c_wchar``."""
    raw = value.value
    if isinstance(raw, bytes):
        return raw.decode("latin-1")
    return raw


def numeric_tag(value: Any) -> str | None:
    for wrapper, tag in NUMERIC_TYPE_TAGS.items():
        if isinstance(value, wrapper):
            return tag
    return None


def is_boxed(value: Any) -> bool:
    """Whether *value* is one of the ctypes scalars standing in for a boxed value."""
    return isinstance(value, BOXED_TYPES)


def float32_text(value: float) -> str:
    """Shortest decimal text that reads back as the same single-precision float.

    ``c_float(0.1).value`` is ``0.10000000149011612``; this gives ``0.1``.
    """
    for digits in range(1, 10):
        text = repr(float(f"{value:.{digits}g}"))
        if ctypes.c_float(float(text)).value == value:
            return text
    return repr(value)


def boxed_number_text(value: Any) -> str:
    if isinstance(value, ctypes.c_float):
        return float32_text(value.value)
    return safe_str(value.value)


def is_array_shaped(value: Any) -> bool:
    return isinstance(value, ARRAY_TYPES)


def safe_str(value: Any) -> str:
    """``str(value)``, falling back to ``module.Type@<id>`` if that raises."""
    try:
        return str(value)
    except Exception:
        cls = type(value)
        fallback = f"{cls.__module__}.{cls.__qualname__}@{id(value):x}"
        logger.debug("str() failed for %s; rendering as %s", cls.__qualname__, fallback, exc_info=True)
        return fallback
