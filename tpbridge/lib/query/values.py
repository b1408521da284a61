"""Typed literal values and their rendering in the remote query language."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Tuple, Union

_EDGE_QUOTES_RE = re.compile(r"^['\"]|['\"]\Z")


@dataclass(frozen=True)
class NullValue:
    pass


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class DateValue:
    value: date


@dataclass(frozen=True)
class ArrayValue:
    items: Tuple["Value", ...]


@dataclass(frozen=True)
class TextValue:
    value: str


Value = Union[NullValue, BoolValue, DateValue, ArrayValue, TextValue]
VALUE_TYPES = (NullValue, BoolValue, DateValue, ArrayValue, TextValue)


def classify_value(raw: Any) -> Value:
    """Classify an untyped input into exactly one ``Value`` variant.

    ``None``, booleans, dates/datetimes and lists/tuples map to their own
    variants; anything else (numbers included) falls back to ``TextValue``
    via ``str()``. Values that are already classified pass through.
    """
    if isinstance(raw, VALUE_TYPES):
        return raw
    if raw is None:
        return NullValue()
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, datetime):
        # Aware datetimes are reduced to their UTC calendar day
        if raw.tzinfo is not None:
            raw = raw.astimezone(timezone.utc)
        return DateValue(raw.date())
    if isinstance(raw, date):
        return DateValue(raw)
    if isinstance(raw, (list, tuple)):
        return ArrayValue(tuple(classify_value(item) for item in raw))
    return TextValue(str(raw))


def quote_text(raw: str) -> str:
    """Render a string literal: strip edge quotes, double single quotes, wrap.

    A value the caller already wrapped in single quotes is treated as a
    literal in the query language's own escaping, so its doubled quotes
    are collapsed before re-escaping.
    """
    caller_quoted = len(raw) >= 2 and raw[0] == raw[-1] == "'"
    unquoted = _EDGE_QUOTES_RE.sub("", raw)
    if caller_quoted:
        unquoted = unquoted.replace("''", "'")
    escaped = unquoted.replace("'", "''")
    return f"'{escaped}'"


def format_value(value: Value) -> str:
    """Render a classified value as a literal.

    Args:
        value: One of the ``Value`` variants.

    Returns:
        str: ``null``, ``true``/``false``, ``'YYYY-MM-DD'``, ``[a,b]`` or a
        single-quoted, escaped string.

    Raises:
        TypeError: If ``value`` is not a ``Value`` variant.
    """
    if isinstance(value, NullValue):
        return "null"
    if isinstance(value, BoolValue):
        return "true" if value.value else "false"
    if isinstance(value, DateValue):
        day = value.value.date() if isinstance(value.value, datetime) else value.value
        return f"'{day.isoformat()}'"
    if isinstance(value, ArrayValue):
        return "[" + ",".join(format_value(item) for item in value.items) + "]"
    if isinstance(value, TextValue):
        return quote_text(value.value)
    raise TypeError(f"Unclassified value {value!r}; use classify_value() first")


def format_raw(raw: Any) -> str:
    """Classify then format an untyped value."""
    return format_value(classify_value(raw))
