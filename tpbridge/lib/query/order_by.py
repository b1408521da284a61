"""Sort key normalisation.

The remote query language takes field order only, so direction keywords
and structured directions are dropped.
"""

import re
from typing import Any, Iterable, List, Mapping

from tpbridge.lib.common.errors import InvalidRequestError

_DIRECTION_SUFFIX_RE = re.compile(r"\s+(?:asc|desc)\Z", re.IGNORECASE)


def strip_direction(key: str) -> str:
    """Remove trailing ``asc``/``desc`` keywords (any case) and trim."""
    stripped = key.strip()
    while True:
        shorter = _DIRECTION_SUFFIX_RE.sub("", stripped)
        if shorter == stripped:
            return stripped
        stripped = shorter.strip()


def order_field(item: Any) -> str:
    """Return the bare field name of a sort key.

    Accepts a string, a mapping with a ``field`` key or an object with a
    ``field`` attribute (e.g. ``OrderByItem``).

    Raises:
        InvalidRequestError: For any other shape of sort key.
    """
    if isinstance(item, str):
        return strip_direction(item)
    if isinstance(item, Mapping):
        if "field" not in item:
            raise InvalidRequestError(f"Invalid orderBy entry: {item!r} has no field")
        return str(item["field"]).strip()
    if not hasattr(item, "field"):
        raise InvalidRequestError(f"Invalid orderBy entry: {item!r}")
    return str(item.field).strip()


def sanitize_order_by(items: Iterable[Any]) -> List[str]:
    """Bare field names in caller order; empty keys are dropped."""
    fields = (order_field(item) for item in items)
    return [f for f in fields if f]


def render_order_by(fields: Iterable[str]) -> str:
    return ",".join(fields)
