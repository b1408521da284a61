"""Field reference normalisation."""

import re

CUSTOM_FIELD_PREFIX = "CustomField."
CUSTOM_FIELD_ALIAS = "cf_"

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_field(field: str) -> str:
    """Normalise a field reference.

    All whitespace is removed, then ``CustomField.<name>`` is rewritten to
    ``cf_<name>``. Dotted paths pass through. Idempotent.
    """
    compact = _WHITESPACE_RE.sub("", field)
    if compact.startswith(CUSTOM_FIELD_PREFIX):
        return CUSTOM_FIELD_ALIAS + compact[len(CUSTOM_FIELD_PREFIX):]
    return compact
