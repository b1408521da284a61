"""Validation of include paths."""

import logging
import re
from typing import Iterable, List

from tpbridge.lib.common.errors import InvalidIncludeError
from tpbridge.lib.query.fields import sanitize_field

logger = logging.getLogger(__name__)

# Letters and dots, optionally followed by one caller-written nested
# selection such as Project[Name,Program].
_INCLUDE_RE = re.compile(r"[A-Za-z.]+(?:\[[A-Za-z.,]+\])?")


def sanitize_includes(includes: Iterable[str]) -> List[str]:
    """Drop empty entries, trim and sanitize the rest, then check characters.

    Raises:
        InvalidIncludeError: Naming the first (sanitized) entry that fails.
    """
    entries = [sanitize_field(i.strip()) for i in includes if i and i.strip()]
    for entry in entries:
        if not _INCLUDE_RE.fullmatch(entry):
            logger.warning("Rejected include entry: %r", entry)
            raise InvalidIncludeError(entry)
    return entries


def render_includes(entries: Iterable[str]) -> str:
    return "[" + ",".join(entries) + "]"


def validate_include(includes: Iterable[str]) -> str:
    """Validate include paths and render them as ``[a,b,c]``."""
    return render_includes(sanitize_includes(includes))
