"""Named where-clause templates for common searches.

Templates may contain ``${name}`` placeholders. The date placeholders
``todayDate``, ``tomorrowDate`` and ``weekStartDate`` are filled in from
the reference day unless the caller supplies them.
"""

from __future__ import annotations

import logging
import re
from datetime import date, timedelta
from typing import Mapping

from tpbridge.lib.common.errors import InvalidPresetError

logger = logging.getLogger(__name__)

PRESET_REFERENCE_PREFIX = "searchPresets."

SEARCH_PRESETS: dict[str, str] = {
    # Status
    "open": 'EntityState.Name eq "Open"',
    "inProgress": 'EntityState.Name eq "In Progress"',
    "done": 'EntityState.Name eq "Done"',
    "notDone": 'EntityState.Name ne "Done"',
    "notClosed": 'EntityState.Name ne "Closed"',
    # Assignment
    "myTasks": 'AssignedUser.Email eq "${currentUser}"',
    "unassigned": "AssignedUser is null",
    # Project
    "projectItems": "Project.Id eq ${projectId}",
    # Priority
    "highPriority": 'Priority.Name eq "High"',
    # Time
    "createdToday": "CreateDate gte ${todayDate} and CreateDate lt ${tomorrowDate}",
    "modifiedToday": "ModifyDate gte ${todayDate} and ModifyDate lt ${tomorrowDate}",
    "createdThisWeek": "CreateDate gte ${weekStartDate}",
    "modifiedThisWeek": "ModifyDate gte ${weekStartDate}",
    # Combined
    "myOpenTasks": 'AssignedUser.Email eq "${currentUser}" and EntityState.Name eq "Open"',
    "highPriorityUnassigned": 'Priority.Name eq "High" and AssignedUser is null',
    "myRecentTasks": 'AssignedUser.Email eq "${currentUser}" and ModifyDate gt @Today',
    # Active work
    "activeItems": 'EntityState.Name ne "Done" and EntityState.Name ne "Closed"',
}

_PLACEHOLDER_RE = re.compile(r"\$\{(\w+)\}")
_UNSAFE_VARIABLE_RE = re.compile(r"[\s\"\\]")


def date_variables(today: date | None = None) -> dict[str, str]:
    """ISO dates for today, tomorrow and the Monday of the current week."""
    today = today or date.today()
    return {
        "todayDate": today.isoformat(),
        "tomorrowDate": (today + timedelta(days=1)).isoformat(),
        "weekStartDate": (today - timedelta(days=today.weekday())).isoformat(),
    }


def apply_preset(
    name: str,
    variables: Mapping[str, str | int] | None = None,
    today: date | None = None,
) -> str:
    """Expand a preset into where-clause text.

    Args:
        name: Preset key, e.g. ``myTasks``.
        variables: Placeholder values; these override the date defaults.
        today: Reference day for the date placeholders.

    Returns:
        str: The template with every placeholder substituted.

    Raises:
        InvalidPresetError: If the preset is unknown or a placeholder has no value.
    """
    if name not in SEARCH_PRESETS:
        raise InvalidPresetError(
            name,
            f"Unknown search preset: {name}. Available presets: {', '.join(SEARCH_PRESETS)}",
        )

    template = SEARCH_PRESETS[name]
    values: dict[str, str] = date_variables(today)
    values.update({k: str(v) for k, v in (variables or {}).items()})

    used = set(_PLACEHOLDER_RE.findall(template))
    missing = sorted(used - set(values))
    if missing:
        raise InvalidPresetError(
            name,
            f"Search preset {name} requires variables: {', '.join(missing)}",
        )

    # A substituted value must stay a single token inside its literal.
    for key in sorted(used):
        if _UNSAFE_VARIABLE_RE.search(values[key]):
            raise InvalidPresetError(
                name,
                f"Search preset variable {key} may not contain whitespace, quotes or backslashes",
            )

    text = _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], template)
    logger.debug(f"Expanded preset {name} to {text!r}")
    return text


def resolve_where(
    where: str | None,
    variables: Mapping[str, str | int] | None = None,
    today: date | None = None,
) -> str | None:
    """Expand a ``searchPresets.<name>`` reference; other text passes through."""
    if where and where.strip().startswith(PRESET_REFERENCE_PREFIX):
        name = where.strip()[len(PRESET_REFERENCE_PREFIX):]
        return apply_preset(name, variables, today)
    return where
