"""Parsing and compilation of where-clause conditions."""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from tpbridge.lib.common.errors import EmptyWhereClauseError, InvalidConditionError
from tpbridge.lib.enums import COMPARISON_OPERATORS, Operator
from tpbridge.lib.query.fields import sanitize_field
from tpbridge.lib.query.splitter import split_conditions
from tpbridge.lib.query.values import TextValue, format_value

logger = logging.getLogger(__name__)

_IS_NULL_RE = re.compile(r"(?P<field>.+?)\s+is\s+null", re.IGNORECASE)
_IS_NOT_NULL_RE = re.compile(r"(?P<field>.+?)\s+is\s+not\s+null", re.IGNORECASE)
_FIELD_RE = re.compile(r"(?P<field>\S+)\s+(?P<rest>.+)")

# Tried in order; COMPARISON_OPERATORS is longest token first.
_OPERATOR_MATCHERS = tuple(
    (op, re.compile(rf"{op.token_regex}\s+(?P<value>.+)", re.IGNORECASE))
    for op in COMPARISON_OPERATORS
)


@dataclass
class Condition:
    """One parsed clause. ``value`` is an already formatted literal."""
    field: str
    operator: Operator
    value: Optional[str] = None

    def render(self) -> str:
        if self.operator.is_null_check:
            return f"{self.field} {self.operator.value}"
        return f"{self.field} {self.operator.value} {self.value}"


def _match_operator(rest: str):
    for op, matcher in _OPERATOR_MATCHERS:
        m = matcher.fullmatch(rest)
        if m:
            return op, m.group("value")
    return None


def parse_condition(clause: str) -> Condition:
    """Parse one clause into a ``Condition``.

    Null checks are tried first, then ``<field> <operator> <value>`` with
    the operator taken from the whitelist.

    Args:
        clause: A single trimmed clause.

    Returns:
        Condition: Sanitized field, operator and formatted value.

    Raises:
        InvalidConditionError: If the clause matches no grammar.
    """
    m = _IS_NULL_RE.fullmatch(clause)
    if m:
        return Condition(sanitize_field(m.group("field").strip()), Operator.IS_NULL)

    m = _IS_NOT_NULL_RE.fullmatch(clause)
    if m:
        return Condition(sanitize_field(m.group("field").strip()), Operator.IS_NOT_NULL)

    m = _FIELD_RE.fullmatch(clause)
    matched = _match_operator(m.group("rest")) if m else None
    if matched is None:
        logger.warning("Rejected where condition: %r", clause)
        raise InvalidConditionError(clause)

    op, raw_value = matched
    return Condition(
        field=sanitize_field(m.group("field")),
        operator=op,
        value=format_value(TextValue(raw_value.strip())),
    )


def parse_where(where: str) -> List[Condition]:
    """Split and parse a where expression into conditions.

    Raises:
        EmptyWhereClauseError: If ``where`` is empty or whitespace only.
        InvalidConditionError: On the first clause that fails to parse.
    """
    if not where or not where.strip():
        raise EmptyWhereClauseError()
    return [parse_condition(clause) for clause in split_conditions(where)]


def compile_where(where: str) -> str:
    """Compile a raw where expression into its canonical, escaped form."""
    return " and ".join(c.render() for c in parse_where(where))
