"""Enum definitions shared by the query compiler and its configuration."""
from __future__ import annotations
from enum import Enum
import re


class Operator(str, Enum):
    EQ = 'eq'
    NE = 'ne'
    GT = 'gt'
    GTE = 'gte'
    LT = 'lt'
    LTE = 'lte'
    IN = 'in'
    CONTAINS = 'contains'
    NOT_CONTAINS = 'not contains'
    IS_NULL = 'is null'
    IS_NOT_NULL = 'is not null'

    @property
    def is_null_check(self) -> bool:
        return self in (Operator.IS_NULL, Operator.IS_NOT_NULL)

    @property
    def token_regex(self) -> str:
        """Regex source for the token; inner spaces match any whitespace run."""
        return r'\s+'.join(map(re.escape, self.value.split()))


class AuthScheme(str, Enum):
    BASIC = 'basic'
    API_KEY = 'apikey'


# Binary operators in match order: longest token first, so that
# "not contains" wins over "contains" and "gte" over "gt".
COMPARISON_OPERATORS = tuple(
    sorted(
        (op for op in Operator if not op.is_null_check),
        key=lambda op: len(op.value),
        reverse=True,
    )
)

OPERATORS = tuple(e.value for e in Operator)
AUTH_SCHEMES = tuple(e.value for e in AuthScheme)

AUTH_SCHEME_ALIAS_MAP = {
    "api_key": "apikey",
    "api-key": "apikey",
    "key": "apikey",
    "token": "apikey",
    "access_token": "apikey",
    "password": "basic",
    "userpass": "basic",
}


def normalize_auth_scheme(value: str | None) -> str | None:
    """Map an auth scheme name or alias to its canonical value (None if blank)."""
    if value is None:
        return None
    v = value.strip().lower()
    if not v:
        return None
    return AUTH_SCHEME_ALIAS_MAP.get(v, v)
