"""Query compiler for the remote project-tracking service."""

from tpbridge.lib.query.builder import QueryBuilder, QueryOptions
from tpbridge.lib.query.conditions import Condition, compile_where, parse_condition, parse_where
from tpbridge.lib.query.fields import sanitize_field
from tpbridge.lib.query.includes import validate_include
from tpbridge.lib.query.order_by import sanitize_order_by
from tpbridge.lib.query.presets import SEARCH_PRESETS, apply_preset, resolve_where
from tpbridge.lib.query.splitter import split_conditions
from tpbridge.lib.query.values import (
    ArrayValue,
    BoolValue,
    DateValue,
    NullValue,
    TextValue,
    Value,
    classify_value,
    format_raw,
    format_value,
)

__all__ = [
    'QueryBuilder',
    'QueryOptions',
    'Condition',
    'compile_where',
    'parse_condition',
    'parse_where',
    'sanitize_field',
    'validate_include',
    'sanitize_order_by',
    'SEARCH_PRESETS',
    'apply_preset',
    'resolve_where',
    'split_conditions',
    'ArrayValue',
    'BoolValue',
    'DateValue',
    'NullValue',
    'TextValue',
    'Value',
    'classify_value',
    'format_raw',
    'format_value',
]
