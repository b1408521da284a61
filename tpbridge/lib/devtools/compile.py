"""Compile query options from the command line into a query string."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Mapping

from tpbridge.lib.common.schemas import AuthDescriptor
from tpbridge.lib.query.builder import QueryBuilder
from tpbridge.lib.query.presets import SEARCH_PRESETS

logger = logging.getLogger(__name__)


def run_compile(
    auth: AuthDescriptor,
    where: str | None = None,
    preset: str | None = None,
    variables: Mapping[str, Any] | None = None,
    include: Iterable[str] | None = None,
    take: int | None = None,
    order_by: Iterable[str] | None = None,
    fmt: str | None = None,
    today: date | None = None,
) -> str:
    """Build a query string; ``preset`` wins over ``where`` when both are set."""
    builder = QueryBuilder(auth)
    if preset:
        builder.preset(preset, variables, today)
    else:
        builder.where(where)
    builder.include(include).take(take).order_by(order_by)
    if fmt:
        builder.format(fmt)
    query = builder.build_query_string()
    logger.info(f"Compiled query with {len(builder.build_params())} parameter(s)")
    return query


def list_presets() -> list[tuple[str, str]]:
    """Preset names and templates, in definition order."""
    return list(SEARCH_PRESETS.items())
