"""Chainable query builder producing the remote service's query parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from tpbridge.lib.common.schemas import AuthDescriptor
from tpbridge.lib.query.conditions import compile_where
from tpbridge.lib.query.includes import render_includes, sanitize_includes
from tpbridge.lib.query.order_by import render_order_by, sanitize_order_by
from tpbridge.lib.query.presets import apply_preset

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "json"


@dataclass
class QueryOptions:
    """Canonicalised options held by a ``QueryBuilder``."""
    where: Optional[str] = None
    include: List[str] = field(default_factory=list)
    take: Optional[int] = None
    order_by: List[str] = field(default_factory=list)
    format: str = DEFAULT_FORMAT


class QueryBuilder:
    """Build validated query parameters for the remote service.

    Every setter validates eagerly and stores the canonical form; a failing
    setter leaves the previous state untouched. An instance belongs to one
    request-building sequence at a time; use ``clone()`` to get an
    independent builder for another request.

    Usage:
        builder = QueryBuilder(AuthDescriptor(scheme=AuthScheme.API_KEY, token=token))
        builder.where("Priority eq High").include(["Project"]).take(25)

        params = builder.build_params()
        query = builder.build_query_string()
    """

    def __init__(self, auth: AuthDescriptor):
        """Initialize QueryBuilder.

        Args:
            auth: Authentication descriptor; kept across ``reset()`` and
                shared by ``clone()``.
        """
        self.auth = auth
        self.options = QueryOptions()

    def where(self, where_clause: Optional[str]) -> 'QueryBuilder':
        """Set the where clause.

        Args:
            where_clause: Expression such as ``Priority eq High and Name contains 'x'``.
                ``None``/``""`` is a no-op; whitespace only is rejected.

        Returns:
            Self for method chaining.

        Raises:
            EmptyWhereClauseError: If the clause is whitespace only.
            InvalidConditionError: If a clause can't be parsed.
        """
        if not where_clause:
            logger.debug("where: no clause given, keeping previous value")
            return self
        self.options.where = compile_where(where_clause)
        logger.debug(f"where: {self.options.where}")
        return self

    def preset(
        self,
        name: str,
        variables: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None,
    ) -> 'QueryBuilder':
        """Set the where clause from a named search preset."""
        return self.where(apply_preset(name, variables, today))

    def include(self, includes: Optional[Iterable[str]]) -> 'QueryBuilder':
        """Set include paths (related data to attach).

        Raises:
            InvalidIncludeError: If an entry contains anything but letters and dots.
        """
        if not includes:
            return self
        entries = sanitize_includes(includes)
        if entries:
            self.options.include = entries
            logger.debug(f"include: {entries}")
        return self

    def take(self, limit: Optional[int]) -> 'QueryBuilder':
        """Set the page size; only positive integers are kept."""
        if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
            self.options.take = limit
        else:
            logger.debug(f"take: ignoring {limit!r}")
        return self

    def order_by(self, keys: Optional[Iterable[Any]]) -> 'QueryBuilder':
        """Set sort keys.

        Args:
            keys: Field names (``"CreateDate desc"``), ``{"field": ..., "direction": ...}``
                mappings or ``OrderByItem`` objects. Directions are dropped.
        """
        if not keys:
            return self
        fields = sanitize_order_by(keys)
        if fields:
            self.options.order_by = fields
            logger.debug(f"orderBy: {fields}")
        return self

    def format(self, fmt: str) -> 'QueryBuilder':
        """Set the response format. Always overwrites; empty falls back to json."""
        self.options.format = fmt
        return self

    def build_params(self) -> List[Tuple[str, str]]:
        """Render the ordered parameter list.

        Order: format, take, where, include, orderBy, access_token.
        """
        opts = self.options
        params: List[Tuple[str, str]] = [("format", opts.format or DEFAULT_FORMAT)]
        if opts.take:
            params.append(("take", str(opts.take)))
        if opts.where:
            params.append(("where", opts.where))
        if opts.include:
            params.append(("include", render_includes(opts.include)))
        if opts.order_by:
            params.append(("orderBy", render_order_by(opts.order_by)))
        if self.auth.is_api_key:
            params.append(("access_token", self.auth.token))
        return params

    def build_query_string(self) -> str:
        """Form-encode ``build_params()`` for a URL."""
        return urlencode(self.build_params())

    def reset(self) -> 'QueryBuilder':
        """Clear all options; the auth descriptor is kept."""
        self.options = QueryOptions()
        return self

    def clone(self) -> 'QueryBuilder':
        """New builder with the same auth descriptor and empty options."""
        return QueryBuilder(self.auth)
