"""
Request models for search and get operations and their query compilation.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field

from tpbridge.lib.common.schemas import AuthDescriptor, OrderByItem
from tpbridge.lib.query.builder import QueryBuilder
from tpbridge.lib.query.presets import resolve_where

ENTITY_TYPE_PATTERN = r"^[A-Za-z][A-Za-z0-9]*$"


class SearchRequest(BaseModel):
    """Arguments of a search operation."""
    type: str = Field(..., pattern=ENTITY_TYPE_PATTERN, description="Entity type, e.g. UserStory, Bug, Task")
    where: Optional[str] = Field(default=None, description="Filter expression or searchPresets.<name> reference")
    include: Optional[List[str]] = Field(default=None, description="Related data to include, e.g. Project, AssignedUser")
    take: int = Field(default=100, ge=1, le=1000, description="Number of items to return")
    order_by: Optional[List[Union[str, OrderByItem]]] = Field(default=None, description="Fields to sort by")
    preset_variables: Dict[str, Union[str, int]] = Field(default_factory=dict, description="Values for preset placeholders")


class GetRequest(BaseModel):
    """Arguments of a get-by-id operation."""
    type: str = Field(..., pattern=ENTITY_TYPE_PATTERN)
    id: int = Field(..., ge=1)
    include: Optional[List[str]] = None


def compile_search(
    request: SearchRequest,
    auth: AuthDescriptor,
    today: Optional[date] = None,
) -> List[Tuple[str, str]]:
    """Compile a search request into ordered query parameters.

    Raises:
        InvalidRequestError: If the where clause, an include or a preset is invalid.
    """
    where = resolve_where(request.where, request.preset_variables, today)
    return (
        QueryBuilder(auth)
        .where(where)
        .include(request.include)
        .take(request.take)
        .order_by(request.order_by)
        .build_params()
    )


def compile_get(request: GetRequest, auth: AuthDescriptor) -> List[Tuple[str, str]]:
    """Compile a get request into ordered query parameters."""
    return QueryBuilder(auth).include(request.include).build_params()


def parse_search(payload: Dict[str, Any]) -> SearchRequest:
    """Validate raw search arguments; accepts ``orderBy`` as an alias of ``order_by``."""
    data = dict(payload)
    if "orderBy" in data and "order_by" not in data:
        data["order_by"] = data.pop("orderBy")
    return SearchRequest.model_validate(data)
