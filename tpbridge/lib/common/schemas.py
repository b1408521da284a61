"""
Common Pydantic schemas shared by the query compiler and its callers.
"""
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from tpbridge.lib.common.errors import InvalidRequestError
from tpbridge.lib.enums import AuthScheme


class AuthDescriptor(BaseModel):
    """Authentication scheme and token for a remote request.

    Only the API key scheme contributes to the query string; basic
    credentials are carried by the transport.
    """
    model_config = ConfigDict(frozen=True)

    scheme: AuthScheme = AuthScheme.BASIC
    token: str = Field(default="", repr=False, description="API token (ApiKey scheme only)")

    @property
    def is_api_key(self) -> bool:
        return self.scheme == AuthScheme.API_KEY


class OrderByItem(BaseModel):
    """Structured sort key. The direction is accepted but not sent."""
    field: str = Field(..., min_length=1)
    direction: Literal["asc", "desc"] = "asc"


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str
    details: Optional[str] = None

    @classmethod
    def from_exc(cls, exc: InvalidRequestError) -> "ErrorResponse":
        return cls(error=exc.code, details=exc.message)
