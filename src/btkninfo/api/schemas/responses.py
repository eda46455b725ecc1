"""API response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from btkninfo.api.schemas.base import APIBaseSchema


class TokenListSummaryResponse(APIBaseSchema):
    """One registered root token list and its current availability."""

    url: str
    name: str = Field(..., description="Registry display name")
    homepage: str | None = None
    list_name: str | None = Field(default=None, description="Name declared by the document")
    logo_uri: str | None = None
    available: bool = Field(..., description="Whether the document fetched and validated")
    token_count: int = 0
    nested_lists: list[str] = Field(default_factory=list)


class TokenListsResponse(APIBaseSchema):
    """All registered root token lists, in registry order."""

    lists: list[TokenListSummaryResponse]
    total: int


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    registry_size: int
    cache_backend: str
