"""API request/response schemas."""

from btkninfo.api.schemas.base import APIBaseSchema, to_camel_case
from btkninfo.api.schemas.responses import (
    HealthResponse,
    TokenListsResponse,
    TokenListSummaryResponse,
)

__all__ = [
    "APIBaseSchema",
    "HealthResponse",
    "TokenListSummaryResponse",
    "TokenListsResponse",
    "to_camel_case",
]
