"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from btkninfo import __version__
from btkninfo.api.schemas import HealthResponse
from btkninfo.core.exceptions import CacheError

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its cache backend.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    client = getattr(request.app.state, "token_client", None)
    if client is None:
        return HealthResponse(
            status="unhealthy",
            version=__version__,
            registry_size=0,
            cache_backend="none",
        )

    status: Literal["healthy", "degraded", "unhealthy"] = "healthy"
    backend = client.cache_backend_name
    if backend == "redis":
        try:
            await client.cache_backend.ping()
        except CacheError:
            status = "degraded"

    registry_size = len(client.registry)
    if registry_size == 0:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=__version__,
        registry_size=registry_size,
        cache_backend=backend,
    )
