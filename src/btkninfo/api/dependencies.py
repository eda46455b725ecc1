"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from btkninfo.client import TokenInfoClient
from btkninfo.services.lookup import TokenLookupService


async def get_token_client(request: Request) -> TokenInfoClient:
    """Get the process-wide token client from app state."""
    return request.app.state.token_client


async def get_lookup_service(
    client: TokenInfoClient = Depends(get_token_client),
) -> TokenLookupService:
    """Get lookup service bound to the shared client."""
    return TokenLookupService(
        registry=client.registry,
        resolver=client.resolver,
        resource_fetcher=client.resource_fetcher,
    )


# Type aliases for cleaner dependency injection
TokenClient = Annotated[TokenInfoClient, Depends(get_token_client)]
LookupService = Annotated[TokenLookupService, Depends(get_lookup_service)]
