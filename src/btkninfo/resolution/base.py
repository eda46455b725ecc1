"""Shared HTTP fetcher base with client lifecycle and bounded concurrency."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx
from pydantic import BaseModel, Field

from btkninfo.core.exceptions import FetchError


class FetcherConfig(BaseModel):
    """Configuration for an outbound fetcher."""

    timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    max_concurrency: int = Field(
        default=16, ge=1, description="Maximum in-flight requests for this fetcher"
    )
    user_agent: str = "btkninfo/1.0"
    follow_redirects: bool = True


class BaseFetcher:
    """
    Base class for fetchers of remote documents and resources.

    Provides:
    - HTTP client management with connection pooling
    - A semaphore bounding concurrent outbound requests
    - Uniform conversion of transport failures into ``FetchError``
    """

    ACCEPT: str = "*/*"

    def __init__(self, config: FetcherConfig | None = None) -> None:
        self.config = config or FetcherConfig()
        self._client: httpx.AsyncClient | None = None
        self._semaphore = asyncio.Semaphore(self.config.max_concurrency)

    @asynccontextmanager
    async def _get_client(self, url: str) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=self.config.follow_redirects,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise FetchError(message=f"Timed out: {e!r}", url=url) from e
        except httpx.HTTPError as e:
            raise FetchError(message=f"HTTP error: {e!r}", url=url) from e
        except httpx.InvalidURL as e:
            raise FetchError(message=f"Invalid URL: {e}", url=url) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": self.config.user_agent,
            "Accept": self.ACCEPT,
        }

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request, raising ``FetchError`` on any non-success outcome.

        Invalid URLs, transport errors, timeouts and non-2xx statuses all
        surface as ``FetchError``.
        """
        async with self._semaphore:
            async with self._get_client(url) as client:
                response = await client.request(method, url, **kwargs)

        if not response.is_success:
            raise FetchError(
                message=f"Unexpected status {response.status_code}",
                url=url,
                status_code=response.status_code,
            )
        return response

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BaseFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
