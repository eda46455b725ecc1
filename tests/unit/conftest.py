"""Unit test fixtures with HTTP mocking and in-process caches."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
import respx
from httpx import Response

from btkninfo.cache.backends import MemoryCacheBackend
from btkninfo.cache.stores import DocumentCache, ResourceCache
from btkninfo.core.models import TokenListDocument
from btkninfo.resolution.base import FetcherConfig
from btkninfo.resolution.documents import DocumentFetcher
from btkninfo.resolution.resources import ResourceFetcher

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_error_response(status_code: int, message: str = "Error") -> Response:
    """Create a mock error response."""
    return Response(
        status_code=status_code,
        json={"error": message},
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "error": mock_error_response,
    }


# ============================================================================
# Cache Fixtures
# ============================================================================


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_backend(clock: FakeClock) -> MemoryCacheBackend:
    return MemoryCacheBackend(clock=clock)


@pytest.fixture
def document_cache(memory_backend: MemoryCacheBackend) -> DocumentCache:
    return DocumentCache(memory_backend, ttl=3600)


@pytest.fixture
def resource_cache(memory_backend: MemoryCacheBackend) -> ResourceCache:
    return ResourceCache(memory_backend, ttl=86400)


# ============================================================================
# Fetcher Fixtures
# ============================================================================


@pytest.fixture
def fetcher_config() -> FetcherConfig:
    """Create a fetcher config for testing."""
    return FetcherConfig(timeout=2.0, max_concurrency=4)


@pytest.fixture
async def document_fetcher(
    document_cache: DocumentCache,
    fetcher_config: FetcherConfig,
):
    fetcher = DocumentFetcher(document_cache, fetcher_config)
    yield fetcher
    await fetcher.close()


@pytest.fixture
async def resource_fetcher(
    resource_cache: ResourceCache,
    fetcher_config: FetcherConfig,
):
    fetcher = ResourceFetcher(resource_cache, fetcher_config)
    yield fetcher
    await fetcher.close()


class StubDocumentFetcher:
    """
    In-memory stand-in for DocumentFetcher.

    Serves parsed documents by URL (unknown URLs read as unavailable),
    optionally after a per-URL delay, and records every fetch.
    """

    def __init__(
        self,
        documents: dict[str, dict[str, Any]],
        delays: dict[str, float] | None = None,
    ) -> None:
        self._documents = {
            url: TokenListDocument.model_validate(payload) for url, payload in documents.items()
        }
        self._delays = delays or {}
        self.calls: list[str] = []
        self.cancelled: list[str] = []

    async def fetch(self, url: str) -> TokenListDocument | None:
        self.calls.append(url)
        try:
            if delay := self._delays.get(url):
                await asyncio.sleep(delay)
        except asyncio.CancelledError:
            self.cancelled.append(url)
            raise
        return self._documents.get(url)


@pytest.fixture
def stub_fetcher():
    """Factory fixture building stub document fetchers."""
    return StubDocumentFetcher
