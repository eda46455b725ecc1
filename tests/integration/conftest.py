"""Integration test fixtures: a real client behind the API with mocked upstreams."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
import respx
from httpx import ASGITransport, AsyncClient

from btkninfo.cache.backends import MemoryCacheBackend
from btkninfo.client import TokenInfoClient
from btkninfo.config import BtknInfoSettings
from btkninfo.resolution.registry import TokenListRegistry

ROOT_A = "https://lists.example.com/a.json"
ROOT_B = "https://lists.example.com/b.json"


# ============================================================================
# Upstream Fixtures
# ============================================================================


@pytest.fixture
def upstream():
    """Mock every outbound request; unregistered URLs raise."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def registry() -> TokenListRegistry:
    """Two root lists, A before B."""
    return TokenListRegistry.from_mapping(
        {
            ROOT_A: {"name": "List A", "homepage": "https://a.example.com"},
            ROOT_B: {"name": "List B", "homepage": "https://b.example.com"},
        }
    )


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
async def token_client(
    test_settings: BtknInfoSettings,
    registry: TokenListRegistry,
) -> AsyncIterator[TokenInfoClient]:
    """Opened client with an injected registry and in-process cache."""
    client = TokenInfoClient(
        test_settings,
        registry=registry,
        cache_backend=MemoryCacheBackend(),
    )
    await client.open()
    yield client
    await client.close()


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
def test_app(token_client: TokenInfoClient):
    """Create test FastAPI application around the opened client."""
    from fastapi import FastAPI

    from btkninfo.api.routes import health_router, lists_router, tokens_router

    # Create a minimal app for testing
    app = FastAPI()
    app.include_router(health_router)
    app.include_router(lists_router)
    app.include_router(tokens_router)

    # Lifespan does not run under ASGITransport
    app.state.token_client = token_client
    return app


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP client for testing."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
