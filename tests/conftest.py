"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from btkninfo.config import BtknInfoSettings
from btkninfo.core.models import RegistryEntry, TokenListDocument, TokenRecord

# ============================================================================
# Sample Data Fixtures
# ============================================================================


def _token_payload(
    address: str,
    symbol: str = "FOO",
    *,
    name: str = "Foo",
    decimals: int = 8,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw token entry as it appears in a token list document."""
    return {"name": name, "symbol": symbol, "address": address, "decimals": decimals, **extra}


def _list_payload(
    name: str,
    tokens: list[dict[str, Any]] | None = None,
    lists: list[str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw token list document."""
    payload: dict[str, Any] = {"name": name, "tokens": tokens or [], **extra}
    if lists is not None:
        payload["lists"] = lists
    return payload


@pytest.fixture
def sample_token_payload() -> dict[str, Any]:
    """Raw token entry with every optional field set."""
    return _token_payload(
        "btkn1aaa",
        identifier="foo-main",
        tags=["stablecoin", "verified"],
        logoURI="https://cdn.example.com/foo.png",
    )


@pytest.fixture
def sample_token(sample_token_payload: dict[str, Any]) -> TokenRecord:
    """Parsed token with every optional field set."""
    return TokenRecord.model_validate(sample_token_payload)


@pytest.fixture
def sample_document(sample_token_payload: dict[str, Any]) -> TokenListDocument:
    """Parsed single-token list."""
    return TokenListDocument.model_validate(_list_payload("L1", [sample_token_payload]))


@pytest.fixture
def sample_registry_entries() -> list[RegistryEntry]:
    """Two root lists in declaration order."""
    return [
        RegistryEntry(url="https://lists.example.com/a.json", name="List A", homepage="https://a.example.com"),
        RegistryEntry(url="https://lists.example.com/b.json", name="List B", homepage="https://b.example.com"),
    ]


@pytest.fixture
def test_settings() -> BtknInfoSettings:
    """Settings with short timeouts and no external services."""
    return BtknInfoSettings(
        _env_file=None,
        redis_url=None,
        fetch_timeout=2.0,
        resolve_timeout=5.0,
        max_concurrency=8,
    )


@pytest.fixture
def make_token():
    """Factory fixture building raw token entries."""
    return _token_payload


@pytest.fixture
def make_list():
    """Factory fixture building raw token list documents."""
    return _list_payload
