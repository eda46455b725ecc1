"""Tests for typed document and resource cache stores."""

from __future__ import annotations

from typing import Any, ClassVar

import pytest

from btkninfo.cache.backends import MISSING, MemoryCacheBackend
from btkninfo.cache.keys import CacheKeys
from btkninfo.cache.stores import DocumentCache, ResourceCache
from btkninfo.core.exceptions import CacheError
from btkninfo.core.models import ImageResource, TokenListDocument

URL = "https://lists.example.com/a.json"


class SerializingBackend(MemoryCacheBackend):
    """Memory backend that only accepts JSON-compatible values, like Redis."""

    SERIALIZES: ClassVar[bool] = True

    async def set(self, key: str, value: Any, ttl: int = 3600) -> None:
        assert value is None or isinstance(value, (dict, list, str, int, float, bool))
        await super().set(key, value, ttl)


class FailingBackend(MemoryCacheBackend):
    """Backend whose every operation fails."""

    async def get(self, key: str) -> Any:
        raise CacheError("down")

    async def set(self, key: str, value: Any, ttl: int = 3600) -> None:
        raise CacheError("down")

    async def delete(self, key: str) -> bool:
        raise CacheError("down")


class TestDocumentCache:
    """Tests for DocumentCache."""

    async def test_miss(self, document_cache: DocumentCache):
        assert await document_cache.get(URL) is MISSING

    async def test_hit(self, document_cache: DocumentCache, sample_document: TokenListDocument):
        await document_cache.put(URL, sample_document)
        assert await document_cache.get(URL) is sample_document

    async def test_negative_entry(self, document_cache: DocumentCache):
        await document_cache.put(URL, None)
        assert await document_cache.get(URL) is None

    async def test_expiry(self, document_cache: DocumentCache, clock, sample_document):
        await document_cache.put(URL, sample_document)
        clock.advance(3600)
        assert await document_cache.get(URL) is MISSING

    async def test_invalidate(self, document_cache: DocumentCache, sample_document):
        await document_cache.put(URL, sample_document)
        assert await document_cache.invalidate(URL) is True
        assert await document_cache.get(URL) is MISSING

    async def test_serializing_backend_round_trip(self, clock, sample_document):
        cache = DocumentCache(SerializingBackend(clock=clock))
        await cache.put(URL, sample_document)
        restored = await cache.get(URL)
        assert restored == sample_document
        assert restored.tokens[0].logo_uri == "https://cdn.example.com/foo.png"

    async def test_serializing_backend_negative_entry(self, clock):
        cache = DocumentCache(SerializingBackend(clock=clock))
        await cache.put(URL, None)
        assert await cache.get(URL) is None

    async def test_serializing_backend_discards_malformed_entry(self, clock):
        backend = SerializingBackend(clock=clock)
        await backend.set(CacheKeys.document(URL), {"ok": True, "document": {"name": 1}})
        assert await DocumentCache(backend).get(URL) is MISSING

    async def test_backend_failure_reads_as_miss(self, sample_document):
        cache = DocumentCache(FailingBackend())
        await cache.put(URL, sample_document)
        assert await cache.get(URL) is MISSING
        assert await cache.invalidate(URL) is False


class TestResourceCache:
    """Tests for ResourceCache."""

    @pytest.fixture
    def resource(self) -> ImageResource:
        return ImageResource(data=b"\x89PNG\r\n\x1a\n", content_type="image/png")

    async def test_miss(self, resource_cache: ResourceCache):
        assert await resource_cache.get(URL) is MISSING

    async def test_hit(self, resource_cache: ResourceCache, resource: ImageResource):
        await resource_cache.put(URL, resource)
        assert await resource_cache.get(URL) == resource

    async def test_longer_ttl(self, resource_cache: ResourceCache, clock, resource):
        await resource_cache.put(URL, resource)
        clock.advance(3601)
        assert await resource_cache.get(URL) == resource
        clock.advance(86400)
        assert await resource_cache.get(URL) is MISSING

    async def test_serializing_backend_round_trip(self, clock, resource):
        cache = ResourceCache(SerializingBackend(clock=clock))
        await cache.put(URL, resource)
        assert await cache.get(URL) == resource

    async def test_serializing_backend_discards_malformed_entry(self, clock):
        backend = SerializingBackend(clock=clock)
        await backend.set(CacheKeys.resource(URL), {"data": "not base64!"})
        assert await ResourceCache(backend).get(URL) is MISSING

    async def test_backend_failure_reads_as_miss(self, resource):
        cache = ResourceCache(FailingBackend())
        await cache.put(URL, resource)
        assert await cache.get(URL) is MISSING
