"""Tests for cache key builders."""

from __future__ import annotations

from btkninfo.cache.keys import CacheKeys


class TestCacheKeys:
    """Tests for document and resource keys."""

    def test_document_key_prefix(self):
        key = CacheKeys.document("https://lists.example.com/a.json")
        assert key.startswith("btkninfo:document:")

    def test_resource_key_prefix(self):
        key = CacheKeys.resource("https://cdn.example.com/a.png")
        assert key.startswith("btkninfo:resource:")

    def test_key_is_deterministic(self):
        url = "https://lists.example.com/a.json"
        assert CacheKeys.document(url) == CacheKeys.document(url)

    def test_different_urls_produce_different_keys(self):
        assert CacheKeys.document("https://a") != CacheKeys.document("https://b")

    def test_document_and_resource_namespaces_differ(self):
        url = "https://example.com/shared"
        assert CacheKeys.document(url) != CacheKeys.resource(url)

    def test_long_urls_have_bounded_length(self):
        key = CacheKeys.document("https://example.com/" + "x" * 5000)
        assert len(key) == len("btkninfo:document:") + 32
