"""Main library client for standalone usage."""

from __future__ import annotations

import asyncio
import logging

from btkninfo.cache.backends import CacheBackend, MemoryCacheBackend
from btkninfo.cache.stores import DocumentCache, ResourceCache
from btkninfo.config import BtknInfoSettings
from btkninfo.core.exceptions import CacheError
from btkninfo.core.models import ImageResource, RegistryEntry, TokenListDocument, TokenRecord
from btkninfo.core.types import LookupMode
from btkninfo.resolution.base import FetcherConfig
from btkninfo.resolution.documents import DocumentFetcher
from btkninfo.resolution.graph import GraphResolver, TraversalConfig
from btkninfo.resolution.registry import TokenListRegistry
from btkninfo.resolution.resources import ResourceFetcher

logger = logging.getLogger(__name__)


class TokenInfoClient:
    """
    Main client for the btkninfo library.

    Wires the caches, fetchers, registry and graph resolver together so
    tokens can be looked up without running the web server.

    Usage:
        async with TokenInfoClient() as client:
            # Metadata by address, identifier or symbol
            token = await client.get_token_info("btkn1...")

            # Logo bytes
            image = await client.get_token_image("FOO")

    Settings are loaded from environment variables or can be passed explicitly.
    The cache backend lives as long as the client; construct one client per
    process and share it.
    """

    def __init__(
        self,
        settings: BtknInfoSettings | None = None,
        *,
        registry: TokenListRegistry | None = None,
        cache_backend: CacheBackend | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            registry: Root token lists. If not provided, loaded per settings on entry.
            cache_backend: Cache backend. If not provided, Redis when configured,
                otherwise an in-process cache.
        """
        self._settings = settings or BtknInfoSettings()
        self._registry = registry
        self._backend = cache_backend
        self._owns_backend = cache_backend is None
        self._document_fetcher: DocumentFetcher | None = None
        self._resource_fetcher: ResourceFetcher | None = None
        self._resolver: GraphResolver | None = None

    async def __aenter__(self) -> TokenInfoClient:
        """Initialize resources on context entry."""
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def open(self) -> None:
        """Initialize client resources."""
        if self._backend is None:
            self._backend = await self._create_backend()

        document_cache = DocumentCache(self._backend, ttl=self._settings.document_cache_ttl)
        resource_cache = ResourceCache(self._backend, ttl=self._settings.resource_cache_ttl)

        fetcher_config = FetcherConfig(
            timeout=self._settings.fetch_timeout,
            max_concurrency=self._settings.max_concurrency,
        )
        self._document_fetcher = DocumentFetcher(document_cache, fetcher_config)
        self._resource_fetcher = ResourceFetcher(resource_cache, fetcher_config)

        if self._registry is None:
            self._registry = await TokenListRegistry.from_settings(self._settings)

        self._resolver = GraphResolver(
            self._document_fetcher,
            TraversalConfig(
                tie_break=self._settings.tie_break,
                total_timeout=self._settings.resolve_timeout,
            ),
        )

    async def _create_backend(self) -> CacheBackend:
        """Use Redis when configured and reachable, else the in-process cache."""
        if self._settings.redis_url:
            from btkninfo.cache.client import AsyncRedisClient

            redis_client = AsyncRedisClient(str(self._settings.redis_url))
            try:
                await redis_client.connect()
                await redis_client.ping()
                logger.info("Redis cache initialized")
                return redis_client
            except CacheError as e:
                logger.warning(f"Failed to initialize Redis, using in-process cache: {e}")
                await redis_client.close()
        return MemoryCacheBackend()

    async def close(self) -> None:
        """Close all resources."""
        if self._document_fetcher:
            await self._document_fetcher.close()
            self._document_fetcher = None

        if self._resource_fetcher:
            await self._resource_fetcher.close()
            self._resource_fetcher = None

        if self._backend and self._owns_backend:
            await self._backend.close()
            self._backend = None

        self._resolver = None

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with TokenInfoClient() as client:'"
            )

    @property
    def registry(self) -> TokenListRegistry:
        self._ensure_initialized()
        return self._registry

    @property
    def resolver(self) -> GraphResolver:
        self._ensure_initialized()
        return self._resolver

    @property
    def resource_fetcher(self) -> ResourceFetcher:
        self._ensure_initialized()
        return self._resource_fetcher

    @property
    def cache_backend(self) -> CacheBackend | None:
        return self._backend

    @property
    def cache_backend_name(self) -> str:
        """Short name of the active cache backend, for diagnostics."""
        if self._backend is None:
            return "none"
        return "redis" if self._backend.SERIALIZES else "memory"

    async def get_token_info(self, identifier: str) -> TokenRecord | None:
        """
        Find token metadata by address, identifier or symbol.

        Args:
            identifier: Search key (case-insensitive, whitespace-trimmed)

        Returns:
            The first matching token record, or None
        """
        self._ensure_initialized()
        return await self._resolver.resolve(
            identifier, self._registry.urls, LookupMode.METADATA
        )

    async def get_token_image_url(self, identifier: str) -> str | None:
        """Find the logo URL of the first matching token that has one."""
        self._ensure_initialized()
        return await self._resolver.resolve(identifier, self._registry.urls, LookupMode.IMAGE)

    async def get_token_image(self, identifier: str) -> ImageResource | None:
        """Find and download the logo of the first matching token that has one."""
        image_url = await self.get_token_image_url(identifier)
        if image_url is None:
            return None
        return await self._resource_fetcher.fetch(image_url)

    async def get_token_lists(self) -> list[tuple[RegistryEntry, TokenListDocument | None]]:
        """Fetch every root list concurrently, in registry order."""
        self._ensure_initialized()
        entries = list(self._registry)
        documents = await asyncio.gather(
            *(self._document_fetcher.fetch(entry.url) for entry in entries)
        )
        return list(zip(entries, documents))


# Convenience functions for one-off lookups
async def get_token_info(
    identifier: str,
    *,
    settings: BtknInfoSettings | None = None,
) -> TokenRecord | None:
    """
    Look up token metadata (convenience function).

    For multiple lookups, use TokenInfoClient so documents stay cached.
    """
    async with TokenInfoClient(settings) as client:
        return await client.get_token_info(identifier)


async def get_token_image(
    identifier: str,
    *,
    settings: BtknInfoSettings | None = None,
) -> ImageResource | None:
    """
    Look up token logo bytes (convenience function).

    For multiple lookups, use TokenInfoClient so documents stay cached.
    """
    async with TokenInfoClient(settings) as client:
        return await client.get_token_image(identifier)
