"""Async Redis cache backend."""

from __future__ import annotations

import json
from typing import Any, ClassVar

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from btkninfo.cache.backends import MISSING
from btkninfo.cache.keys import CacheKeys
from btkninfo.core.exceptions import CacheError


class AsyncRedisClient:
    """Async Redis client wrapper with JSON serialization."""

    SERIALIZES: ClassVar[bool] = True

    def __init__(self, redis_url: str) -> None:
        self._redis_url = redis_url
        self._pool: aioredis.ConnectionPool | None = None
        self._redis: aioredis.Redis | None = None

    async def connect(self) -> None:
        """Connect to Redis."""
        self._pool = aioredis.ConnectionPool.from_url(
            self._redis_url,
            max_connections=20,
            decode_responses=True,
        )
        self._redis = aioredis.Redis(connection_pool=self._pool)

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis:
            await self._redis.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._redis = None
        self._pool = None

    async def ping(self) -> bool:
        """Check the connection."""
        if not self._redis:
            return False
        try:
            return bool(await self._redis.ping())
        except RedisError as e:
            raise CacheError(f"Redis ping failed: {e}") from e

    async def get(self, key: str) -> Any:
        """Get a value from cache, or ``MISSING``."""
        if not self._redis:
            return MISSING
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            raise CacheError(f"Redis GET failed for {key}: {e}") from e
        if value is None:
            return MISSING
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    async def set(
        self,
        key: str,
        value: Any,
        ttl: int = 3600,
    ) -> None:
        """Set a value in cache with TTL."""
        if not self._redis:
            return
        serialized = json.dumps(value, default=str)
        try:
            await self._redis.set(key, serialized, ex=ttl)
        except RedisError as e:
            raise CacheError(f"Redis SET failed for {key}: {e}") from e

    async def delete(self, key: str) -> bool:
        """Delete a key from cache."""
        if not self._redis:
            return False
        try:
            result = await self._redis.delete(key)
        except RedisError as e:
            raise CacheError(f"Redis DEL failed for {key}: {e}") from e
        return result > 0

    async def clear(self) -> None:
        """Delete every key written under the btkninfo prefix."""
        if not self._redis:
            return
        try:
            async for key in self._redis.scan_iter(match=f"{CacheKeys.PREFIX}:*"):
                await self._redis.delete(key)
        except RedisError as e:
            raise CacheError(f"Redis clear failed: {e}") from e

    async def __aenter__(self) -> "AsyncRedisClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
