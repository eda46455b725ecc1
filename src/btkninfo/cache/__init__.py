"""Caching layer: pluggable backends and typed document/resource stores."""

from .backends import MISSING, CacheBackend, MemoryCacheBackend
from .client import AsyncRedisClient
from .keys import CacheKeys
from .stores import DocumentCache, ResourceCache

__all__ = [
    "MISSING",
    "AsyncRedisClient",
    "CacheBackend",
    "CacheKeys",
    "DocumentCache",
    "MemoryCacheBackend",
    "ResourceCache",
]
