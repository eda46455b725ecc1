"""Cache backend protocol and the in-process TTL backend."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any, ClassVar, Protocol


class _Missing:
    """Sentinel type for a cache miss (distinct from a cached ``None``)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class CacheBackend(Protocol):
    """
    Minimal async key/value store with per-entry TTL.

    Backends with ``SERIALIZES = True`` only accept JSON-compatible values;
    the typed stores encode values for them. In-process backends keep the
    Python objects as-is.
    """

    SERIALIZES: ClassVar[bool]

    async def get(self, key: str) -> Any: ...

    async def set(self, key: str, value: Any, ttl: int = 3600) -> None: ...

    async def delete(self, key: str) -> bool: ...

    async def clear(self) -> None: ...

    async def close(self) -> None: ...


class MemoryCacheBackend:
    """
    Process-local TTL cache.

    Entries are checked for expiry on read; an expired entry reads as
    ``MISSING`` and is dropped. All operations complete without suspending,
    so each is atomic with respect to other asyncio tasks.
    """

    SERIALIZES: ClassVar[bool] = False

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    async def get(self, key: str) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return MISSING
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return MISSING
        return value

    async def set(self, key: str, value: Any, ttl: int = 3600) -> None:
        self._entries[key] = (self._clock() + ttl, value)

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    async def clear(self) -> None:
        self._entries.clear()

    async def close(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
