"""Registry of root token list URLs and their display metadata."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from btkninfo.core.exceptions import RegistryError
from btkninfo.core.models import RegistryEntry

if TYPE_CHECKING:
    from btkninfo.config import BtknInfoSettings

logger = logging.getLogger(__name__)


class _EntryPayload(BaseModel):
    name: str
    homepage: str | None = None


_REGISTRY_ADAPTER = TypeAdapter(dict[str, _EntryPayload])


class TokenListRegistry:
    """
    Ordered set of root token list URLs.

    The registry is a JSON object mapping each root document URL to
    ``{"name": ..., "homepage": ...}``; declaration order is preserved and is
    the order in which roots are searched.
    """

    def __init__(self, entries: list[RegistryEntry] | None = None) -> None:
        self._entries: list[RegistryEntry] = []
        self._by_url: dict[str, RegistryEntry] = {}
        for entry in entries or []:
            self.register(entry)

    def register(self, entry: RegistryEntry) -> None:
        """Add a root list; re-registering a URL replaces its metadata in place."""
        if entry.url in self._by_url:
            index = self._entries.index(self._by_url[entry.url])
            self._entries[index] = entry
        else:
            self._entries.append(entry)
        self._by_url[entry.url] = entry

    @property
    def urls(self) -> list[str]:
        """Root URLs in declaration order."""
        return [entry.url for entry in self._entries]

    def get(self, url: str) -> RegistryEntry | None:
        return self._by_url.get(url)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TokenListRegistry":
        """Build a registry from the parsed JSON mapping."""
        try:
            payload = _REGISTRY_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise RegistryError(
                f"Invalid token list registry: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e
        return cls(
            [
                RegistryEntry(url=url, name=item.name, homepage=item.homepage)
                for url, item in payload.items()
            ]
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "TokenListRegistry":
        """Load a registry from a local JSON file."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise RegistryError(f"Could not read registry file {path}: {e}") from e
        return cls.from_mapping(data)

    @classmethod
    async def from_url(cls, url: str, *, timeout: float = 10.0) -> "TokenListRegistry":
        """Fetch a registry published as JSON."""
        try:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                response = await client.get(url)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, json.JSONDecodeError) as e:
            raise RegistryError(f"Could not fetch registry from {url}: {e}") from e
        return cls.from_mapping(data)

    @classmethod
    async def from_settings(cls, settings: "BtknInfoSettings") -> "TokenListRegistry":
        """
        Load the registry configured in settings.

        A local ``registry_path`` takes precedence over ``registry_url``.
        """
        if settings.registry_path:
            registry = cls.from_file(settings.registry_path)
            source = str(settings.registry_path)
        else:
            registry = await cls.from_url(settings.registry_url, timeout=settings.fetch_timeout)
            source = settings.registry_url
        logger.info(f"Loaded {len(registry)} token lists from {source}")
        return registry
