"""Typed cache stores for token list documents and image resources."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from pydantic import ValidationError

from btkninfo.cache.backends import MISSING, CacheBackend, _Missing
from btkninfo.cache.keys import CacheKeys
from btkninfo.core.exceptions import CacheError
from btkninfo.core.models import ImageResource, TokenListDocument

logger = logging.getLogger(__name__)


class DocumentCache:
    """
    Memoizes fetched token list documents by source URL.

    An entry is either a validated document or ``None``, the negative marker
    recording a failed fetch or validation. Reads return ``MISSING`` when
    there is no fresh entry. Cache backend failures degrade to misses.
    """

    DEFAULT_TTL = 3600  # 1 hour

    def __init__(self, backend: CacheBackend, ttl: int = DEFAULT_TTL) -> None:
        self._backend = backend
        self.ttl = ttl

    async def get(self, url: str) -> TokenListDocument | None | _Missing:
        try:
            value = await self._backend.get(CacheKeys.document(url))
        except CacheError as e:
            logger.warning(f"Document cache read failed for {url}: {e}")
            return MISSING
        if value is MISSING or not self._backend.SERIALIZES:
            return value
        return self._decode(url, value)

    async def put(self, url: str, document: TokenListDocument | None) -> None:
        value: Any = document
        if self._backend.SERIALIZES:
            value = self._encode(document)
        try:
            await self._backend.set(CacheKeys.document(url), value, ttl=self.ttl)
        except CacheError as e:
            logger.warning(f"Document cache write failed for {url}: {e}")

    async def invalidate(self, url: str) -> bool:
        try:
            return await self._backend.delete(CacheKeys.document(url))
        except CacheError as e:
            logger.warning(f"Document cache delete failed for {url}: {e}")
            return False

    @staticmethod
    def _encode(document: TokenListDocument | None) -> dict[str, Any]:
        if document is None:
            return {"ok": False}
        return {"ok": True, "document": document.model_dump(mode="json", by_alias=True)}

    @staticmethod
    def _decode(url: str, value: Any) -> TokenListDocument | None | _Missing:
        if not isinstance(value, dict) or "ok" not in value:
            logger.warning(f"Discarding malformed document cache entry for {url}")
            return MISSING
        if not value["ok"]:
            return None
        try:
            return TokenListDocument.model_validate(value.get("document"))
        except ValidationError:
            logger.warning(f"Discarding stale document cache entry for {url}")
            return MISSING


class ResourceCache:
    """
    Memoizes fetched image resources by URL.

    Only successful fetches are stored; there is no negative entry.
    """

    DEFAULT_TTL = 86400  # 24 hours

    def __init__(self, backend: CacheBackend, ttl: int = DEFAULT_TTL) -> None:
        self._backend = backend
        self.ttl = ttl

    async def get(self, url: str) -> ImageResource | _Missing:
        try:
            value = await self._backend.get(CacheKeys.resource(url))
        except CacheError as e:
            logger.warning(f"Resource cache read failed for {url}: {e}")
            return MISSING
        if value is MISSING or not self._backend.SERIALIZES:
            return value
        try:
            return ImageResource(
                data=base64.b64decode(value["data"]),
                content_type=value["content_type"],
            )
        except (KeyError, TypeError, binascii.Error):
            logger.warning(f"Discarding malformed resource cache entry for {url}")
            return MISSING

    async def put(self, url: str, resource: ImageResource) -> None:
        value: Any = resource
        if self._backend.SERIALIZES:
            value = {
                "data": base64.b64encode(resource.data).decode("ascii"),
                "content_type": resource.content_type,
            }
        try:
            await self._backend.set(CacheKeys.resource(url), value, ttl=self.ttl)
        except CacheError as e:
            logger.warning(f"Resource cache write failed for {url}: {e}")
