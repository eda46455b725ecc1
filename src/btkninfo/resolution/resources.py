"""Image resource fetcher."""

from __future__ import annotations

import logging

import httpx

from btkninfo.cache.backends import MISSING
from btkninfo.cache.stores import ResourceCache
from btkninfo.core.exceptions import FetchError
from btkninfo.core.models import ImageResource
from btkninfo.core.normalization import content_type_from_url
from btkninfo.resolution.base import BaseFetcher, FetcherConfig

logger = logging.getLogger(__name__)


def detect_content_type(url: str, response: httpx.Response) -> str:
    """Use the declared type when it is an image type, else infer from the URL."""
    declared = response.headers.get("content-type", "")
    if declared.startswith("image/"):
        return declared
    return content_type_from_url(url)


class ResourceFetcher(BaseFetcher):
    """
    Retrieves image bytes for resolved logo URLs.

    Failed fetches are logged and reported as ``None`` but never cached.
    """

    ACCEPT = "image/*,*/*;q=0.8"

    def __init__(self, cache: ResourceCache, config: FetcherConfig | None = None) -> None:
        super().__init__(config)
        self._cache = cache

    async def fetch(self, url: str) -> ImageResource | None:
        cached = await self._cache.get(url)
        if cached is not MISSING:
            return cached

        try:
            response = await self._make_request("GET", url)
        except FetchError as e:
            logger.warning(f"Failed to fetch image from {url}: {e.message}")
            return None

        resource = ImageResource(
            data=response.content,
            content_type=detect_content_type(url, response),
        )
        await self._cache.put(url, resource)
        return resource
