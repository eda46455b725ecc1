"""Token list document fetcher with negative caching."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from btkninfo.cache.backends import MISSING
from btkninfo.cache.stores import DocumentCache
from btkninfo.core.exceptions import DocumentValidationError, FetchError
from btkninfo.core.models import TokenListDocument
from btkninfo.resolution.base import BaseFetcher, FetcherConfig

logger = logging.getLogger(__name__)


class DocumentFetcher(BaseFetcher):
    """
    Retrieves and validates token list documents.

    Every failure mode (transport, HTTP status, JSON parse, schema) collapses
    to ``None`` plus a logged diagnostic, and is remembered in the document
    cache for the freshness window so that failing lists are not retried on
    every lookup.
    """

    ACCEPT = "application/json"

    def __init__(self, cache: DocumentCache, config: FetcherConfig | None = None) -> None:
        super().__init__(config)
        self._cache = cache

    async def fetch(self, url: str) -> TokenListDocument | None:
        """Fetch one document, consulting and populating the cache."""
        cached = await self._cache.get(url)
        if cached is not MISSING:
            return cached

        try:
            document = await self._fetch_uncached(url)
        except FetchError as e:
            logger.warning(f"Failed to fetch token list from {url}: {e.message}")
            document = None
        except DocumentValidationError as e:
            logger.warning(f"Invalid token list at {url}: {e.message}")
            document = None

        await self._cache.put(url, document)
        return document

    async def _fetch_uncached(self, url: str) -> TokenListDocument:
        response = await self._make_request("GET", url)
        try:
            return TokenListDocument.model_validate_json(response.content)
        except ValidationError as e:
            raise DocumentValidationError(
                message=f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}",
                url=url,
                details={"errors": e.errors(include_url=False)},
            ) from e
