"""Concurrent, cycle-safe search across the token list reference graph."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from btkninfo.core.exceptions import ResolutionTimeoutError
from btkninfo.core.models import TokenRecord
from btkninfo.core.normalization import normalize_search_key, parse_token_uri
from btkninfo.core.types import LookupMode, TieBreak
from btkninfo.resolution.documents import DocumentFetcher

logger = logging.getLogger(__name__)

# Maps a matching token to the lookup result, or None to keep searching
Projection = Callable[[TokenRecord], "TokenRecord | str | None"]


def project_metadata(token: TokenRecord) -> TokenRecord:
    return token


def project_image(token: TokenRecord) -> str | None:
    if not token.logo_uri:
        return None
    return parse_token_uri(token.logo_uri)


PROJECTIONS: dict[LookupMode, Projection] = {
    LookupMode.METADATA: project_metadata,
    LookupMode.IMAGE: project_image,
}


class VisitedSet:
    """
    Document URLs entered during one resolve call.

    ``mark`` checks and records in a single step with no suspension point,
    so two racing branches can never both claim the same URL.
    """

    def __init__(self) -> None:
        self._urls: set[str] = set()

    def mark(self, url: str) -> bool:
        """Record ``url``; return False if it was already visited."""
        if url in self._urls:
            return False
        self._urls.add(url)
        return True

    def __contains__(self, url: object) -> bool:
        return url in self._urls

    def __len__(self) -> int:
        return len(self._urls)


@dataclass
class TraversalConfig:
    """Configuration for graph traversal."""

    # How to choose among siblings that both contain a match; lists shared
    # between sibling subtrees are claimed by whichever branch arrives first
    tie_break: TieBreak = TieBreak.FIRST_COMPLETED

    # Budget for one whole resolve call (seconds); None disables it
    total_timeout: float | None = 30.0


@dataclass
class _Traversal:
    """State shared by every branch of one resolve call."""

    key: str
    projection: Projection
    visited: VisitedSet


class GraphResolver:
    """
    Resolves a search key against a graph of token list documents.

    Sibling documents (the roots, or the ``lists`` of one document) are
    searched concurrently, one task per document. Within a document, tokens
    are scanned in declaration order and referenced lists are only searched
    once the document's own tokens are exhausted. The first match produced
    by any branch at any depth is the result; all still-running branches
    are cancelled at that point.

    Usage:
        resolver = GraphResolver(fetcher)
        token = await resolver.resolve("btkn1abc", roots, LookupMode.METADATA)
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        config: TraversalConfig | None = None,
    ) -> None:
        self._fetcher = fetcher
        self.config = config or TraversalConfig()

    async def resolve(
        self,
        search_key: str,
        roots: Sequence[str],
        mode: LookupMode,
    ) -> TokenRecord | str | None:
        """
        Find the first token matching ``search_key`` reachable from ``roots``.

        Args:
            search_key: Address, identifier or symbol (case and surrounding
                whitespace are ignored)
            roots: Root document URLs in registry order
            mode: METADATA yields the TokenRecord, IMAGE yields its logo URL

        Returns:
            The projected match, or None when nothing reachable matches

        Raises:
            ResolutionTimeoutError: If the whole traversal exceeds
                ``config.total_timeout``
        """
        key = normalize_search_key(search_key)
        if not key:
            return None

        traversal = _Traversal(key=key, projection=PROJECTIONS[mode], visited=VisitedSet())

        try:
            async with asyncio.timeout(self.config.total_timeout):
                result = await self._search(traversal, roots)
        except TimeoutError as e:
            raise ResolutionTimeoutError(
                message=f"Resolving {key!r} exceeded {self.config.total_timeout}s",
                timeout=self.config.total_timeout,
                details={"visited": len(traversal.visited)},
            ) from e

        if result is None:
            logger.debug(f"No {mode} match for {key!r} across {len(traversal.visited)} lists")
        return result

    async def _search(
        self,
        traversal: _Traversal,
        urls: Iterable[str],
    ) -> TokenRecord | str | None:
        """Search sibling documents concurrently; first match wins."""
        tasks = [asyncio.create_task(self._visit(traversal, url)) for url in urls]
        if not tasks:
            return None

        try:
            if self.config.tie_break == TieBreak.DECLARATION_ORDER:
                for task in tasks:
                    result = await task
                    if result is not None:
                        return result
            else:
                for next_done in asyncio.as_completed(tasks):
                    result = await next_done
                    if result is not None:
                        return result
            return None
        finally:
            # Losing and abandoned branches are cancelled, never awaited
            for task in tasks:
                if not task.done():
                    task.cancel()

    async def _visit(
        self,
        traversal: _Traversal,
        url: str,
    ) -> TokenRecord | str | None:
        """Search one document, then the documents it references."""
        if not traversal.visited.mark(url):
            return None

        document = await self._fetcher.fetch(url)
        if document is None:
            return None

        for token in document.tokens:
            if token.matches(traversal.key):
                result = traversal.projection(token)
                if result is not None:
                    logger.debug(f"Matched {traversal.key!r} in {url}")
                    return result

        if document.references:
            return await self._search(traversal, document.references)
        return None
