"""Lookup service classifying resolution outcomes for the HTTP boundary."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from btkninfo.core.exceptions import ResolutionError
from btkninfo.core.models import ImageResource, TokenRecord
from btkninfo.core.normalization import normalize_search_key, strip_image_extension
from btkninfo.core.types import LookupMode, LookupStatus

if TYPE_CHECKING:
    from btkninfo.resolution.graph import GraphResolver
    from btkninfo.resolution.registry import TokenListRegistry
    from btkninfo.resolution.resources import ResourceFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one info or image lookup."""

    status: LookupStatus
    identifier: str
    token: TokenRecord | None = None
    image_url: str | None = None
    image: ImageResource | None = None
    error_message: str | None = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND


def image_identifier(segments: str | Sequence[str]) -> str:
    """Recover the token identifier from an image request path."""
    path = segments if isinstance(segments, str) else "/".join(segments)
    return strip_image_extension(path)


class TokenLookupService:
    """
    Runs metadata and image lookups and classifies their outcome.

    Separates "nothing matched" (NOT_FOUND) from "a logo was matched but its
    bytes are unavailable" (UPSTREAM_UNAVAILABLE) and from failures of the
    traversal itself (ERROR). Failures of individual documents never reach
    this layer; the resolver has already treated them as non-matching.
    """

    def __init__(
        self,
        registry: "TokenListRegistry",
        resolver: "GraphResolver",
        resource_fetcher: "ResourceFetcher",
    ) -> None:
        self._registry = registry
        self._resolver = resolver
        self._resource_fetcher = resource_fetcher

    async def lookup_info(self, identifier: str) -> LookupResult:
        """Resolve token metadata for ``identifier``."""
        if not normalize_search_key(identifier):
            return LookupResult(status=LookupStatus.MISSING_IDENTIFIER, identifier=identifier)

        try:
            token = await self._resolver.resolve(
                identifier, self._registry.urls, LookupMode.METADATA
            )
        except ResolutionError as e:
            logger.error(f"Error serving token info for {identifier!r}: {e.message}")
            return self._error(identifier, e.message)
        except Exception as e:
            logger.exception(f"Error serving token info for {identifier!r}: {e}")
            return self._error(identifier, str(e))

        if token is None:
            return LookupResult(status=LookupStatus.NOT_FOUND, identifier=identifier)
        return LookupResult(status=LookupStatus.FOUND, identifier=identifier, token=token)

    async def lookup_image(self, segments: str | Sequence[str]) -> LookupResult:
        """Resolve and download the logo for an image request path."""
        identifier = image_identifier(segments)
        if not normalize_search_key(identifier):
            return LookupResult(status=LookupStatus.MISSING_IDENTIFIER, identifier=identifier)

        try:
            image_url = await self._resolver.resolve(
                identifier, self._registry.urls, LookupMode.IMAGE
            )
            if image_url is None:
                return LookupResult(status=LookupStatus.NOT_FOUND, identifier=identifier)

            image = await self._resource_fetcher.fetch(image_url)
        except ResolutionError as e:
            logger.error(f"Error serving token image for {identifier!r}: {e.message}")
            return self._error(identifier, e.message)
        except Exception as e:
            logger.exception(f"Error serving token image for {identifier!r}: {e}")
            return self._error(identifier, str(e))

        if image is None:
            return LookupResult(
                status=LookupStatus.UPSTREAM_UNAVAILABLE,
                identifier=identifier,
                image_url=image_url,
            )
        return LookupResult(
            status=LookupStatus.FOUND,
            identifier=identifier,
            image_url=image_url,
            image=image,
        )

    @staticmethod
    def _error(identifier: str, message: str) -> LookupResult:
        return LookupResult(
            status=LookupStatus.ERROR,
            identifier=identifier,
            error_message=message,
        )
