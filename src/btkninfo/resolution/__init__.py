"""Fetching and graph resolution of token list documents."""

from btkninfo.resolution.base import BaseFetcher, FetcherConfig
from btkninfo.resolution.documents import DocumentFetcher
from btkninfo.resolution.graph import GraphResolver, TraversalConfig, VisitedSet
from btkninfo.resolution.registry import TokenListRegistry
from btkninfo.resolution.resources import ResourceFetcher, detect_content_type

__all__ = [
    "BaseFetcher",
    "DocumentFetcher",
    "FetcherConfig",
    "GraphResolver",
    "ResourceFetcher",
    "TokenListRegistry",
    "TraversalConfig",
    "VisitedSet",
    "detect_content_type",
]
