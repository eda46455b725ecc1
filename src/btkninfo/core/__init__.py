"""Core domain models, types, and utilities."""

from .exceptions import (
    BtknInfoError,
    CacheError,
    DocumentValidationError,
    FetchError,
    RegistryError,
    ResolutionError,
    ResolutionTimeoutError,
)
from .models import ImageResource, RegistryEntry, TokenListDocument, TokenRecord
from .types import LookupMode, LookupStatus, TieBreak

__all__ = [
    # Exceptions
    "BtknInfoError",
    "CacheError",
    "DocumentValidationError",
    "FetchError",
    "RegistryError",
    "ResolutionError",
    "ResolutionTimeoutError",
    # Models
    "ImageResource",
    "RegistryEntry",
    "TokenListDocument",
    "TokenRecord",
    # Types
    "LookupMode",
    "LookupStatus",
    "TieBreak",
]
