"""Service layer for boundary-facing lookup orchestration."""

from btkninfo.services.lookup import LookupResult, TokenLookupService

__all__ = [
    "LookupResult",
    "TokenLookupService",
]
