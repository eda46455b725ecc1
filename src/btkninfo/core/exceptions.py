"""Custom exception hierarchy for btkninfo."""

from typing import Any


class BtknInfoError(Exception):
    """Base exception for all btkninfo errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FetchError(BtknInfoError):
    """Remote document or resource could not be retrieved."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class DocumentValidationError(BtknInfoError):
    """Fetched body is not a well-formed token list document."""

    def __init__(
        self,
        message: str,
        url: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url


class RegistryError(BtknInfoError):
    """Token list registry could not be loaded."""

    pass


class ResolutionError(BtknInfoError):
    """Graph resolution failed outside of any single document fetch."""

    pass


class ResolutionTimeoutError(ResolutionError):
    """Graph resolution exceeded its total time budget."""

    def __init__(
        self,
        message: str,
        timeout: float,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.timeout = timeout


class CacheError(BtknInfoError):
    """Cache operation failed."""

    pass
