"""FastAPI web API for btkninfo."""

from btkninfo.api.app import create_app

__all__ = ["create_app"]
