"""API route modules."""

from btkninfo.api.routes.health import router as health_router
from btkninfo.api.routes.lists import router as lists_router
from btkninfo.api.routes.tokens import router as tokens_router

__all__ = [
    "health_router",
    "lists_router",
    "tokens_router",
]
