"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from btkninfo import __version__
from btkninfo.api.routes import health_router, lists_router, tokens_router
from btkninfo.client import TokenInfoClient
from btkninfo.config import BtknInfoSettings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(level_name: str) -> None:
    """Set the root log level, reusing uvicorn's handlers when present."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    uvicorn_error = logging.getLogger("uvicorn.error")
    root = logging.getLogger()
    if uvicorn_error.handlers:
        root.handlers = uvicorn_error.handlers
        root.setLevel(level)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Builds the process-wide token client (caches, fetchers, registry) on
    startup and closes it on shutdown.
    """
    settings: BtknInfoSettings = app.state.settings

    logger.info("Initializing token client...")
    app.state.token_client = TokenInfoClient(settings)
    await app.state.token_client.open()
    logger.info(
        f"Application startup complete ({len(app.state.token_client.registry)} root lists, "
        f"{app.state.token_client.cache_backend_name} cache)"
    )

    yield

    logger.info("Shutting down application...")
    await app.state.token_client.close()
    logger.info("Application shutdown complete")


def create_app(
    settings: BtknInfoSettings | None = None,
    *,
    title: str = "btkninfo API",
    description: str = "Token metadata and logo lookup across token lists",
    version: str = __version__,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If not provided, loaded from environment.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    # Register routes
    app.include_router(health_router)
    app.include_router(lists_router)
    app.include_router(tokens_router)

    return app


# For uvicorn direct execution: uvicorn btkninfo.api.app:app
app = create_app()
