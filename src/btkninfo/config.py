"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict

from btkninfo.core.types import TieBreak


class BtknInfoSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BTKNINFO_",
    )

    # Registry of root token lists
    registry_url: str = Field(
        default="https://raw.githubusercontent.com/flashnetxyz/btkn-info/refs/heads/master/lib/token-lists.json",
        description="URL of the JSON registry mapping token list URLs to metadata",
    )
    registry_path: Path | None = Field(
        default=None,
        description="Local registry file (takes precedence over registry_url)",
    )

    # Caching
    redis_url: RedisDsn | None = Field(
        default=None,
        description="Redis connection URL (optional, in-process cache when unset)",
    )
    document_cache_ttl: int = Field(
        default=3600,
        gt=0,
        description="Freshness window for token list documents in seconds",
    )
    resource_cache_ttl: int = Field(
        default=86400,
        gt=0,
        description="Freshness window for token images in seconds",
    )

    # Outbound fetching
    fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for each outbound document or image request",
    )
    max_concurrency: int = Field(
        default=16,
        ge=1,
        description="Maximum concurrent outbound requests per fetcher",
    )

    # Graph traversal
    resolve_timeout: float | None = Field(
        default=30.0,
        description="Total time budget for one lookup (None disables it)",
    )
    tie_break: TieBreak = Field(
        default=TieBreak.FIRST_COMPLETED,
        description="How sibling lists that both match are ordered",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> BtknInfoSettings:
    """Get cached settings instance."""
    return BtknInfoSettings()
