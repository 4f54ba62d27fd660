"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with docker-compose
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from storefront.core.domain_types import (
    CART_STORAGE_KEY,
    RECENTLY_VIEWED_LIMIT,
    RECENTLY_VIEWED_STORAGE_KEY,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://storefront:storefront@db:5432/storefront"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Remote catalog REST API
    catalog_api_url: str = "http://localhost:8000"
    catalog_max_retries: int = 3
    catalog_timeout_seconds: float = 10.0
    catalog_base_delay_ms: int = 200
    catalog_max_delay_ms: int = 5_000

    @field_validator("catalog_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Persisted lists
    cart_storage_key: str = CART_STORAGE_KEY
    recently_viewed_storage_key: str = RECENTLY_VIEWED_STORAGE_KEY
    recently_viewed_limit: int = Field(RECENTLY_VIEWED_LIMIT, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
