"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All deployment-specific values come from environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process
    - The API version comes from installed package metadata, never a literal

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for everything: a local SQLite file works out-of-the-box
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./fincalc.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create missing tables on startup; disable when Alembic owns the schema
    database_create_tables: bool = True

    # Per-call storage timeout; None disables it
    storage_timeout_seconds: float | None = 5.0

    # Longest amortization or savings schedule an endpoint will build
    max_schedule_months: int = Field(default=1200, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_app_version() -> str:
    """Installed distribution version; source checkouts that were never installed report 0+unknown."""
    try:
        return version("fincalc")
    except PackageNotFoundError:
        return "0+unknown"
