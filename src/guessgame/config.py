"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./guessgame.db",
        description="Async SQLAlchemy connection URL",
    )
    database_url_test: str = Field(
        default="sqlite+aiosqlite://",
        description="Test database URL (in-memory SQLite)",
    )
    database_echo: bool = Field(default=False, description="Log emitted SQL statements")

    # Content provider (used by the terminal client)
    content_url: str = Field(
        default="http://localhost:8000/api/game",
        description="Endpoint serving visible categories with questions and hints",
    )
    http_timeout: float = Field(default=10.0, description="HTTP client timeout in seconds")

    # Play sessions
    play_session_limit: int = Field(
        default=1000,
        ge=1,
        description="Maximum number of in-memory play sessions before the oldest is evicted",
    )

    # App
    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool | None = Field(default=None, description="Debug mode (defaults based on environment)")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins",
    )

    # Sentry
    sentry_dsn: str = Field(default="", description="Sentry DSN for error tracking")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def debug_enabled(self) -> bool:
        """Get debug mode, defaulting based on environment if not explicitly set."""
        if self.debug is not None:
            return self.debug
        return self.is_development


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
