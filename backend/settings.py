"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.hevy_base_url)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.core.constants import DEFAULT_DETAIL_CONCURRENCY


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # External Services - Hevy
    # -------------------------------------------------------------------------
    hevy_api_key: Optional[str] = Field(
        default=None,
        description="Hevy API key for the account being analyzed",
    )
    hevy_base_url: str = Field(
        default="https://api.hevyapp.com",
        description="Base URL of the Hevy public API",
    )
    hevy_request_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Per-request timeout for Hevy API calls (seconds)",
    )
    hevy_retry_attempts: int = Field(
        default=3,
        ge=1,
        description="Maximum attempts for transient Hevy API failures",
    )

    # -------------------------------------------------------------------------
    # Analytics
    # -------------------------------------------------------------------------
    workout_detail_concurrency: int = Field(
        default=DEFAULT_DETAIL_CONCURRENCY,
        ge=1,
        description="Maximum concurrent workout detail fetches per summary",
    )
    sort_progress_defensively: bool = Field(
        default=False,
        description="Re-sort exercise progress history by date instead of trusting remote order",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated list of additional CORS origins",
    )

    @property
    def cors_allowed_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def hevy_configured(self) -> bool:
        """Check if a Hevy API key is available."""
        return bool(self.hevy_api_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
