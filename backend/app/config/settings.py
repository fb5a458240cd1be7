"""
Application Settings for the University Discovery backend

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

from functools import lru_cache
from typing import Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Supabase credentials are optional at load time so the scoring core and
    its tests run without a database; the client factory raises
    ConfigurationError when they are missing.
    """

    # Supabase Configuration
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None

    # Application Settings
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    # Matching / prediction limits
    match_default_top_n: int = 20
    predict_batch_max_universities: int = 20

    # University catalog cache (0 disables)
    catalog_cache_ttl_seconds: int = 300

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Reject limits that would make the API unusable."""
        if self.predict_batch_max_universities < 1:
            raise ValueError("PREDICT_BATCH_MAX_UNIVERSITIES must be at least 1")
        if self.catalog_cache_ttl_seconds < 0:
            raise ValueError("CATALOG_CACHE_TTL_SECONDS cannot be negative")

        # Strip trailing slash so table URLs are built consistently
        if self.supabase_url:
            self.supabase_url = self.supabase_url.rstrip("/")

        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def missing_supabase_keys(self) -> list[str]:
        """Names of the Supabase variables that are not set."""
        return [
            key for key, value in (
                ("SUPABASE_URL", self.supabase_url),
                ("SUPABASE_SERVICE_ROLE_KEY", self.supabase_service_role_key),
            )
            if not value
        ]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
