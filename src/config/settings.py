"""
Application settings - pydantic-settings configuration.

This module defines client configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Remote EOSB API
    api_base_url: str = "https://uae-gratuity-calculator-backend.vercel.app"
    request_timeout_seconds: float = 15.0

    # Connectivity monitor (0 disables background polling)
    connectivity_poll_seconds: float = 5.0

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
