"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
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

    # Token configuration
    jwt_secret: str = "rahasia_negara_api_change_me_in_production"
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 3600  # Tokens expire one hour after login

    # Security settings
    bcrypt_cost: int = 10  # bcrypt work factor

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
