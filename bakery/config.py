"""Centralized configuration from environment variables.

Everything that varies between environments (local dev, tests, the shop
laptop) is read from environment variables here. Import from this module
instead of reading os.environ directly in service code.
"""
import os
from functools import lru_cache


class Settings:
    """Application settings loaded from environment variables."""

    # Database (a local SQLite file by default)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///data/bakery.db")

    # CORS
    CORS_ORIGINS: list[str] = os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://localhost:3000"
    ).split(",")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
