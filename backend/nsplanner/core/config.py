"""Application configuration settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "NorwegianSingles"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Plan defaults
    default_locale: Literal["es", "en"] = "es"
    default_unit: Literal["km", "mile"] = "km"
    default_training_days: int = 5

    # Storage
    storage_url: str = "sqlite:///./data/nsplanner.db"
    storage_key: str = "ns-user-data"
    locale_key: str = "ns-locale"


_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Warns if the plan snapshot would live in an in-memory database.
    """
    settings = Settings()

    if settings.storage_url in _IN_MEMORY_URLS and not settings.debug:
        logger.warning(
            "storage_url points to in-memory SQLite; saved plans are lost on exit. "
            "Set STORAGE_URL to a file database to keep them."
        )

    return settings
