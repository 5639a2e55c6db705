"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKMARK_SHELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Bookmark Shell"
    log_level: str = "INFO"

    # Worker threads used to run commands off the caller's thread
    max_workers: int = Field(default=4, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str = "INFO"):
    """Configure root logging for the application."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
