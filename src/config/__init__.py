"""Application settings loaded from environment variables."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings with env var support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"

    # Scoring
    scoring_config_path: Path | None = Field(
        default=None,
        description="YAML file overriding criterion weights and banding thresholds. "
        "Uses the bundled defaults when unset.",
    )

    # Text display
    bar_width: int = Field(
        default=30,
        ge=10,
        le=120,
        description="Number of cells in the rendered strength bar.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        The singleton Settings loaded from environment / .env file.
        Cached after the first call via ``lru_cache``.
    """
    return Settings()
