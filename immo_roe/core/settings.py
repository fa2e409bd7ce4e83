"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_dir: Optional[str] = Field(default=None, description="Directory for rotating log file")

    # Scenario runs
    scenario_workers: int = Field(default=3, ge=1, le=32, description="Threads for scenario runs")

    model_config = {
        "env_prefix": "IMMOROE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    try:
        return AppSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid IMMOROE_* environment: {e}") from e
