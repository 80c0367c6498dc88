"""Application configuration.

All tunables come from `TYPED_BASICS_*` environment variables (or a local
`.env`) through pydantic-settings, so the services and the CLI read one
validated contract.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_log_level(value: str) -> str:
    """Upper-case a level name, rejecting anything `logging` does not define."""

    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
    return level


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TYPED_BASICS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    square_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Delay applied by square_async before resolving (seconds).",
    )
    min_rating: float = Field(
        default=4.0,
        ge=0,
        description="Inclusive rating threshold used by the filter-ratings command.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Process-wide logging level.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return normalize_log_level(value)
