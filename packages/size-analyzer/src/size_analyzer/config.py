from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from size_analyzer.components.queries import (
    DEFAULT_CAPACITY,
    DEFAULT_REQUIRED_FREE,
    DEFAULT_THRESHOLD,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AnalyzerSettings(BaseSettings):
    """Analyzer settings loaded from ``SIZE_ANALYZER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIZE_ANALYZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Queries
    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=0)
    capacity: int = Field(default=DEFAULT_CAPACITY, ge=0)
    required_free: int = Field(default=DEFAULT_REQUIRED_FREE, ge=0)

    # Diagnostics
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


settings = AnalyzerSettings()
