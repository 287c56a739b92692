"""Centralized configuration for little-search-engine using Pydantic Settings."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``LSE_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Input files
    docs_file: Path | None = Field(default=None, description="File listing document names, whitespace separated")
    noise_words_file: Path | None = Field(
        default=None, description="File of noise words; the built-in stop list is used when unset"
    )
    file_encoding: str = Field(default="utf-8", description="Encoding used to read every input file")

    # Query settings
    result_limit: int = Field(default=5, ge=1, description="Maximum documents returned by a two-keyword query")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_log_level(self) -> "Settings":
        if self.log_level.lower() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}")
        return self
