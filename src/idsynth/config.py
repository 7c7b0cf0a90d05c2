"""
idsynth configuration management using pydantic-settings.

Settings are read from IDSYNTH_* environment variables or a .env file.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IDSYNTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Invalid number generation
    max_invalid_attempts: int = Field(
        default=10_000,
        gt=0,
        description="Candidates sampled before invalid generation gives up",
    )

    # Defaults for requests that do not specify an age range
    default_min_age: int = Field(
        default=0, ge=0, le=150, description="Default minimum age in years"
    )
    default_max_age: int = Field(
        default=100, ge=0, le=150, description="Default maximum age in years"
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the default random source (None = system entropy)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_age_defaults(self) -> "Settings":
        """Ensure the default age range is not empty."""
        if self.default_min_age > self.default_max_age:
            raise ValueError("DEFAULT_MIN_AGE must not exceed DEFAULT_MAX_AGE")
        return self


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level),
        format=LOG_FORMAT,
    )


# Global settings instance
settings = Settings()
