"""
Personnummer configuration management using pydantic-settings.

Only the command-line tool reads these settings; the parser itself is a
pure function of its arguments.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from PERSONNUMMER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PERSONNUMMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    output_length: int = Field(
        default=10,
        description="Default rendering length for formatted output: 10 or 12",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("output_length")
    @classmethod
    def validate_output_length(cls, v: int) -> int:
        if v not in (10, 12):
            raise ValueError("OUTPUT_LENGTH must be 10 or 12")
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


# Global settings instance
settings = Settings()
