"""
Bootstrap configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bootstrap settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = Field(default="mongodb://mongodb:27017")
    mongo_username: Optional[str] = Field(default=None)
    mongo_password: Optional[str] = Field(default=None)
    mongo_timeout_ms: int = Field(default=10_000, gt=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(default="text")
    log_path: Optional[str] = Field(default=None)
    log_backup_count: int = Field(default=7, ge=0)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def _lower_log_format(cls, value):
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
