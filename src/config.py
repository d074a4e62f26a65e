"""
Configuration settings for Player Run Queries.

Uses Pydantic Settings to load environment variables for logging and input
defaults (record count and input format).
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    # stdout carries the answers; logs go to stderr and stay quiet by default.
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Input defaults
    record_count: int = Field(4, ge=0, alias="PLAYER_RECORD_COUNT")
    input_format: str = Field("lines", alias="PLAYER_INPUT_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
