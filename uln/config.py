"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings only affect logging; validation rules are never configurable
    - get_settings() is cached (lru_cache) — single instance per process
    - Nothing is read at import time: settings load on first get_settings() call

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - ULN_ env prefix: embedding applications keep their own LOG_LEVEL untouched
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from ULN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ULN_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any case; reject names the logging module does not know."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
