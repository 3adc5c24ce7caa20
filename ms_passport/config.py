"""
@file: ms_passport/config.py
@description: Package settings via Pydantic v2
@dependencies: pydantic, pydantic-settings
@created: 2025-10-02
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    native_module: str = Field(default="ms_passport._native", alias="PASSPORT_NATIVE_MODULE")
    log_level: str = Field(default="WARNING", alias="PASSPORT_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="PASSPORT_LOG_JSON")

    @field_validator("native_module")
    @classmethod
    def _module_name(cls, value: str) -> str:
        value = value.strip()
        if not value or any(not part.isidentifier() for part in value.split(".")):
            raise ValueError(f"invalid module name: {value!r}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _level(cls, value: str | None) -> str:
        level = (value or "WARNING").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(1)
def get_settings() -> Settings:
    return Settings()


def reset_settings_cache() -> None:
    """Drop cached settings, for tests that change the environment."""
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
