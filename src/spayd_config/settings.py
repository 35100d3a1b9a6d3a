"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. SPAYD_ENV_FILE environment variable (path to .env file)
3. .env in the current working directory

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. SPAYD_ENV_FILE env var
    2. .env (current working directory)
    """
    env_file_path = os.environ.get("SPAYD_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if path.exists():
            return path

    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env

    return None


class Settings(BaseSettings):
    """Configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority, SPAYD_ prefix)
    2. .env file
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SPAYD_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # QR code rendering
    qr_size: int = 300

    # Serialization defaults
    include_checksum: bool = False
    normalize_strings: bool = True

    # Logging
    log_level: str = "INFO"

    @field_validator("qr_size")
    @classmethod
    def _validate_qr_size(cls, v: int) -> int:
        if v <= 0:
            msg = "QR code size must be a positive number of pixels"
            raise ValueError(msg)
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
