"""Core configuration.

- Centralizes environment variables (pydantic-settings) away from the CLI.
- Gives the SDK adapter and the CLI one consistent settings contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "paramctl"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "paramctl"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "paramctl"
    return Path.home() / ".config" / "paramctl"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Precedence, highest first: init kwargs (CLI flags), `PARAMCTL_*` environment
    variables, the project `.env`, the per-user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARAMCTL_",
        extra="ignore",
        case_sensitive=False,
        # Later files win: the project `.env` overrides the user's global config.
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://localhost:8080",
        min_length=1,
        description="Base URL of the API the SDK client talks to.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="paramctl/0.1",
        min_length=1,
        description="User-Agent header sent with every request.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level for the CLI.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
