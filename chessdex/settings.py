"""Centralized configuration management for Chessdex."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from chessdex import __version__

# Load environment variables defined in a local .env file before instantiating the
# settings singleton so every consumer of :mod:`chessdex.settings` sees them.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_API_BASE_URL = "https://api.chess.com/pub"
DEFAULT_PROFILE_BASE_URL = "https://www.chess.com/member"
DEFAULT_STORAGE_PATH = Path.home() / ".chessdex" / "local_storage.json"
DEFAULT_USER_AGENT = f"chessdex/{__version__}"
DEFAULT_LOG_LEVEL = "WARNING"


def _normalize_base_url(url: str) -> str:
    """Return ``url`` stripped of whitespace and trailing slashes."""

    return url.strip().rstrip("/")


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Every field can be overridden through the environment (or a local ``.env``
    file) using the alias listed next to it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        alias="CHESSDEX_API_BASE_URL",
        description="Root of the public Chess.com API; stats live under /player/<name>/stats.",
    )
    profile_base_url: str = Field(
        default=DEFAULT_PROFILE_BASE_URL,
        alias="CHESSDEX_PROFILE_BASE_URL",
        description="Root of the member profile pages opened in the browser.",
    )
    storage_path: Path = Field(
        default=DEFAULT_STORAGE_PATH,
        alias="CHESSDEX_STORAGE_PATH",
        description="JSON file backing the local key-value store.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        alias="CHESSDEX_HTTP_TIMEOUT",
        description=(
            "Optional request timeout. When unset the httpx client default"
            " applies."
        ),
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        alias="CHESSDEX_USER_AGENT",
        description="User-Agent header sent with every API request.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )

    @field_validator("api_base_url", "profile_base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        return _normalize_base_url(value)

    @field_validator("storage_path")
    @classmethod
    def _expand_storage_path(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def stats_url_template(self) -> str:
        """Return the stats endpoint with a ``{username}`` placeholder."""

        return f"{self.api_base_url}/player/{{username}}/stats"

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.WARNING


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PROFILE_BASE_URL",
    "DEFAULT_STORAGE_PATH",
    "DEFAULT_USER_AGENT",
    "get_settings",
]
