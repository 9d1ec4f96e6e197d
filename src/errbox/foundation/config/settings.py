"""Process-wide configuration using pydantic-settings.

Controls how annotated errors are rendered: whether call-site lines are shown
and which leading part of file paths is trimmed from them. Values load from
environment variables (``ERRBOX_`` prefix) and may be overridden in code.

The settings object is shared by every renderer and is NOT synchronized.
Configure it once at startup, before any error is rendered; changing it later
from several threads is a caller error.

Example:
    >>> from errbox.foundation.config import get_settings, set_trace_prefix
    >>> set_trace_prefix("myproject/")
    >>> get_settings().show_stack
    True

    # Or with environment variables:
    # ERRBOX_SHOW_STACK=false
    # ERRBOX_TRACE_PREFIX=myproject/
    # ERRBOX_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("errbox.config")


def to_slash(path: str) -> str:
    """Normalize path separators to forward slashes."""
    return path.replace("\\", "/")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ERRBOX_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ErrboxSettings(BaseSettings):
    """Root settings for errbox rendering.

    Example environment variables:
        ERRBOX_TRACE_PREFIX=recombobulator/
        ERRBOX_SHOW_STACK=false
        ERRBOX_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRBOX_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_assignment=True,
    )

    trace_prefix: str = Field(default="", description="Dropped (with everything before it) from traced file names")
    show_stack: bool = Field(default=True, description="Render the '@ file:line (function)' lines")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("trace_prefix")
    @classmethod
    def _slash_prefix(cls, v: str) -> str:
        return to_slash(v)


@lru_cache(maxsize=1)
def get_settings() -> ErrboxSettings:
    """Get the global settings instance (cached)."""
    return ErrboxSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()


def set_trace_prefix(prefix: str) -> None:
    """Trim ``prefix`` and everything before it from file names in rendered traces.

    Useful to hide the checkout location: ``set_trace_prefix("recombobulator/")``
    turns ``/home/me/src/recombobulator/api/db.py`` into ``api/db.py``.
    Call once at startup.
    """
    get_settings().trace_prefix = prefix
    logger.debug("trace prefix set to %r", get_settings().trace_prefix)


def set_show_stack(show: bool) -> None:
    """Toggle rendering of call-site lines. Call once at startup."""
    get_settings().show_stack = show
    logger.debug("show_stack set to %s", show)
