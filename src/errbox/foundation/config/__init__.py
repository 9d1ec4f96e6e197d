"""Configuration module: environment-based settings via pydantic-settings."""

from .settings import (
    ErrboxSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
    set_show_stack,
    set_trace_prefix,
    to_slash,
)

__all__ = [
    "ErrboxSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
    "set_show_stack",
    "set_trace_prefix",
    "to_slash",
]
