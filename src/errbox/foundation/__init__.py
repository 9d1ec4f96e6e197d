"""Foundation layer: process-wide configuration shared by errors and observability."""

from .config import (
    ErrboxSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
    set_show_stack,
    set_trace_prefix,
)

__all__ = [
    "ErrboxSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
    "set_show_stack",
    "set_trace_prefix",
]
