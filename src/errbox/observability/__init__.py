"""Structured logging of errors: console for humans, JSON lines for machines."""

from .logger import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    configure_logging,
    error_events,
    get_logger,
    log_context,
    log_error,
)

__all__ = [
    "BoundLogger",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "configure_logging",
    "error_events",
    "get_logger",
    "log_context",
    "log_error",
]
