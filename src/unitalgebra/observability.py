"""Logging helpers for unit definitions and conversions."""

from __future__ import annotations

import logging

from .config import load_settings

logger = logging.getLogger("unitalgebra")


def configure_logging(level: str | None = None) -> None:
    """Apply ``level`` (or ``UNITALGEBRA_LOG_LEVEL``) to the package logger.

    Applications opt in to this; the library itself never touches handlers.
    """

    name = level or load_settings().log_level
    resolved = logging.getLevelName(name.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{name}'")
    logger.setLevel(resolved)


def log_event(message: str, **extra: object) -> None:
    """Log an event with a structured payload attached."""

    logger.info(message, extra={"payload": dict(extra)})


__all__ = ["configure_logging", "log_event", "logger"]
