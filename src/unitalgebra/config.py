"""Environment driven settings for the unit algebra."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    strict_definitions: bool = False
    log_level: str = "WARNING"


def _flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in _TRUTHY


def load_settings() -> Settings:
    """Read settings from the environment.

    Values are read on every call so that tests and long-running applications
    can toggle them without reloading the module.
    """

    return Settings(
        strict_definitions=_flag("UNITALGEBRA_STRICT_DEFINITIONS"),
        log_level=(os.getenv("UNITALGEBRA_LOG_LEVEL") or "WARNING").strip().upper(),
    )


__all__ = ["Settings", "load_settings"]
