from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DIAGNOSTIC_LOGGER_NAME = "treelog"


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Settings for treelog's own diagnostic output."""

    level: int
    console_enabled: bool
    logger_name: str = DIAGNOSTIC_LOGGER_NAME

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        level_name = _get_env_str("TREELOG_DIAG_LEVEL", "WARNING").upper()
        return cls(
            level=_parse_level(level_name),
            console_enabled=_get_env_bool("TREELOG_DIAG_CONSOLE", True),
        )


def load_logging_settings() -> LoggingSettings:
    return LoggingSettings.from_env()


def _parse_level(level_name: str) -> int:
    level = logging.getLevelName(level_name)
    if isinstance(level, int):
        return level
    raise ValueError(f"Invalid TREELOG_DIAG_LEVEL: {level_name!r}")


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid bool env var {name}={value!r}")
