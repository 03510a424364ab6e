"""Registry configuration loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .level import DEFAULT_LEVEL, Level


@dataclass(frozen=True, slots=True)
class RegistrySettings:
    """Initial switches for a ``LoggerRegistry``."""

    hierarchical: bool = False
    root_level: Level = DEFAULT_LEVEL
    record_stack_trace_at_level: Level = Level.OFF

    @classmethod
    def from_env(cls) -> "RegistrySettings":
        return cls(
            hierarchical=_get_env_bool("TREELOG_HIERARCHICAL", False),
            root_level=_get_env_level("TREELOG_ROOT_LEVEL", DEFAULT_LEVEL),
            record_stack_trace_at_level=_get_env_level(
                "TREELOG_STACK_TRACE_LEVEL", Level.OFF
            ),
        )


def load_registry_settings(env_file: str | None = None) -> RegistrySettings:
    """Read settings from the environment.

    When ``env_file`` is given it is loaded first; variables already present
    in the environment win.
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    return RegistrySettings.from_env()


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


def _get_env_level(name: str, default: Level) -> Level:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return Level.parse(value)
    except ValueError as exc:
        raise ValueError(f"Invalid level env var {name}={value!r}") from exc
