from __future__ import annotations

import logging
from threading import RLock
from typing import TYPE_CHECKING

from ..logging import get_event_logger
from .errors import InvalidLoggerNameError
from .level import DEFAULT_LEVEL, Level
from .logger import Logger

if TYPE_CHECKING:
    from .settings import RegistrySettings

_LOGGER = logging.getLogger(__name__)
_EVENT_LOGGER = get_event_logger()


class LoggerRegistry:
    """Owns the logger tree and the switches that apply to all of it.

    Each name maps to exactly one ``Logger``; asking for a name creates the
    logger and any missing ancestors. The root logger is named ``""``.
    """

    def __init__(
        self,
        *,
        root_level: Level = DEFAULT_LEVEL,
        hierarchical: bool = False,
        record_stack_trace_at_level: Level = Level.OFF,
    ) -> None:
        _require_level(root_level, "root_level")
        _require_level(record_stack_trace_at_level, "record_stack_trace_at_level")
        self._lock = RLock()
        self._loggers: dict[str, Logger] = {}
        self._hierarchical = hierarchical
        self._stack_trace_level = record_stack_trace_at_level
        root = Logger(self, "", None)
        root._level = root_level
        self._loggers[""] = root
        self._root = root

    @classmethod
    def from_settings(cls, settings: RegistrySettings) -> LoggerRegistry:
        return cls(
            root_level=settings.root_level,
            hierarchical=settings.hierarchical,
            record_stack_trace_at_level=settings.record_stack_trace_at_level,
        )

    @property
    def root(self) -> Logger:
        return self._root

    @property
    def hierarchical_logging_enabled(self) -> bool:
        """When False, every logger shares the root's level and listeners."""
        return self._hierarchical

    @hierarchical_logging_enabled.setter
    def hierarchical_logging_enabled(self, enabled: bool) -> None:
        with self._lock:
            changed = self._hierarchical != enabled
            self._hierarchical = enabled
        if changed:
            _EVENT_LOGGER.debug(
                "registry.hierarchical_changed",
                "Hierarchical logging %s",
                "enabled" if enabled else "disabled",
                logger=_LOGGER,
            )

    @property
    def record_stack_trace_at_level(self) -> Level:
        """Records at or above this level capture a stack trace."""
        return self._stack_trace_level

    @record_stack_trace_at_level.setter
    def record_stack_trace_at_level(self, level: Level) -> None:
        _require_level(level, "record_stack_trace_at_level")
        with self._lock:
            self._stack_trace_level = level
        _EVENT_LOGGER.debug(
            "registry.stack_trace_level_changed",
            "Stack traces recorded at %s and above",
            level,
            logger=_LOGGER,
        )

    def get_logger(self, name: str) -> Logger:
        """Return the logger for ``name``, creating it and its ancestors."""
        logger = self._loggers.get(name)
        if logger is not None:
            return logger
        _validate_name(name)
        with self._lock:
            return self._get_or_create(name)

    def detached(self, name: str) -> Logger:
        """Build a logger outside the tree.

        Detached loggers have no parent and no children, keep their own
        level regardless of mode, and are never shared: each call returns a
        new instance.
        """
        return Logger(self, name, None, detached=True)

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._loggers))

    def __contains__(self, name: object) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)

    def _get_or_create(self, name: str) -> Logger:
        logger = self._loggers.get(name)
        if logger is not None:
            return logger
        dot = name.rfind(".")
        if dot == -1:
            parent = self._root
            simple_name = name
        else:
            parent = self._get_or_create(name[:dot])
            simple_name = name[dot + 1:]
        logger = Logger(self, simple_name, parent)
        self._loggers[name] = logger
        _EVENT_LOGGER.debug(
            "registry.logger_created",
            "Created logger %r",
            name,
            logger=_LOGGER,
        )
        return logger


def _require_level(value: object, what: str) -> None:
    if not isinstance(value, Level):
        raise TypeError(
            f"{what} must be a Level, got {type(value).__name__}"
        )


def _validate_name(name: str) -> None:
    if name.startswith("."):
        raise InvalidLoggerNameError(
            f"Logger name must not start with '.': {name!r}"
        )
    if name.endswith("."):
        raise InvalidLoggerNameError(
            f"Logger name must not end with '.': {name!r}"
        )
    if ".." in name:
        raise InvalidLoggerNameError(
            f"Logger name must not contain empty segments: {name!r}"
        )


_default_registry = LoggerRegistry()


def get_registry() -> LoggerRegistry:
    return _default_registry


def get_logger(name: str) -> Logger:
    return _default_registry.get_logger(name)


def detached_logger(name: str) -> Logger:
    return _default_registry.detached(name)


def configure_registry(settings: RegistrySettings) -> LoggerRegistry:
    """Apply settings to the default registry and return it."""
    registry = _default_registry
    registry.root.set_level(settings.root_level)
    registry.hierarchical_logging_enabled = settings.hierarchical
    registry.record_stack_trace_at_level = settings.record_stack_trace_at_level
    return registry
