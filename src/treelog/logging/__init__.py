"""Diagnostic logging for treelog itself, built on stdlib ``logging``."""

from .events import get_event_logger
from .factory import (
    build_event_logger,
    build_logging_configurator,
    configure_logging,
)
from .impl.standard import JsonFormatter
from .protocol import LoggingConfiguratorProtocol, LoggingEventLoggerProtocol
from .settings import (
    DIAGNOSTIC_LOGGER_NAME,
    LoggingSettings,
    load_logging_settings,
)

__all__ = [
    "DIAGNOSTIC_LOGGER_NAME",
    "JsonFormatter",
    "LoggingConfiguratorProtocol",
    "LoggingEventLoggerProtocol",
    "LoggingSettings",
    "build_event_logger",
    "build_logging_configurator",
    "configure_logging",
    "get_event_logger",
    "load_logging_settings",
]
