"""Public API entry point for treelog.

Use this module for supported imports. Subpackages are internal.
"""

from .core import (
    DEFAULT_LEVEL,
    BroadcastChannel,
    InvalidLoggerNameError,
    Level,
    LogRecord,
    Logger,
    LoggerRegistry,
    MessageProducer,
    ReentrantConfigurationError,
    RegistrySettings,
    Stream,
    Subscription,
    TreeLogError,
    UnsupportedMutationError,
    configure_registry,
    detached_logger,
    get_logger,
    get_registry,
    load_registry_settings,
)
from .logging import LoggingSettings, configure_logging
from .protocol import LogRecordPayload, record_to_payload
from .runtime import ROOT_CONTEXT, LogContext, current_log_context, log_context

__all__ = [
    "DEFAULT_LEVEL",
    "BroadcastChannel",
    "InvalidLoggerNameError",
    "Level",
    "LogContext",
    "LogRecord",
    "LogRecordPayload",
    "Logger",
    "LoggerRegistry",
    "LoggingSettings",
    "MessageProducer",
    "ROOT_CONTEXT",
    "ReentrantConfigurationError",
    "RegistrySettings",
    "Stream",
    "Subscription",
    "TreeLogError",
    "UnsupportedMutationError",
    "configure_logging",
    "configure_registry",
    "current_log_context",
    "detached_logger",
    "get_logger",
    "get_registry",
    "load_registry_settings",
    "log_context",
    "record_to_payload",
]
