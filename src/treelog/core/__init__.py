from .channel import BroadcastChannel, Stream, Subscription
from .errors import (
    InvalidLoggerNameError,
    ReentrantConfigurationError,
    TreeLogError,
    UnsupportedMutationError,
)
from .level import DEFAULT_LEVEL, Level
from .logger import Logger, MessageProducer
from .record import LogRecord, StackTrace, next_sequence_number
from .registry import (
    LoggerRegistry,
    configure_registry,
    detached_logger,
    get_logger,
    get_registry,
)
from .settings import RegistrySettings, load_registry_settings

__all__ = [
    "BroadcastChannel",
    "DEFAULT_LEVEL",
    "InvalidLoggerNameError",
    "Level",
    "LogRecord",
    "Logger",
    "LoggerRegistry",
    "MessageProducer",
    "ReentrantConfigurationError",
    "RegistrySettings",
    "StackTrace",
    "Stream",
    "Subscription",
    "TreeLogError",
    "UnsupportedMutationError",
    "configure_registry",
    "detached_logger",
    "get_logger",
    "get_registry",
    "load_registry_settings",
    "next_sequence_number",
]
