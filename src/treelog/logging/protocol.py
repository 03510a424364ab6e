from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol


class LoggingConfiguratorProtocol(Protocol):
    """Protocol for diagnostic logging configurators."""

    def configure(self) -> None:
        """Apply logging configuration."""


class LoggingEventLoggerProtocol(Protocol):
    """Protocol for emitting structured diagnostic events."""

    def log(
        self,
        level: int,
        event: str,
        message: str,
        *args: object,
        logger: logging.Logger | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        ...

    def debug(
        self,
        event: str,
        message: str,
        *args: object,
        logger: logging.Logger | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        ...

    def info(
        self,
        event: str,
        message: str,
        *args: object,
        logger: logging.Logger | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        ...
