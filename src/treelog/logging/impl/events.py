from __future__ import annotations

import logging
from collections.abc import Mapping

from ..protocol import LoggingEventLoggerProtocol
from ..settings import DIAGNOSTIC_LOGGER_NAME


class StandardLoggingEventLogger(LoggingEventLoggerProtocol):
    """Forwards named diagnostic events to stdlib logging.

    The event name is attached as the ``event`` extra so JSON output can be
    filtered on it.
    """

    def __init__(self, default_logger: logging.Logger | None = None) -> None:
        self._default = default_logger or logging.getLogger(
            DIAGNOSTIC_LOGGER_NAME
        )

    def log(
        self,
        level: int,
        event: str,
        message: str,
        *args: object,
        logger: logging.Logger | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        target = logger or self._default
        if not target.isEnabledFor(level):
            return
        fields: dict[str, object] = {"event": event}
        if extra is not None:
            fields.update(extra)
        target.log(level, message, *args, extra=fields, stacklevel=3)

    def debug(
        self,
        event: str,
        message: str,
        *args: object,
        logger: logging.Logger | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        self.log(
            logging.DEBUG, event, message, *args, logger=logger, extra=extra
        )

    def info(
        self,
        event: str,
        message: str,
        *args: object,
        logger: logging.Logger | None = None,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        self.log(
            logging.INFO, event, message, *args, logger=logger, extra=extra
        )
