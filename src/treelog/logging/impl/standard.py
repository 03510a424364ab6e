from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from ..protocol import LoggingConfiguratorProtocol
from ..settings import LoggingSettings

_BUILTIN_LOG_RECORD_ATTRS = frozenset(
    logging.LogRecord(
        "", logging.NOTSET, "", 0, "", (), None
    ).__dict__
) | {"message", "asctime", "taskName"}

_CONFIGURED_MARKER = "_treelog_logging_configured"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "thread": record.threadName,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _BUILTIN_LOG_RECORD_ATTRS
        }
        if extras:
            payload.update(extras)
        return json.dumps(payload, ensure_ascii=True, default=str)


class StandardLoggingConfigurator(LoggingConfiguratorProtocol):
    """Attaches a JSON console handler to the diagnostic logger once."""

    def __init__(self, settings: LoggingSettings) -> None:
        self._settings = settings

    def configure(self) -> None:
        logger = logging.getLogger(self._settings.logger_name)
        if getattr(logger, _CONFIGURED_MARKER, False):
            return
        logger.setLevel(self._settings.level)
        if self._settings.console_enabled:
            console = logging.StreamHandler()
            console.setLevel(self._settings.level)
            console.setFormatter(JsonFormatter())
            logger.addHandler(console)
        setattr(logger, _CONFIGURED_MARKER, True)
