from __future__ import annotations

import itertools
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from types import TracebackType

from ..runtime.context import LogContext
from .level import Level

StackTrace = traceback.StackSummary | TracebackType

_SEQUENCE = itertools.count()
_SEQUENCE_LOCK = Lock()


def next_sequence_number() -> int:
    """Return the next process-wide record sequence number."""
    with _SEQUENCE_LOCK:
        return next(_SEQUENCE)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class LogRecord:
    """Immutable snapshot of one logging event."""

    level: Level
    message: str
    logger_name: str
    context: LogContext
    payload: object | None = None
    error: object | None = None
    stack_trace: StackTrace | None = None
    time: datetime = field(default_factory=_utcnow)
    sequence_number: int = field(default_factory=next_sequence_number)

    def __str__(self) -> str:
        return f"[{self.level.name}] {self.logger_name}: {self.message}"
