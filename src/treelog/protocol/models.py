from __future__ import annotations

import traceback
from datetime import datetime
from types import TracebackType
from typing import Optional

from pydantic import BaseModel as _PydanticBaseModel
from pydantic import ConfigDict, Field

from ..core.record import LogRecord


class LogContextPayload(_PydanticBaseModel):
    name: str
    contextId: str

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class LogRecordPayload(_PydanticBaseModel):
    """JSON-ready view of a ``LogRecord`` for sinks."""

    level: str
    levelValue: int
    message: str
    loggerName: str
    time: datetime
    sequenceNumber: int = Field(ge=0)
    context: LogContextPayload
    payload: Optional[str] = None
    error: Optional[str] = None
    stackTrace: Optional[str] = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


def record_to_payload(record: LogRecord) -> LogRecordPayload:
    return LogRecordPayload(
        level=record.level.name,
        levelValue=record.level.value,
        message=record.message,
        loggerName=record.logger_name,
        time=record.time,
        sequenceNumber=record.sequence_number,
        context=LogContextPayload(
            name=record.context.name,
            contextId=record.context.context_id,
        ),
        payload=None if record.payload is None else repr(record.payload),
        error=None if record.error is None else str(record.error),
        stackTrace=_format_stack(record.stack_trace),
    )


def _format_stack(
    stack: traceback.StackSummary | TracebackType | None,
) -> str | None:
    if stack is None:
        return None
    if isinstance(stack, TracebackType):
        return "".join(traceback.format_tb(stack))
    return "".join(stack.format())
