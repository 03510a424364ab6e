from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LogContext:
    """Opaque tag identifying the execution context a record came from."""

    name: str
    context_id: str = field(default_factory=lambda: uuid.uuid4().hex)


ROOT_CONTEXT = LogContext(name="root", context_id="root")

_CURRENT_LOG_CONTEXT: ContextVar[LogContext] = ContextVar(
    "treelog_context",
    default=ROOT_CONTEXT,
)


def current_log_context() -> LogContext:
    return _CURRENT_LOG_CONTEXT.get()


@contextmanager
def log_context(name: str | None = None) -> Iterator[LogContext]:
    """Run the block under a fresh context tag.

    Records created inside the block (on this thread or task) carry the
    yielded tag; the previous tag is restored on exit.
    """
    context = LogContext(name=name or "context")
    token = _CURRENT_LOG_CONTEXT.set(context)
    try:
        yield context
    finally:
        _CURRENT_LOG_CONTEXT.reset(token)
