from __future__ import annotations

import logging
import traceback
from collections.abc import Callable, Mapping
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..logging import get_event_logger
from ..runtime.context import LogContext, current_log_context
from .channel import BroadcastChannel, DoneCallback, Handler, Stream, Subscription
from .errors import ReentrantConfigurationError, UnsupportedMutationError
from .level import DEFAULT_LEVEL, Level
from .record import LogRecord, StackTrace

if TYPE_CHECKING:
    from .registry import LoggerRegistry

_LOGGER = logging.getLogger(__name__)
_EVENT_LOGGER = get_event_logger()

MessageProducer = Callable[[], object]


class Logger:
    """A named node in the logger tree.

    Obtain registered loggers through ``LoggerRegistry.get_logger`` and
    detached ones through ``LoggerRegistry.detached``; do not construct this
    class directly.

    Note: while hierarchical logging is disabled, ``on_record`` on a
    non-root logger returns the root logger's stream. A subscription made
    that way stays attached to the root after hierarchical logging is
    enabled; resubscribe to receive the logger's own records.
    """

    def __init__(
        self,
        registry: LoggerRegistry,
        name: str,
        parent: Logger | None,
        *,
        detached: bool = False,
    ) -> None:
        self._registry = registry
        self._lock = RLock() if detached else registry._lock
        self._name = name
        self._parent = parent
        self._detached = detached
        self._children: dict[str, Logger] = {}
        self._children_view: Mapping[str, Logger] = MappingProxyType(
            self._children
        )
        self._level: Level | None = DEFAULT_LEVEL if parent is None else None
        self._record_channel: BroadcastChannel[LogRecord] | None = None
        self._level_channel: BroadcastChannel[Level | None] | None = None
        if parent is None or parent._name == "":
            self._full_name = name
        else:
            self._full_name = f"{parent._full_name}.{name}"
        if parent is not None:
            parent._children[name] = self

    def __repr__(self) -> str:
        kind = "detached " if self._detached else ""
        return f"<{kind}Logger {self._full_name!r}>"

    @property
    def name(self) -> str:
        """Segment after the last dot."""
        return self._name

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def parent(self) -> Logger | None:
        return self._parent

    @property
    def children(self) -> Mapping[str, Logger]:
        """Read-only view of direct children keyed by simple name."""
        return self._children_view

    @property
    def is_detached(self) -> bool:
        return self._detached

    @property
    def is_root(self) -> bool:
        return self._parent is None and not self._detached

    @property
    def own_level(self) -> Level | None:
        """Level set on this node, or None when it inherits."""
        return self._level

    @property
    def level(self) -> Level:
        """Effective level after applying the mode and inheritance rules."""
        if self._parent is None:
            return DEFAULT_LEVEL if self._level is None else self._level
        if not self._registry.hierarchical_logging_enabled:
            return self._registry.root.level
        node = self
        while node._level is None and node._parent is not None:
            node = node._parent
        return DEFAULT_LEVEL if node._level is None else node._level

    @level.setter
    def level(self, value: Level | None) -> None:
        self.set_level(value)

    def set_level(self, value: Level | None) -> None:
        """Override this node's level; ``None`` makes it inherit.

        Raises:
            UnsupportedMutationError: clearing the level of the root or a
                detached logger, or changing a non-root logger's level while
                hierarchical logging is disabled.
            ReentrantConfigurationError: called from inside delivery on
                this logger's own channels.
            TypeError: ``value`` is neither a ``Level`` nor None.
        """
        if value is not None and not isinstance(value, Level):
            raise TypeError(
                f"Expected a Level or None, got {type(value).__name__}"
            )
        with self._lock:
            if self._parent is None:
                if value is None:
                    what = "a detached logger" if self._detached else "the root logger"
                    raise UnsupportedMutationError(
                        f"Cannot clear the level of {what}."
                    )
            elif not self._registry.hierarchical_logging_enabled:
                raise UnsupportedMutationError(
                    'Set "hierarchical_logging_enabled" to True to change '
                    "the level on a non-root logger."
                )
            self._ensure_not_firing("change the level of")
            if self._level == value:
                return
            previous = self._level
            self._level = value
            channel = self._level_channel
        _EVENT_LOGGER.debug(
            "logger.level_changed",
            "Level of logger %r changed from %s to %s",
            self._full_name,
            previous,
            value,
            logger=_LOGGER,
        )
        if channel is not None:
            channel.publish(value)

    def is_loggable(self, value: Level) -> bool:
        return value >= self.level

    def log(
        self,
        level: Level,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        """Emit a record at ``level`` if this logger lets it through.

        A callable ``message`` is only invoked once the level check passes.
        Non-string values are kept on the record as ``payload`` and rendered
        with ``str``.
        """
        if not self.is_loggable(level):
            return
        if callable(message):
            message = message()

        payload: object | None = None
        if isinstance(message, str):
            text = message
        else:
            text = str(message)
            payload = message

        if (
            stack_trace is None
            and level >= self._registry.record_stack_trace_at_level
        ):
            stack_trace = _capture_stack()
            if error is None:
                error = f"autogenerated stack trace for {level} {text}"
        if context is None:
            context = current_log_context()

        record = LogRecord(
            level=level,
            message=text,
            logger_name=self._full_name,
            context=context,
            payload=payload,
            error=error,
            stack_trace=stack_trace,
        )

        if self._parent is None:
            self._publish(record)
        elif not self._registry.hierarchical_logging_enabled:
            self._registry.root._publish(record)
        else:
            node: Logger | None = self
            while node is not None:
                node._publish(record)
                node = node._parent

    def finest(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.FINEST, message, error, stack_trace, context)

    def finer(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.FINER, message, error, stack_trace, context)

    def fine(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.FINE, message, error, stack_trace, context)

    def config(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.CONFIG, message, error, stack_trace, context)

    def info(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.INFO, message, error, stack_trace, context)

    def warning(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.WARNING, message, error, stack_trace, context)

    def severe(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.SEVERE, message, error, stack_trace, context)

    def shout(
        self,
        message: object | MessageProducer,
        error: object | None = None,
        stack_trace: StackTrace | None = None,
        context: LogContext | None = None,
    ) -> None:
        self.log(Level.SHOUT, message, error, stack_trace, context)

    @property
    def on_record(self) -> Stream[LogRecord]:
        """Stream of records published to this logger."""
        target = self._record_target()
        with target._lock:
            if target._record_channel is None:
                target._record_channel = BroadcastChannel()
            return target._record_channel.stream

    def subscribe(
        self,
        handler: Handler[LogRecord],
        *,
        on_done: DoneCallback | None = None,
    ) -> Subscription[LogRecord]:
        return self.on_record.listen(handler, on_done=on_done)

    def clear_listeners(self) -> None:
        """Close the record channel; later subscribers get a fresh one."""
        target = self._record_target()
        with target._lock:
            channel = target._record_channel
            if channel is None:
                return
            if channel.is_firing:
                raise ReentrantConfigurationError(
                    f"Cannot clear listeners of {target!r} while it is "
                    "delivering a record."
                )
            target._record_channel = None
        channel.close()

    @property
    def on_level_changed(self) -> Stream[Level | None]:
        """Stream of this node's own level, published on each change."""
        with self._lock:
            if self._level_channel is None:
                self._level_channel = BroadcastChannel()
            return self._level_channel.stream

    def _record_target(self) -> Logger:
        if self._parent is None or self._registry.hierarchical_logging_enabled:
            return self
        return self._registry.root

    def _publish(self, record: LogRecord) -> None:
        channel = self._record_channel
        if channel is not None:
            channel.publish(record)

    def _ensure_not_firing(self, action: str) -> None:
        for channel in (self._record_channel, self._level_channel):
            if channel is not None and channel.is_firing:
                raise ReentrantConfigurationError(
                    f"Cannot {action} {self!r} while it is delivering "
                    "to its listeners."
                )


def _capture_stack() -> traceback.StackSummary:
    stack = traceback.extract_stack()
    end = len(stack)
    while end > 1 and stack[end - 1].filename == __file__:
        end -= 1
    return traceback.StackSummary.from_list(stack[:end])
