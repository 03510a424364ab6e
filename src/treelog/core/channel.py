from __future__ import annotations

from collections.abc import Callable
from threading import Lock, local
from typing import Generic, TypeVar

T = TypeVar("T")

Handler = Callable[[T], None]
DoneCallback = Callable[[], None]


class Subscription(Generic[T]):
    """Handle for one listener attached to a broadcast channel."""

    __slots__ = ("_channel", "_handler", "_on_done", "_active")

    def __init__(
        self,
        channel: BroadcastChannel[T],
        handler: Handler[T],
        on_done: DoneCallback | None,
    ) -> None:
        self._channel = channel
        self._handler = handler
        self._on_done = on_done
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop receiving items. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._channel._remove(self)

    def _deliver(self, item: T) -> None:
        if self._active:
            self._handler(item)

    def _finish(self) -> None:
        self._active = False
        if self._on_done is not None:
            self._on_done()


class Stream(Generic[T]):
    """Listen-only view bound to one channel instance."""

    __slots__ = ("_channel",)

    def __init__(self, channel: BroadcastChannel[T]) -> None:
        self._channel = channel

    def listen(
        self,
        handler: Handler[T],
        *,
        on_done: DoneCallback | None = None,
    ) -> Subscription[T]:
        return self._channel._add(handler, on_done)


class BroadcastChannel(Generic[T]):
    """Synchronous multi-subscriber channel.

    Every active subscriber receives every published item, on the
    publishing thread, in subscription order. Handler exceptions propagate
    to the publisher.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._subscriptions: tuple[Subscription[T], ...] = ()
        self._closed = False
        self._firing = local()
        self.stream: Stream[T] = Stream(self)

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def has_listeners(self) -> bool:
        return bool(self._subscriptions)

    @property
    def is_firing(self) -> bool:
        """True while this thread is inside ``publish`` on this channel."""
        return getattr(self._firing, "depth", 0) > 0

    def publish(self, item: T) -> None:
        subscriptions = self._subscriptions
        if not subscriptions:
            return
        depth = getattr(self._firing, "depth", 0)
        self._firing.depth = depth + 1
        try:
            for subscription in subscriptions:
                subscription._deliver(item)
        finally:
            self._firing.depth = depth

    def close(self) -> None:
        """Close the channel and notify every subscriber's ``on_done``."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            subscriptions = self._subscriptions
            self._subscriptions = ()
        for subscription in subscriptions:
            subscription._finish()

    def _add(
        self,
        handler: Handler[T],
        on_done: DoneCallback | None,
    ) -> Subscription[T]:
        subscription = Subscription(self, handler, on_done)
        with self._lock:
            if not self._closed:
                self._subscriptions = (*self._subscriptions, subscription)
                return subscription
        subscription._finish()
        return subscription

    def _remove(self, subscription: Subscription[T]) -> None:
        with self._lock:
            self._subscriptions = tuple(
                item for item in self._subscriptions if item is not subscription
            )
