"""A thread-safe queue that holds items back until it is released."""

from __future__ import annotations

import enum
import threading
import time
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class LatchEmpty(Exception):
    """No item could be received without waiting longer than allowed."""


class LatchClosed(Exception):
    """The latch has been stopped."""


class _State(enum.Enum):
    HOLDING = enum.auto()
    RELEASING = enum.auto()
    DRAINED = enum.auto()


class ChannelLatch(Generic[T]):
    """Queue items while held and hand them out in order once released.

    A new latch starts out holding. After :meth:`release` items are handed
    out oldest first; :meth:`hold` stops that again. When a released latch
    runs out of items it is drained, and adding to it resumes releasing.
    All methods are safe to call from any thread.
    """

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._state = _State.HOLDING
        self._closed = False
        self._cond = threading.Condition()

    def __enter__(self) -> ChannelLatch[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _check_open(self) -> None:
        if self._closed:
            raise LatchClosed("latch has been stopped")

    def _ready(self) -> bool:
        return self._closed or (self._state is _State.RELEASING and bool(self._items))

    def _take(self) -> T:
        item = self._items.popleft()
        if not self._items:
            self._state = _State.DRAINED
        self._cond.notify_all()
        return item

    def add(self, item: T) -> None:
        """Queue ``item``; a drained latch starts releasing again."""
        with self._cond:
            self._check_open()
            self._items.append(item)
            if self._state is _State.DRAINED:
                self._state = _State.RELEASING
            self._cond.notify_all()

    def remove(self, item: T) -> None:
        """Drop every queued item equal to ``item``."""
        with self._cond:
            self._check_open()
            self._items = deque(x for x in self._items if x != item)
            if self._state is _State.RELEASING and not self._items:
                self._state = _State.DRAINED
            self._cond.notify_all()

    def release(self) -> None:
        """Allow queued items to be handed out."""
        with self._cond:
            self._check_open()
            if self._state is _State.HOLDING:
                self._state = _State.RELEASING if self._items else _State.DRAINED
                self._cond.notify_all()

    def hold(self) -> None:
        """Stop handing out items until the next release."""
        with self._cond:
            self._check_open()
            if self._state is not _State.HOLDING:
                self._state = _State.HOLDING
                self._cond.notify_all()

    def wait_drained(self) -> None:
        """Block until the latch is released with nothing left, or stopped."""
        with self._cond:
            self._cond.wait_for(lambda: self._closed or self._state is _State.DRAINED)

    def stop(self) -> None:
        """Close the latch and wake every waiter."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def receive(self, block: bool = True, timeout: float | None = None) -> T:
        """Take the next released item.

        Raises :class:`LatchEmpty` if none is available without blocking or
        within ``timeout`` seconds, and :class:`LatchClosed` once stopped.
        """
        with self._cond:
            ready = self._cond.wait_for(self._ready, timeout) if block else self._ready()
            self._check_open()
            if not ready:
                raise LatchEmpty("no released item available")
            return self._take()

    def drain(self, timeout: float | None = None) -> Iterator[T]:
        """Yield released items until the latch is drained or stopped.

        While the latch is held the iterator waits. If ``timeout`` is given,
        iteration also ends once that many seconds have passed since the call.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        return self._drain(deadline)

    def _drain(self, deadline: float | None) -> Iterator[T]:
        def finished_or_ready() -> bool:
            return self._ready() or self._state is _State.DRAINED

        while True:
            with self._cond:
                remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
                self._cond.wait_for(finished_or_ready, remaining)
                if self._closed or not self._ready():
                    return
                item = self._take()
            yield item