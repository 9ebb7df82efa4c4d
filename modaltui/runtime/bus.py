"""Unbounded multi-producer, single-consumer action queue."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from queue import Empty, SimpleQueue

from ..actions import BaseAction
from ..errors import ChannelError


class ActionBus:
    """Move actions from any thread into the dispatch loop.

    Each producer holds an ``ActionSender``; only the dispatch loop reads.
    Actions from one producer keep their enqueue order. Once the bus is
    closed, senders raise ``ChannelError`` and nothing more is delivered.
    """

    def __init__(self) -> None:
        self._queue: SimpleQueue[BaseAction] = SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def sender(self) -> ActionSender:
        return ActionSender(self)

    def put(self, action: BaseAction) -> None:
        """Enqueue ``action``; raises ``ChannelError`` once the bus is closed."""
        with self._lock:
            if self._closed:
                raise ChannelError(f"action bus is closed; dropped {action}")
            self._queue.put(action)

    def try_recv(self) -> BaseAction | None:
        """Return the next queued action without blocking."""
        if self._closed:
            raise ChannelError("action bus is closed")
        try:
            return self._queue.get_nowait()
        except Empty:
            return None

    def drain(self) -> Iterator[BaseAction]:
        """Yield queued actions until the queue is empty.

        Actions enqueued while the caller processes earlier ones are yielded
        in the same pass.
        """
        while True:
            action = self.try_recv()
            if action is None:
                return
            yield action

    def pending(self) -> int:
        return self._queue.qsize()

    def close(self) -> None:
        with self._lock:
            self._closed = True


class ActionSender:
    """Clonable, thread-safe handle for enqueueing actions."""

    def __init__(self, bus: ActionBus) -> None:
        self._bus = bus

    def send(self, action: BaseAction) -> None:
        self._bus.put(action)

    def clone(self) -> ActionSender:
        return ActionSender(self._bus)

    @property
    def closed(self) -> bool:
        return self._bus.closed


__all__ = ["ActionBus", "ActionSender"]
