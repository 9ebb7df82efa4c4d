"""Terminal event stream: ticks, renders, keys, resizes, and quit requests."""

from __future__ import annotations

import shutil
import signal
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from ..input import read_key


@dataclass(frozen=True)
class TickEvent:
    pass


@dataclass(frozen=True)
class RenderEvent:
    pass


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class QuitEvent:
    pass


Event = Union[TickEvent, RenderEvent, KeyEvent, ResizeEvent, QuitEvent]


class EventSource:
    """Blocking producer of terminal events at fixed tick and frame rates.

    ``next`` is the only place the dispatch loop waits. It sleeps inside
    ``read_key`` until the earlier of the next tick or render deadline, so a
    key press is delivered as soon as it arrives.
    """

    def __init__(
        self,
        stdin_fd: int,
        tick_rate: float,
        frame_rate: float,
        *,
        read_key_fn: Callable[..., str] = read_key,
        clock: Callable[[], float] = time.monotonic,
        terminal_size: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.tick_interval = 1.0 / tick_rate
        self.frame_interval = 1.0 / frame_rate
        self._read_key = read_key_fn
        self._clock = clock
        self._terminal_size = terminal_size or _current_terminal_size
        now = clock()
        self._next_tick = now + self.tick_interval
        self._next_render = now
        self._last_size: tuple[int, int] | None = None
        self._quit_requested = False

    def request_quit(self, *_args: object) -> None:
        """Ask the stream to yield ``QuitEvent``; safe from signal handlers."""
        self._quit_requested = True

    def install_signal_handlers(self) -> None:
        """Route termination signals to a ``QuitEvent``. Main thread only."""
        signal.signal(signal.SIGTERM, self.request_quit)
        signal.signal(signal.SIGHUP, self.request_quit)

    @staticmethod
    def _advance(deadline: float, interval: float, now: float) -> float:
        deadline += interval
        if deadline <= now:
            # Fell behind (e.g. while suspended); skip missed beats.
            deadline = now + interval
        return deadline

    def next(self) -> Event:
        """Block until the next event is due and return it."""
        while True:
            if self._quit_requested:
                return QuitEvent()
            size = self._terminal_size()
            if size != self._last_size:
                self._last_size = size
                return ResizeEvent(*size)
            now = self._clock()
            if now >= self._next_tick:
                self._next_tick = self._advance(self._next_tick, self.tick_interval, now)
                return TickEvent()
            if now >= self._next_render:
                self._next_render = self._advance(self._next_render, self.frame_interval, now)
                return RenderEvent()
            wait = min(self._next_tick, self._next_render) - now
            try:
                key = self._read_key(self.stdin_fd, timeout_ms=max(1, int(wait * 1000)))
            except InterruptedError:
                continue
            if key:
                return KeyEvent(key)

    def __iter__(self):
        return self

    def __next__(self) -> Event:
        return self.next()


def _current_terminal_size() -> tuple[int, int]:
    term = shutil.get_terminal_size((80, 24))
    return term.columns, term.lines


__all__ = [
    "Event",
    "EventSource",
    "KeyEvent",
    "QuitEvent",
    "RenderEvent",
    "ResizeEvent",
    "TickEvent",
]
