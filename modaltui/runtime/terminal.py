"""Terminal control for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, process suspend, and
frame output. Components never touch this directly; the dispatch loop hands
them a canvas inside ``draw``.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import signal
import termios
import tty
from collections.abc import Callable

from ..render.canvas import Canvas, Rect


class TerminalController:
    """Manage terminal mode transitions and full-frame drawing."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._active = False
        self._area: Rect | None = None

    @property
    def active(self) -> bool:
        return self._active

    def enter(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l\x1b[H\x1b[2J")
        self._active = True

    def exit(self) -> None:
        """Restore normal terminal state. Safe to call when not entered."""
        if not self._active:
            return
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._active = False

    def suspend(self) -> None:
        """Release the terminal and stop the process until it is continued."""
        self.exit()
        os.kill(os.getpid(), signal.SIGTSTP)

    def size(self) -> Rect:
        if self._area is not None:
            return self._area
        term = shutil.get_terminal_size((80, 24))
        return Rect(0, 0, term.columns, term.lines)

    def resize(self, area: Rect) -> None:
        """Adopt ``area`` as the drawable region and clear stale output."""
        self._area = area
        if self._active:
            os.write(self.stdout_fd, b"\x1b[H\x1b[2J")

    def draw(self, paint: Callable[[Canvas], None]) -> None:
        """Build a canvas for the current area, let ``paint`` fill it, then flush."""
        area = self.size()
        canvas = Canvas(area.width, area.height)
        paint(canvas)
        os.write(self.stdout_fd, canvas.render().encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def session(self):
        """Context manager that brackets code with enter/exit calls."""
        try:
            self.enter()
            yield self
        finally:
            self.exit()


__all__ = ["TerminalController"]
