"""Home screen: counter, deferred increments, and a free-text input line."""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from typing import TYPE_CHECKING

from ..actions import (
    BaseAction,
    ChangeMode,
    CompleteInput,
    Decrement,
    EnterInsert,
    EnterNormal,
    EnterProcessing,
    ExitProcessing,
    Increment,
    ListNavDirection,
    NavigateList,
    Render,
    ScheduleDecrement,
    ScheduleIncrement,
    Tick,
    Update,
)
from ..errors import ChannelError
from ..input.keys import format_key_sequence
from ..mode import DEFAULT_MODE, Mode
from ..render.ansi import display_width
from ..render.canvas import Canvas, Rect
from ..render.theme import DEFAULT_THEME, resolve_theme
from .base import Component
from .main_menu import LIST_OPS
from .text_input import TextInput

if TYPE_CHECKING:
    from ..runtime.bus import ActionSender
    from ..runtime.config import Config

logger = logging.getLogger(__name__)


class CursorMode(Enum):
    Normal = "Normal"
    Insert = "Insert"
    Processing = "Processing"


class Home(Component):
    """Main content screen, focused in ``Mode.Home`` and ``Mode.Insert``."""

    def __init__(self, active_mode: Mode = DEFAULT_MODE, processing_delay: float = 1.0) -> None:
        self.active_mode = active_mode
        self.processing_delay = processing_delay
        self.counter = 0
        self.app_ticker = 0
        self.render_ticker = 0
        self.mode = CursorMode.Normal
        self.input = TextInput()
        self.text: list[str] = []
        self.last_events: list[str] = []
        self.todo_op_index = 0
        self.action_tx: ActionSender | None = None
        self.theme = DEFAULT_THEME
        self._processing_depth = 0
        self._mode_before_processing = CursorMode.Normal
        self._workers: list[threading.Thread] = []

    @property
    def focused(self) -> bool:
        return self.active_mode in {Mode.Home, Mode.Insert}

    def register_action_handler(self, sender: ActionSender) -> None:
        self.action_tx = sender

    def register_config_handler(self, config: Config) -> None:
        self.processing_delay = config.processing_delay
        self.theme = resolve_theme(config.theme, no_color=config.no_color)

    def tick(self) -> None:
        self.app_ticker += 1
        self.last_events.clear()

    def render_tick(self) -> None:
        self.render_ticker += 1

    def add(self, line: str) -> None:
        self.text.append(line)

    def increment(self, amount: int) -> None:
        self.counter += amount

    def decrement(self, amount: int) -> None:
        self.counter = max(0, self.counter - amount)

    def _run_scheduled(self, sender: ActionSender, action: BaseAction, delay: float) -> None:
        try:
            sender.send(EnterProcessing())
            if delay > 0:
                time.sleep(delay)
            sender.send(action)
            sender.send(ExitProcessing())
        except ChannelError:
            logger.debug("Action bus closed; dropping scheduled %s", action)

    def _schedule(self, action: BaseAction) -> threading.Thread:
        if self.action_tx is None:
            raise RuntimeError("Home has no action handler registered")
        self._workers = [worker for worker in self._workers if worker.is_alive()]
        worker = threading.Thread(
            target=self._run_scheduled,
            args=(self.action_tx.clone(), action, self.processing_delay),
            name="modaltui-home-schedule",
            daemon=True,
        )
        self._workers.append(worker)
        worker.start()
        return worker

    def schedule_increment(self, amount: int) -> threading.Thread:
        """Enter processing, wait, increment, and exit processing off-thread."""
        return self._schedule(Increment(amount))

    def schedule_decrement(self, amount: int) -> threading.Thread:
        return self._schedule(Decrement(amount))

    def navigate_list(self, direction: ListNavDirection) -> None:
        if self.mode is not CursorMode.Normal:
            return
        if direction is ListNavDirection.Left:
            self.todo_op_index = (self.todo_op_index - 1) % len(LIST_OPS)
        elif direction is ListNavDirection.Right:
            self.todo_op_index = (self.todo_op_index + 1) % len(LIST_OPS)

    @property
    def processing(self) -> bool:
        return self._processing_depth > 0

    def enter_processing(self) -> None:
        """Mark scheduled work in flight; an Insert cursor keeps taking keys."""
        if self._processing_depth == 0:
            self._mode_before_processing = self.mode
        self._processing_depth += 1
        if self.mode is not CursorMode.Insert:
            self.mode = CursorMode.Processing

    def exit_processing(self) -> None:
        if self._processing_depth == 0:
            return
        self._processing_depth -= 1
        if self._processing_depth == 0 and self.mode is CursorMode.Processing:
            self.mode = self._mode_before_processing

    def _settle(self, mode: CursorMode) -> None:
        # Work still in flight: the last ExitProcessing must land on ``mode``.
        if self.processing:
            self._mode_before_processing = mode
        self.mode = mode

    def enter_insert(self) -> BaseAction | None:
        self._settle(CursorMode.Insert)
        if self.active_mode is not Mode.Insert:
            return ChangeMode(Mode.Insert)
        return None

    def enter_normal(self) -> BaseAction | None:
        previous = self.mode
        self._settle(CursorMode.Normal)
        if self.processing:
            self.mode = CursorMode.Processing
        if previous is CursorMode.Insert and self.active_mode is Mode.Insert:
            return ChangeMode(Mode.Home)
        return None

    def handle_key_event(self, key: str) -> BaseAction | None:
        if not self.focused:
            return None
        self.last_events.append(key)
        if self.mode is not CursorMode.Insert:
            return None
        if key == "ESC":
            return EnterNormal()
        if key == "ENTER":
            if self.action_tx is not None:
                try:
                    self.action_tx.send(CompleteInput(self.input.value))
                except ChannelError:
                    logger.error("Failed to send completed input %r", self.input.value)
            return EnterNormal()
        if self.input.handle_key(key):
            return Update()
        return None

    def update(self, action: BaseAction) -> BaseAction | None:
        if isinstance(action, ChangeMode):
            self.active_mode = action.mode
        elif isinstance(action, Tick):
            self.tick()
        elif isinstance(action, Render):
            self.render_tick()
        elif isinstance(action, ScheduleIncrement):
            self.schedule_increment(1)
        elif isinstance(action, ScheduleDecrement):
            self.schedule_decrement(1)
        elif isinstance(action, Increment):
            self.increment(action.amount)
        elif isinstance(action, Decrement):
            self.decrement(action.amount)
        elif isinstance(action, CompleteInput):
            self.add(action.text)
            self.input.reset()
        elif isinstance(action, EnterNormal):
            return self.enter_normal()
        elif isinstance(action, EnterInsert):
            return self.enter_insert()
        elif isinstance(action, EnterProcessing):
            self.enter_processing()
        elif isinstance(action, ExitProcessing):
            self.exit_processing()
        elif isinstance(action, NavigateList) and self.focused:
            self.navigate_list(action.direction)
        return None

    def _draw_body(self, canvas: Canvas, area: Rect) -> None:
        theme = self.theme
        border = theme.border_busy if self.processing else theme.border
        body = canvas.box(area, title="modaltui", style=border, title_style=theme.title)
        if body.is_empty:
            return

        x = body.x + 1
        for index, label in enumerate(LIST_OPS):
            if index:
                x += canvas.put_text(x, body.y, " · ", theme.dim, max_width=body.right - x)
            style = theme.selected if index == self.todo_op_index else theme.text
            x += canvas.put_text(x, body.y, label, style, max_width=body.right - x)

        lines: list[tuple[str, str]] = [
            ("", ""),
            ("Press j or k to increment or decrement.", theme.accent),
            ("", ""),
            (f"Counter: {self.counter}", theme.text),
            (f"App Ticker: {self.app_ticker}", theme.text),
            (f"Render Ticker: {self.render_ticker}", theme.text),
            ("", ""),
            ("Type into input and hit enter to display here", theme.dim),
            ("", ""),
        ]
        lines.extend((line, theme.text) for line in self.text)
        for offset, (line, style) in enumerate(lines[: max(0, body.height - 2)]):
            width = min(display_width(line), body.width)
            canvas.put_text(body.x + (body.width - width) // 2, body.y + 1 + offset, line, style, max_width=body.width)

        if self.last_events:
            keys = format_key_sequence(tuple(self.last_events))
            width = min(display_width(keys), body.width)
            canvas.put_text(body.right - width, body.bottom - 1, keys, theme.title, max_width=width)

    def _draw_input(self, canvas: Canvas, area: Rect) -> None:
        theme = self.theme
        style = theme.input_active if self.mode is CursorMode.Insert else ""
        title = "Enter Input Mode (Press / to start, Enter to save and exit, ESC to exit without saving)"
        inner = canvas.box(area, title=title, style=style, title_style=style)
        if inner.is_empty:
            return
        width = max(1, inner.width - 1)
        scroll = self.input.visual_scroll(width)
        canvas.put_text(inner.x, inner.y, self.input.value[scroll:], style, max_width=inner.width)
        if self.mode is CursorMode.Insert:
            cursor_x = min(inner.x + self.input.visual_cursor(width), inner.right - 1)
            char, _ = canvas.cell(cursor_x, inner.y)
            canvas.put_text(cursor_x, inner.y, char or " ", theme.reverse, max_width=1)

    def draw(self, canvas: Canvas, area: Rect) -> None:
        if not self.focused:
            return
        body_area, input_area = area.split_rows(None, 3)
        self._draw_body(canvas, body_area)
        self._draw_input(canvas, input_area)


__all__ = ["CursorMode", "Home"]
