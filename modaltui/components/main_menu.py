"""Main menu: a row of list operations selectable with Left/Right."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..actions import BaseAction, ChangeMode, ListNavDirection, NavigateList
from ..mode import DEFAULT_MODE, Mode
from ..render.canvas import Canvas, Rect
from ..render.theme import DEFAULT_THEME, resolve_theme
from .base import Component

if TYPE_CHECKING:
    from ..runtime.config import Config

LIST_OPS: tuple[str, ...] = ("List", "Add", "Edit", "Delete")


class MainMenu(Component):
    """Operation selector shown while ``Mode.MainMenu`` is active."""

    def __init__(self, active_mode: Mode = DEFAULT_MODE) -> None:
        self.active_mode = active_mode
        self.todo_op_index = 0
        self.theme = DEFAULT_THEME

    @property
    def focused(self) -> bool:
        return self.active_mode is Mode.MainMenu

    def register_config_handler(self, config: Config) -> None:
        self.theme = resolve_theme(config.theme, no_color=config.no_color)

    def navigate_list(self, direction: ListNavDirection) -> None:
        if direction is ListNavDirection.Left:
            self.todo_op_index = (self.todo_op_index - 1) % len(LIST_OPS)
        elif direction is ListNavDirection.Right:
            self.todo_op_index = (self.todo_op_index + 1) % len(LIST_OPS)

    def update(self, action: BaseAction) -> BaseAction | None:
        if isinstance(action, ChangeMode):
            self.active_mode = action.mode
        elif isinstance(action, NavigateList) and self.focused:
            self.navigate_list(action.direction)
        return None

    def draw(self, canvas: Canvas, area: Rect) -> None:
        if not self.focused:
            return
        theme = self.theme
        body = canvas.box(area.inner(1, 1), title="List operations", style=theme.border, title_style=theme.title)
        if body.is_empty:
            return
        x = body.x + 1
        for index, label in enumerate(LIST_OPS):
            if index:
                x += canvas.put_text(x, body.y, " · ", theme.dim, max_width=body.right - x)
            style = theme.selected if index == self.todo_op_index else theme.text
            x += canvas.put_text(x, body.y, label, style, max_width=body.right - x)
        hint = "h/l select  Enter open Home  m modes  ? help  q quit"
        canvas.put_text(body.x + 1, body.bottom - 1, hint, theme.dim, max_width=body.width - 2)
