"""Mode picker overlay that turns list navigation into ``ChangeMode``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..actions import BaseAction, ChangeMode, ListNavDirection, NavigateList, ToggleShowModeSwitcher
from ..mode import DEFAULT_MODE, Mode
from ..render.canvas import Canvas, Rect
from ..render.theme import DEFAULT_THEME, resolve_theme
from .base import Component

if TYPE_CHECKING:
    from ..runtime.config import Config

MODES: tuple[tuple[str, Mode], ...] = (
    ("Main Menu", Mode.MainMenu),
    ("Home", Mode.Home),
)


class ModeSwitcher(Component):
    """Selectable list of modes; visible after ``ToggleShowModeSwitcher``."""

    def __init__(self, active_mode: Mode = DEFAULT_MODE) -> None:
        self.show_menu = False
        self.current_index = self._index_of(active_mode) or 0
        self.theme = DEFAULT_THEME

    @staticmethod
    def _index_of(mode: Mode) -> int | None:
        for index, (_label, candidate) in enumerate(MODES):
            if candidate is mode:
                return index
        return None

    @property
    def selected_mode(self) -> Mode:
        return MODES[self.current_index][1]

    def register_config_handler(self, config: Config) -> None:
        self.theme = resolve_theme(config.theme, no_color=config.no_color)

    def select_mode(self, offset: int) -> BaseAction | None:
        """Move the selection by ``offset`` (clamped) and request that mode."""
        new_index = max(0, min(len(MODES) - 1, self.current_index + offset))
        if new_index == self.current_index:
            return None
        self.current_index = new_index
        return ChangeMode(self.selected_mode)

    def update(self, action: BaseAction) -> BaseAction | None:
        if isinstance(action, ToggleShowModeSwitcher):
            self.show_menu = not self.show_menu
            return None
        if isinstance(action, ChangeMode):
            index = self._index_of(action.mode)
            if index is not None:
                self.current_index = index
            return None
        if isinstance(action, NavigateList) and self.show_menu:
            if action.direction is ListNavDirection.Up:
                return self.select_mode(-1)
            if action.direction is ListNavDirection.Down:
                return self.select_mode(1)
        return None

    def draw(self, canvas: Canvas, area: Rect) -> None:
        if not self.show_menu:
            return
        theme = self.theme
        inner = area.inner(1, 1)
        width = max(20, inner.width // 5)
        frame = Rect(inner.x, inner.y, min(width, inner.width), min(len(MODES) + 2, inner.height))
        canvas.fill(frame)
        body = canvas.box(frame, title="Select Mode", style=theme.switcher_border, title_style=theme.switcher_border)
        for offset, (label, _mode) in enumerate(MODES):
            if offset >= body.height:
                break
            selected = offset == self.current_index
            prefix = ">>" if selected else "  "
            style = theme.selected if selected else ""
            canvas.put_text(body.x, body.y + offset, f"{prefix}{label}", style, max_width=body.width)
