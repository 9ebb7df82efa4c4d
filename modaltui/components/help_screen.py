"""Help overlay listing every configured keybinding, grouped by mode."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..actions import BaseAction, ToggleShowHelp, format_action
from ..input.bindings import KeyBindings
from ..input.keys import format_key_sequence
from ..mode import Mode
from ..render.ansi import display_width
from ..render.canvas import Canvas, Rect
from ..render.theme import DEFAULT_THEME, resolve_theme
from .base import Component

if TYPE_CHECKING:
    from ..runtime.config import Config


def help_rows(bindings: KeyBindings, modes: Iterable[Mode]) -> list[tuple[str, str]]:
    """Return ``(keys, action)`` rows; a mode heading row has an empty action."""
    rows: list[tuple[str, str]] = []
    for mode in modes:
        if rows:
            rows.append(("", ""))
        rows.append((mode.value, ""))
        for keys, action in bindings.iter_bindings(mode):
            rows.append((format_key_sequence(keys), format_action(action)))
    return rows


class HelpScreen(Component):
    """Toggled by ``Engine.ToggleShowHelp``; paints over everything before it."""

    def __init__(self, watched_modes: Iterable[Mode] | None = None) -> None:
        self.show_help = False
        self.watched_modes: list[Mode] = list(watched_modes) if watched_modes is not None else list(Mode)
        self.keybindings: KeyBindings | None = None
        self.theme = DEFAULT_THEME

    def register_config_handler(self, config: Config) -> None:
        self.keybindings = config.keybindings
        self.theme = resolve_theme(config.theme, no_color=config.no_color)

    def update(self, action: BaseAction) -> BaseAction | None:
        if isinstance(action, ToggleShowHelp):
            self.show_help = not self.show_help
        return None

    def draw(self, canvas: Canvas, area: Rect) -> None:
        if not self.show_help:
            return
        if self.keybindings is None:
            raise RuntimeError("HelpScreen has no keybindings configured")
        theme = self.theme
        frame = area.inner(4, 2)
        canvas.fill(frame)
        body = canvas.box(
            frame,
            title="Key Bindings",
            style=theme.help_modal_border,
            title_style=theme.help_modal_title,
        )
        if body.is_empty:
            return
        table = body.inner(2, 1)
        rows = help_rows(self.keybindings, self.watched_modes)
        key_width = max([display_width("Key")] + [display_width(keys) for keys, action in rows if action]) + 2
        y = table.y
        if y < table.bottom:
            canvas.put_text(table.x, y, "Key", theme.help_heading, max_width=table.width)
            canvas.put_text(table.x + key_width, y, "Action", theme.help_heading, max_width=table.width - key_width)
            y += 2
        for keys, action in rows:
            if y >= table.bottom:
                break
            if action:
                canvas.put_text(table.x, y, keys, theme.key, max_width=min(key_width, table.width))
                canvas.put_text(table.x + key_width, y, action, "", max_width=table.width - key_width)
            else:
                canvas.put_text(table.x, y, keys, theme.help_heading, max_width=table.width)
            y += 1
