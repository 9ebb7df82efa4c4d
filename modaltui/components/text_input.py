"""Single-line editable text buffer used by insert mode."""

from __future__ import annotations

from ..render.ansi import display_width


class TextInput:
    """Text value plus a cursor measured in characters."""

    def __init__(self, value: str = "") -> None:
        self.value = value
        self.cursor = len(value)

    def reset(self) -> None:
        self.value = ""
        self.cursor = 0

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return whether the buffer or cursor changed."""
        if key == "BACKSPACE":
            if self.cursor == 0:
                return False
            self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
            self.cursor -= 1
            return True
        if key == "DELETE":
            if self.cursor >= len(self.value):
                return False
            self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
            return True
        if key == "LEFT":
            moved = self.cursor > 0
            self.cursor = max(0, self.cursor - 1)
            return moved
        if key == "RIGHT":
            moved = self.cursor < len(self.value)
            self.cursor = min(len(self.value), self.cursor + 1)
            return moved
        if key in {"HOME", "CTRL_A"}:
            moved = self.cursor != 0
            self.cursor = 0
            return moved
        if key in {"END", "CTRL_E"}:
            moved = self.cursor != len(self.value)
            self.cursor = len(self.value)
            return moved
        if key == "CTRL_U":
            changed = bool(self.value[: self.cursor])
            self.value = self.value[self.cursor :]
            self.cursor = 0
            return changed
        if len(key) == 1 and key.isprintable():
            self.value = self.value[: self.cursor] + key + self.value[self.cursor :]
            self.cursor += 1
            return True
        return False

    def visual_scroll(self, width: int) -> int:
        """Characters to skip so the cursor stays inside ``width`` columns."""
        if width <= 0:
            return self.cursor
        scroll = 0
        while display_width(self.value[scroll : self.cursor]) >= width:
            scroll += 1
        return scroll

    def visual_cursor(self, width: int) -> int:
        return display_width(self.value[self.visual_scroll(width) : self.cursor])
