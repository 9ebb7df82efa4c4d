"""Cell-grid canvas that components paint into.

A canvas holds one frame. Later writes overwrite earlier cells, which is how
overlays registered after the main screens end up on top.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import char_display_width

# Marks the right half of a double-width character.
_WIDE_TAIL = ""


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def inner(self, horizontal: int = 1, vertical: int = 1) -> Rect:
        """Shrink by a margin on each side, never below zero size."""
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            max(0, self.width - 2 * horizontal),
            max(0, self.height - 2 * vertical),
        )

    def intersection(self, other: Rect) -> Rect:
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def split_rows(self, *heights: int | None) -> list[Rect]:
        """Split vertically; ``None`` entries share the leftover rows."""
        fixed = sum(h for h in heights if h is not None)
        flexible = [h for h in heights if h is None]
        leftover = max(0, self.height - fixed)
        share = leftover // len(flexible) if flexible else 0
        rows: list[Rect] = []
        y = self.y
        for h in heights:
            size = share if h is None else h
            size = max(0, min(size, self.bottom - y))
            rows.append(Rect(self.x, y, self.width, size))
            y += size
        return rows


class Canvas:
    """Fixed-size grid of (character, SGR style) cells."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._styles = [[""] * self.width for _ in range(self.height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def cell(self, x: int, y: int) -> tuple[str, str]:
        return self._chars[y][x], self._styles[y][x]

    def _set(self, x: int, y: int, ch: str, style: str) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._chars[y][x] = ch
            self._styles[y][x] = style

    def put_text(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` starting at ``(x, y)`` and return columns written.

        Output is clipped to the canvas and to ``max_width`` columns.
        """
        if not 0 <= y < self.height:
            return 0
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        col = 0
        for ch in text:
            if ch in "\r\n":
                break
            w = char_display_width(ch)
            if w == 0:
                continue
            if col + w > limit:
                break
            self._set(x + col, y, ch, style)
            if w == 2:
                self._set(x + col + 1, y, _WIDE_TAIL, style)
            col += w
        return col

    def fill(self, rect: Rect, ch: str = " ", style: str = "") -> None:
        area = rect.intersection(self.area)
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                self._chars[y][x] = ch
                self._styles[y][x] = style

    def box(self, rect: Rect, title: str = "", style: str = "", title_style: str = "") -> Rect:
        """Draw a rounded frame with an optional title; return the interior."""
        if rect.width < 2 or rect.height < 2:
            return Rect(rect.x, rect.y, 0, 0)
        right = rect.right - 1
        bottom = rect.bottom - 1
        self._set(rect.x, rect.y, "╭", style)
        self._set(right, rect.y, "╮", style)
        self._set(rect.x, bottom, "╰", style)
        self._set(right, bottom, "╯", style)
        for x in range(rect.x + 1, right):
            self._set(x, rect.y, "─", style)
            self._set(x, bottom, "─", style)
        for y in range(rect.y + 1, bottom):
            self._set(rect.x, y, "│", style)
            self._set(right, y, "│", style)
        if title and rect.width > 4:
            self.put_text(rect.x + 2, rect.y, title, title_style or style, max_width=rect.width - 4)
        return rect.inner(1, 1)

    def row_text(self, y: int) -> str:
        """Plain text of one row, without styles."""
        return "".join(self._chars[y])

    def text(self) -> str:
        return "\n".join(self.row_text(y) for y in range(self.height))

    def render(self) -> str:
        """Compose the whole grid into one ANSI frame string."""
        out: list[str] = []
        for y in range(self.height):
            out.append(f"\033[{y + 1};1H")
            current = ""
            for ch, style in zip(self._chars[y], self._styles[y]):
                if style != current:
                    out.append("\033[0m")
                    out.append(style)
                    current = style
                out.append(ch)
            out.append("\033[0m")
        return "".join(out)


__all__ = ["Rect", "Canvas"]
