"""Display-width measurement for terminal cells.

Wide East Asian characters take two columns and combining marks none, so
clipping and cell placement stay aligned with what the terminal shows.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of columns ``text`` occupies, ignoring escapes."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))

