"""Rendering surface handed to component ``draw`` calls."""

from .ansi import display_width
from .canvas import Canvas, Rect
from .theme import DEFAULT_THEME, PLAIN_THEME, UITheme, available_theme_names, resolve_theme

__all__ = [
    "Canvas",
    "Rect",
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
    "display_width",
]
