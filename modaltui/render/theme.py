"""Colour themes for component drawing.

Themes are semantic ANSI SGR palettes consumed by component ``draw`` code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by components."""

    name: str
    reset: str
    reverse: str
    dim: str
    text: str
    title: str
    border: str
    border_busy: str
    accent: str
    key: str
    selected: str
    input_active: str
    help_heading: str
    help_modal_title: str
    help_modal_border: str
    switcher_border: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    dim="\033[2;38;5;250m",
    text="\033[36m",
    title="\033[1;38;5;81m",
    border="\033[38;5;250m",
    border_busy="\033[33m",
    accent="\033[33m",
    key="\033[31m",
    selected="\033[4;33;44m",
    input_active="\033[33m",
    help_heading="\033[1;38;5;81m",
    help_modal_title="\033[1;38;5;45m",
    help_modal_border="\033[33m",
    switcher_border="\033[94;40m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    dim="\033[2;38;5;110m",
    text="\033[38;5;153m",
    title="\033[1;38;5;45m",
    border="\033[2;38;5;31m",
    border_busy="\033[38;5;215m",
    accent="\033[38;5;117m",
    key="\033[38;5;45m",
    selected="\033[4;38;5;45;48;5;24m",
    input_active="\033[38;5;117m",
    help_heading="\033[1;38;5;45m",
    help_modal_title="\033[1;38;5;39m",
    help_modal_border="\033[38;5;39m",
    switcher_border="\033[38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    dim="",
    text="",
    title="",
    border="",
    border_busy="",
    accent="",
    key="",
    selected="",
    input_active="",
    help_heading="",
    help_modal_title="",
    help_modal_border="",
    switcher_border="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
