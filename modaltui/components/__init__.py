"""Screen components and the default registration order.

Order matters only for painting: later components draw over earlier ones.
"""

from __future__ import annotations

from ..mode import DEFAULT_MODE, Mode
from .base import Component
from .fps import FpsCounter
from .help_screen import HelpScreen, help_rows
from .home import CursorMode, Home
from .main_menu import LIST_OPS, MainMenu
from .mode_switcher import MODES, ModeSwitcher
from .text_input import TextInput


def default_components(mode: Mode = DEFAULT_MODE) -> list[Component]:
    """Build the fixed roster: screens first, then counters, then overlays."""
    return [
        MainMenu(mode),
        Home(mode),
        FpsCounter(),
        HelpScreen(),
        ModeSwitcher(mode),
    ]


__all__ = [
    "Component",
    "CursorMode",
    "FpsCounter",
    "HelpScreen",
    "Home",
    "LIST_OPS",
    "MODES",
    "MainMenu",
    "ModeSwitcher",
    "TextInput",
    "default_components",
    "help_rows",
]
