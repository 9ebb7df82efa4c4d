"""Application modes selecting the active keybinding table."""

from __future__ import annotations

from enum import Enum

from .errors import ConfigError


class Mode(Enum):
    """Mutually exclusive UI focus state. Exactly one is active at a time."""

    MainMenu = "MainMenu"
    Home = "Home"
    Insert = "Insert"

    @classmethod
    def parse(cls, name: str) -> Mode:
        """Return the mode named ``name`` or raise ``ConfigError``."""
        try:
            return cls(name.strip())
        except ValueError:
            known = ", ".join(mode.value for mode in cls)
            raise ConfigError(f"unknown mode {name!r} (expected one of: {known})") from None

    def __str__(self) -> str:
        return self.value


DEFAULT_MODE = Mode.MainMenu

__all__ = ["Mode", "DEFAULT_MODE"]
