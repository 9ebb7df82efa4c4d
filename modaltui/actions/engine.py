"""Engine actions: process lifecycle and global UI toggles."""

from __future__ import annotations

from dataclasses import dataclass

from ..mode import Mode
from .base import BaseAction


@dataclass(frozen=True)
class EngineAction(BaseAction):
    FAMILY = "Engine"


@dataclass(frozen=True)
class Tick(EngineAction):
    pass


@dataclass(frozen=True)
class Render(EngineAction):
    pass


@dataclass(frozen=True)
class Resize(EngineAction):
    ARGS = ("uint", "uint")

    width: int
    height: int


@dataclass(frozen=True)
class Suspend(EngineAction):
    pass


@dataclass(frozen=True)
class Resume(EngineAction):
    pass


@dataclass(frozen=True)
class Quit(EngineAction):
    pass


@dataclass(frozen=True)
class Refresh(EngineAction):
    pass


@dataclass(frozen=True)
class Error(EngineAction):
    ARGS = ("text",)

    message: str


@dataclass(frozen=True)
class ChangeMode(EngineAction):
    ARGS = ("mode",)

    mode: Mode


@dataclass(frozen=True)
class ToggleShowHelp(EngineAction):
    pass


@dataclass(frozen=True)
class ToggleShowModeSwitcher(EngineAction):
    pass


ENGINE_ACTIONS: tuple[type[EngineAction], ...] = (
    Tick,
    Render,
    Resize,
    Suspend,
    Resume,
    Quit,
    Refresh,
    Error,
    ChangeMode,
    ToggleShowHelp,
    ToggleShowModeSwitcher,
)
