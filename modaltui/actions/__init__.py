"""Action value types and their textual codec.

``Action`` is the closed union of the ``Engine`` and ``Home`` families.
Everything that flows over the action bus is one of these values.
"""

from __future__ import annotations

from typing import Union

from .base import BaseAction
from .codec import ACTION_FAMILIES, format_action, parse_action
from .engine import (
    ENGINE_ACTIONS,
    ChangeMode,
    EngineAction,
    Error,
    Quit,
    Refresh,
    Render,
    Resize,
    Resume,
    Suspend,
    Tick,
    ToggleShowHelp,
    ToggleShowModeSwitcher,
)
from .home import (
    HOME_ACTIONS,
    CompleteInput,
    Decrement,
    EnterInsert,
    EnterNormal,
    EnterProcessing,
    ExitProcessing,
    HomeAction,
    Increment,
    ListNavDirection,
    NavigateList,
    ScheduleDecrement,
    ScheduleIncrement,
    Update,
)

Action = Union[EngineAction, HomeAction]

__all__ = [
    "Action",
    "BaseAction",
    "ACTION_FAMILIES",
    "ENGINE_ACTIONS",
    "HOME_ACTIONS",
    "format_action",
    "parse_action",
    "EngineAction",
    "HomeAction",
    "ListNavDirection",
    "Tick",
    "Render",
    "Resize",
    "Suspend",
    "Resume",
    "Quit",
    "Refresh",
    "Error",
    "ChangeMode",
    "ToggleShowHelp",
    "ToggleShowModeSwitcher",
    "ScheduleIncrement",
    "ScheduleDecrement",
    "Increment",
    "Decrement",
    "CompleteInput",
    "EnterNormal",
    "EnterInsert",
    "EnterProcessing",
    "ExitProcessing",
    "Update",
    "NavigateList",
]
