"""Home-screen domain actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .base import BaseAction


class ListNavDirection(Enum):
    Left = "Left"
    Right = "Right"
    Up = "Up"
    Down = "Down"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HomeAction(BaseAction):
    FAMILY = "Home"


@dataclass(frozen=True)
class ScheduleIncrement(HomeAction):
    pass


@dataclass(frozen=True)
class ScheduleDecrement(HomeAction):
    pass


@dataclass(frozen=True)
class Increment(HomeAction):
    ARGS = ("uint",)

    amount: int


@dataclass(frozen=True)
class Decrement(HomeAction):
    ARGS = ("uint",)

    amount: int


@dataclass(frozen=True)
class CompleteInput(HomeAction):
    ARGS = ("text",)

    text: str


@dataclass(frozen=True)
class EnterNormal(HomeAction):
    pass


@dataclass(frozen=True)
class EnterInsert(HomeAction):
    pass


@dataclass(frozen=True)
class EnterProcessing(HomeAction):
    pass


@dataclass(frozen=True)
class ExitProcessing(HomeAction):
    pass


@dataclass(frozen=True)
class Update(HomeAction):
    """Input buffer changed; carries no payload."""


@dataclass(frozen=True)
class NavigateList(HomeAction):
    ARGS = ("direction",)

    direction: ListNavDirection


HOME_ACTIONS: tuple[type[HomeAction], ...] = (
    ScheduleIncrement,
    ScheduleDecrement,
    Increment,
    Decrement,
    CompleteInput,
    EnterNormal,
    EnterInsert,
    EnterProcessing,
    ExitProcessing,
    Update,
    NavigateList,
)
