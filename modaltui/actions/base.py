"""Shared base for action value types."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar


@dataclass(frozen=True)
class BaseAction:
    """Immutable, self-contained action value.

    ``FAMILY`` names the namespace used in the textual form and ``ARGS`` lists
    the argument kinds the codec expects, in field order.
    """

    FAMILY: ClassVar[str] = ""
    ARGS: ClassVar[tuple[str, ...]] = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    def arguments(self) -> tuple[object, ...]:
        """Return field values in declaration order."""
        return tuple(getattr(self, field.name) for field in fields(self))

    def __str__(self) -> str:
        from .codec import format_action

        return format_action(self)
