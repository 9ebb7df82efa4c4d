"""Exception hierarchy for startup, dispatch, and channel failures."""

from __future__ import annotations


class ModalTuiError(Exception):
    """Base class for all modaltui errors."""


class ConfigError(ModalTuiError):
    """Malformed keybinding, action text, or settings; fatal at startup."""


class ActionParseError(ConfigError):
    """Action text that does not follow the ``Family.Variant(args)`` grammar."""


class UnknownActionFamily(ActionParseError):
    """Action text whose ``Family.`` prefix is not a known action family."""


class DispatchError(ModalTuiError):
    """A component failed inside ``update`` or ``draw``.

    These never escape the dispatch loop; they are reported as
    ``Engine.Error`` actions instead.
    """

    def __init__(self, component: str, stage: str, cause: BaseException) -> None:
        self.component = component
        self.stage = stage
        self.cause = cause
        super().__init__(f"{component} failed to {stage}: {cause!r}")


class ChannelError(ModalTuiError):
    """The action bus is closed; the dispatch loop cannot continue."""


__all__ = [
    "ModalTuiError",
    "ConfigError",
    "ActionParseError",
    "UnknownActionFamily",
    "DispatchError",
    "ChannelError",
]
