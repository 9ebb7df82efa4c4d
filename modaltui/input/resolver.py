"""Multi-key chord resolution against the active mode's bindings."""

from __future__ import annotations

import logging
from enum import Enum

from ..actions import BaseAction
from ..mode import Mode
from .bindings import KeyBindings
from .keys import KeySequence

logger = logging.getLogger(__name__)


class ChordPolicy(Enum):
    """What to drop when buffered keys can no longer complete any chord."""

    DISCARD_OLDEST = "discard_oldest"
    DISCARD_ALL = "discard_all"


class KeyBindingResolver:
    """Accumulate key presses until they resolve to an action.

    The resolver is ``Idle`` when nothing is buffered and ``Pending`` while a
    partial chord waits for more keys. Matching is greedy: an exact match is
    emitted immediately even when a longer chord shares the prefix. The
    dispatch loop calls ``reset`` on every tick, so a partial chord lives at
    most one tick period.
    """

    def __init__(self, bindings: KeyBindings, policy: ChordPolicy = ChordPolicy.DISCARD_OLDEST) -> None:
        self.bindings = bindings
        self.policy = policy
        self._pending: KeySequence = ()

    @property
    def pending(self) -> KeySequence:
        return self._pending

    @property
    def is_idle(self) -> bool:
        return not self._pending

    def reset(self) -> None:
        self._pending = ()

    def feed(self, mode: Mode, key: str) -> BaseAction | None:
        """Append ``key`` and return the resolved action, if any."""
        buffer: KeySequence = self._pending + (key,)
        while buffer:
            action = self.bindings.lookup(mode, buffer)
            if action is not None:
                self._pending = ()
                return action
            if self.bindings.has_prefix(mode, buffer):
                self._pending = buffer
                return None
            if len(buffer) == 1:
                break
            logger.debug("No %s binding starts with %r", mode.value, buffer)
            if self.policy is ChordPolicy.DISCARD_ALL:
                buffer = buffer[-1:]
            else:
                buffer = buffer[1:]
        self._pending = ()
        return None


__all__ = ["ChordPolicy", "KeyBindingResolver"]
