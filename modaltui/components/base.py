"""Uniform lifecycle contract shared by every screen component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..actions import BaseAction
from ..render.canvas import Canvas, Rect
from ..runtime.events import Event, KeyEvent

if TYPE_CHECKING:
    from ..runtime.bus import ActionSender
    from ..runtime.config import Config


class Component:
    """Independently stateful unit driven by the dispatch loop.

    Components never reference each other. They learn about the world only
    through actions passed to ``update`` and speak only by returning or
    sending actions. Every hook has a no-op default.
    """

    def register_action_handler(self, sender: ActionSender) -> None:
        """Receive a handle for enqueueing actions from any thread."""

    def register_config_handler(self, config: Config) -> None:
        """Receive the resolved configuration once, before ``init``."""

    def init(self) -> None:
        """One-time setup after registration; raising aborts startup."""

    def handle_raw_event(self, event: Event) -> BaseAction | None:
        """First look at a raw terminal event, independent of keybindings."""
        if isinstance(event, KeyEvent):
            return self.handle_key_event(event.key)
        return None

    def handle_key_event(self, key: str) -> BaseAction | None:
        return None

    def update(self, action: BaseAction) -> BaseAction | None:
        """React to a dispatched action and optionally return one follow-up."""
        return None

    def draw(self, canvas: Canvas, area: Rect) -> None:
        """Paint into ``area``; raise to report a rendering failure."""

    @property
    def component_name(self) -> str:
        return type(self).__name__


__all__ = ["Component"]
