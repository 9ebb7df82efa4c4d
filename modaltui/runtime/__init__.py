"""Runtime wiring: action bus, event source, terminal, config, dispatch loop."""

from .app import App, LoopState
from .bus import ActionBus, ActionSender
from .config import Config, load_config
from .events import Event, EventSource, KeyEvent, QuitEvent, RenderEvent, ResizeEvent, TickEvent
from .terminal import TerminalController

__all__ = [
    "App",
    "LoopState",
    "ActionBus",
    "ActionSender",
    "Config",
    "load_config",
    "Event",
    "EventSource",
    "KeyEvent",
    "QuitEvent",
    "RenderEvent",
    "ResizeEvent",
    "TickEvent",
    "TerminalController",
]
