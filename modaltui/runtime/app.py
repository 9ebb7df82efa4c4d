"""Dispatch loop: terminal events in, actions through components, frames out.

One iteration awaits a single terminal event, turns it into actions, drains
the action bus completely (cascades included), and only then waits again.
All feature behavior lives in components; this module is wiring.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING

from ..actions import (
    BaseAction,
    ChangeMode,
    Error,
    Quit,
    Render,
    Resize,
    Resume,
    Suspend,
    Tick,
)
from ..errors import ConfigError, DispatchError
from ..input.resolver import KeyBindingResolver
from ..mode import DEFAULT_MODE, Mode
from ..render.canvas import Canvas, Rect
from .bus import ActionBus
from .config import Config
from .events import Event, EventSource, KeyEvent, QuitEvent, RenderEvent, ResizeEvent, TickEvent
from .terminal import TerminalController

if TYPE_CHECKING:
    from ..components.base import Component

logger = logging.getLogger(__name__)

_QUIET_ACTIONS = (Tick, Render)


class LoopState(Enum):
    RUNNING = "running"
    SUSPENDING = "suspending"
    QUITTING = "quitting"


def _default_terminal_factory() -> TerminalController:
    return TerminalController(sys.stdin.fileno(), sys.stdout.fileno())


class App:
    """Own the loop state, the action bus, and the component roster."""

    def __init__(
        self,
        config: Config,
        components: Iterable[Component] | None = None,
        *,
        mode: Mode = DEFAULT_MODE,
        terminal_factory: Callable[[], TerminalController] | None = None,
        event_source: EventSource | None = None,
        bus: ActionBus | None = None,
    ) -> None:
        if components is None:
            from ..components import default_components

            components = default_components(mode)
        self.config = config
        self.components: list[Component] = list(components)
        self.mode = mode
        self.state = LoopState.RUNNING
        self.resolver = KeyBindingResolver(config.keybindings, config.chord_policy)
        self.bus = bus if bus is not None else ActionBus()
        self.action_tx = self.bus.sender()
        self.terminal: TerminalController | None = None
        self._terminal_factory = terminal_factory or _default_terminal_factory
        self._event_source = event_source

    @property
    def should_quit(self) -> bool:
        return self.state is LoopState.QUITTING

    @property
    def should_suspend(self) -> bool:
        return self.state is LoopState.SUSPENDING

    def startup(self) -> None:
        """Register the sender and config on every component, then ``init`` them.

        Any failure is fatal and reported as ``ConfigError`` naming the
        component, before the terminal is touched.
        """
        stages: tuple[tuple[str, Callable[[Component], None]], ...] = (
            ("register action handler", lambda component: component.register_action_handler(self.action_tx.clone())),
            ("register config", lambda component: component.register_config_handler(self.config)),
            ("initialize", lambda component: component.init()),
        )
        for stage, call in stages:
            for component in self.components:
                try:
                    call(component)
                except ConfigError as exc:
                    raise ConfigError(f"{component.component_name} failed to {stage}: {exc}") from exc
                except Exception as exc:
                    raise ConfigError(f"{component.component_name} failed to {stage}: {exc!r}") from exc

    def _report_failure(self, component: Component, stage: str, exc: Exception, action: BaseAction | None) -> None:
        error = DispatchError(component.component_name, stage, exc)
        logger.error("%s", error, exc_info=exc)
        if isinstance(action, Error):
            # Re-reporting would loop forever on a component that fails on errors.
            logger.error("Dropping failure raised while handling %s", action)
            return
        self.action_tx.send(Error(str(error)))

    def handle_event(self, event: Event) -> None:
        """Enqueue the actions derived from one terminal event."""
        if isinstance(event, QuitEvent):
            self.action_tx.send(Quit())
        elif isinstance(event, TickEvent):
            self.action_tx.send(Tick())
        elif isinstance(event, RenderEvent):
            self.action_tx.send(Render())
        elif isinstance(event, ResizeEvent):
            self.action_tx.send(Resize(event.width, event.height))
        elif isinstance(event, KeyEvent):
            action = self.resolver.feed(self.mode, event.key)
            if action is not None:
                logger.info("Got action: %s", action)
                self.action_tx.send(action)

        for component in self.components:
            try:
                action = component.handle_raw_event(event)
            except Exception as exc:
                self._report_failure(component, "handle event", exc, None)
                continue
            if action is not None:
                self.action_tx.send(action)

    def render(self) -> None:
        """Draw every component in registration order into one frame."""
        if self.terminal is None:
            raise RuntimeError("render requires an entered terminal")

        def paint(canvas: Canvas) -> None:
            for component in self.components:
                try:
                    component.draw(canvas, canvas.area)
                except Exception as exc:
                    self._report_failure(component, "draw", exc, None)

        self.terminal.draw(paint)

    def apply_lifecycle(self, action: BaseAction) -> None:
        """Fold an engine action into loop state."""
        if isinstance(action, Tick):
            self.resolver.reset()
        elif isinstance(action, ChangeMode):
            if action.mode is not self.mode:
                logger.info("Mode %s -> %s", self.mode.value, action.mode.value)
                self.resolver.reset()
            self.mode = action.mode
        elif isinstance(action, Quit):
            self.state = LoopState.QUITTING
        elif isinstance(action, Suspend):
            if self.state is not LoopState.QUITTING:
                self.state = LoopState.SUSPENDING
        elif isinstance(action, Resume):
            if self.state is LoopState.SUSPENDING:
                self.state = LoopState.RUNNING
        elif isinstance(action, Resize):
            if self.terminal is not None:
                self.terminal.resize(Rect(0, 0, action.width, action.height))
            if self.config.redraw_on_resize:
                self.render()
        elif isinstance(action, Render):
            self.render()

    def dispatch(self, action: BaseAction) -> None:
        """Apply ``action`` to loop state, then hand it to every component."""
        if not isinstance(action, _QUIET_ACTIONS):
            logger.debug("Dispatch %s", action)
        self.apply_lifecycle(action)
        for component in self.components:
            try:
                follow_up = component.update(action)
            except Exception as exc:
                self._report_failure(component, "update", exc, action)
                continue
            if follow_up is not None:
                self.action_tx.send(follow_up)

    def drain(self) -> int:
        """Process every queued action, including ones queued meanwhile."""
        count = 0
        for action in self.bus.drain():
            self.dispatch(action)
            count += 1
        return count

    def _suspend(self) -> None:
        assert self.terminal is not None
        logger.info("Suspending")
        self.terminal.suspend()
        self.action_tx.send(Resume())
        self.terminal = self._terminal_factory()
        self.terminal.enter()
        self.state = LoopState.RUNNING
        logger.info("Resumed")

    def _make_event_source(self) -> EventSource:
        source = EventSource(sys.stdin.fileno(), self.config.tick_rate, self.config.frame_rate)
        source.install_signal_handlers()
        return source

    def run(self) -> None:
        """Run until a ``Quit`` action is processed.

        The terminal is torn down exactly once on the way out, including when
        the loop fails with ``ChannelError``.
        """
        self.startup()
        events = self._event_source if self._event_source is not None else self._make_event_source()
        self.terminal = self._terminal_factory()
        try:
            self.terminal.enter()
            while True:
                self.handle_event(events.next())
                self.drain()
                if self.state is LoopState.SUSPENDING:
                    self._suspend()
                elif self.state is LoopState.QUITTING:
                    break
        finally:
            self.terminal.exit()
            self.bus.close()
        logger.info("Dispatch loop finished")


__all__ = ["App", "LoopState"]
