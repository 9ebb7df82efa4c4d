"""Dispatch loop behavior with a fake terminal and scripted events.

Covers cascade draining, mode switches between keys, suspend/resume
ordering, failure reporting, and teardown guarantees.
"""

from __future__ import annotations

import unittest

from modaltui.actions import (
    BaseAction,
    ChangeMode,
    Decrement,
    Error,
    Increment,
    Quit,
    Render,
    Resize,
    Resume,
    Suspend,
)
from modaltui.components import Component
from modaltui.errors import ConfigError
from modaltui.input import KeyBindings
from modaltui.mode import Mode
from modaltui.render import Canvas, Rect
from modaltui.runtime import App, Config, KeyEvent, LoopState, QuitEvent, RenderEvent, TickEvent


class _FakeTerminal:
    def __init__(self, log: list[str], width: int = 20, height: int = 6) -> None:
        self.log = log
        self.width = width
        self.height = height
        self.frames: list[Canvas] = []

    def enter(self) -> None:
        self.log.append("enter")

    def exit(self) -> None:
        self.log.append("exit")

    def suspend(self) -> None:
        self.log.append("suspend")

    def resize(self, area: Rect) -> None:
        self.log.append(f"resize:{area.width}x{area.height}")
        self.width = area.width
        self.height = area.height

    def draw(self, paint) -> None:
        canvas = Canvas(self.width, self.height)
        paint(canvas)
        self.frames.append(canvas)
        self.log.append("draw")


class _ScriptedEvents:
    def __init__(self, events: list[object]) -> None:
        self.events = list(events)

    def next(self):
        if self.events:
            event = self.events.pop(0)
            if isinstance(event, BaseException):
                raise event
            return event
        return QuitEvent()


class _Recorder(Component):
    """Record every action and answer with configured follow-ups."""

    def __init__(self, follow_ups: dict[BaseAction, BaseAction] | None = None) -> None:
        self.follow_ups = follow_ups or {}
        self.seen: list[BaseAction] = []
        self.counter = 0
        self.draws = 0

    def update(self, action: BaseAction) -> BaseAction | None:
        self.seen.append(action)
        if isinstance(action, Increment):
            self.counter += action.amount
        return self.follow_ups.get(action)

    def draw(self, canvas: Canvas, area: Rect) -> None:
        self.draws += 1
        canvas.put_text(0, 0, f"count={self.counter}")


class _Broken(Component):
    def __init__(self, fail_on: str = "update") -> None:
        self.fail_on = fail_on

    def init(self) -> None:
        if self.fail_on == "init":
            raise ValueError("cannot start")

    def update(self, action: BaseAction) -> BaseAction | None:
        if self.fail_on == "update":
            raise RuntimeError("bad update")
        return None

    def draw(self, canvas: Canvas, area: Rect) -> None:
        if self.fail_on == "draw":
            raise RuntimeError("bad draw")


def _config(**overrides: object) -> Config:
    bindings = KeyBindings.from_config(
        {
            "MainMenu": [
                ["<j>", "Home.Increment(1)"],
                ["<g>", "Engine.ChangeMode(Home)"],
                ["<a><b>", "Engine.Quit"],
                ["<q>", "Engine.Quit"],
                ["<ctrl-z>", "Engine.Suspend"],
            ],
            "Home": [["<j>", "Home.Decrement(1)"], ["<q>", "Engine.Quit"]],
            "Insert": [],
        }
    )
    return Config(keybindings=bindings, **overrides)  # type: ignore[arg-type]


def _app(components: list[Component], events: list[object] | None = None, **config: object) -> tuple[App, list[str]]:
    log: list[str] = []

    def factory() -> _FakeTerminal:
        log.append("new-terminal")
        return _FakeTerminal(log)

    app = App(
        _config(**config),
        components,
        mode=Mode.MainMenu,
        terminal_factory=factory,  # type: ignore[arg-type]
        event_source=_ScriptedEvents(events or []),  # type: ignore[arg-type]
    )
    return app, log


class DispatchTests(unittest.TestCase):
    def test_cascading_follow_ups_drain_in_one_pass(self) -> None:
        recorder = _Recorder({Increment(1): Increment(2), Increment(2): Increment(3)})
        app, _log = _app([recorder])
        app.startup()

        app.handle_event(KeyEvent("j"))
        processed = app.drain()

        self.assertEqual(processed, 3)
        self.assertEqual(recorder.seen, [Increment(1), Increment(2), Increment(3)])
        self.assertEqual(app.bus.pending(), 0)

    def test_mode_change_applies_to_the_next_key(self) -> None:
        recorder = _Recorder()
        app, _log = _app([recorder])
        app.startup()

        app.handle_event(KeyEvent("g"))
        app.drain()
        self.assertIs(app.mode, Mode.Home)

        app.handle_event(KeyEvent("j"))
        app.drain()
        self.assertEqual(recorder.seen, [ChangeMode(Mode.Home), Decrement(1)])

    def test_tick_and_mode_change_reset_partial_chords(self) -> None:
        app, _log = _app([_Recorder()])
        app.startup()

        app.handle_event(KeyEvent("a"))
        self.assertEqual(app.resolver.pending, ("a",))
        app.handle_event(TickEvent())
        app.drain()
        self.assertTrue(app.resolver.is_idle)

        app.handle_event(KeyEvent("a"))
        app.dispatch(ChangeMode(Mode.Home))
        self.assertTrue(app.resolver.is_idle)

    def test_raw_key_handlers_can_emit_actions(self) -> None:
        class _Echo(Component):
            def handle_key_event(self, key: str) -> BaseAction | None:
                return Increment(len(key))

        recorder = _Recorder()
        app, _log = _app([_Echo(), recorder])
        app.startup()

        app.handle_event(KeyEvent("ENTER"))
        app.drain()

        self.assertEqual(recorder.seen, [Increment(5)])

    def test_quit_dominates_suspend(self) -> None:
        app, _log = _app([_Recorder()])
        app.dispatch(Quit())
        app.dispatch(Suspend())
        self.assertIs(app.state, LoopState.QUITTING)
        self.assertTrue(app.should_quit)

    def test_resize_adopts_area_and_redraws(self) -> None:
        recorder = _Recorder()
        app, log = _app([recorder])
        app.terminal = _FakeTerminal(log)  # type: ignore[assignment]

        app.dispatch(Resize(30, 10))

        self.assertEqual(log, ["resize:30x10", "draw"])
        self.assertEqual(recorder.draws, 1)

    def test_resize_without_redraw_waits_for_next_render(self) -> None:
        recorder = _Recorder()
        app, log = _app([recorder], redraw_on_resize=False)
        app.terminal = _FakeTerminal(log)  # type: ignore[assignment]

        app.dispatch(Resize(30, 10))

        self.assertEqual(log, ["resize:30x10"])
        self.assertEqual(recorder.draws, 0)


class FailureReportingTests(unittest.TestCase):
    def test_update_failure_becomes_error_action(self) -> None:
        recorder = _Recorder()
        app, _log = _app([_Broken("update"), recorder])

        app.dispatch(Increment(1))

        self.assertEqual(recorder.seen, [Increment(1)])
        queued = list(app.bus.drain())
        self.assertEqual(len(queued), 1)
        self.assertIsInstance(queued[0], Error)
        self.assertIn("_Broken failed to update", queued[0].message)

    def test_failure_while_handling_error_is_not_requeued(self) -> None:
        app, _log = _app([_Broken("update")])

        app.dispatch(Error("earlier failure"))

        self.assertEqual(app.bus.pending(), 0)

    def test_draw_failure_becomes_error_and_other_components_still_draw(self) -> None:
        recorder = _Recorder()
        app, log = _app([_Broken("draw"), recorder])
        app.terminal = _FakeTerminal(log)  # type: ignore[assignment]

        app.dispatch(Render())

        self.assertEqual(recorder.draws, 1)
        queued = list(app.bus.drain())
        self.assertEqual(len(queued), 1)
        self.assertIn("_Broken failed to draw", queued[0].message)

    def test_render_without_terminal_is_a_programming_error(self) -> None:
        app, _log = _app([_Recorder()])
        with self.assertRaises(RuntimeError):
            app.render()

    def test_startup_failure_is_config_error_before_terminal_setup(self) -> None:
        app, log = _app([_Recorder(), _Broken("init")])

        with self.assertRaises(ConfigError) as ctx:
            app.run()

        self.assertIn("_Broken failed to initialize", str(ctx.exception))
        self.assertEqual(log, [])


class RunLoopTests(unittest.TestCase):
    def test_run_processes_events_until_quit_and_tears_down_once(self) -> None:
        recorder = _Recorder()
        app, log = _app([recorder], [RenderEvent(), KeyEvent("j"), KeyEvent("q"), KeyEvent("j")])

        app.run()

        self.assertEqual(recorder.seen, [Render(), Increment(1), Quit()])
        self.assertEqual(log, ["new-terminal", "enter", "draw", "exit"])
        self.assertTrue(app.bus.closed)

    def test_suspend_resumes_first_and_keeps_component_state(self) -> None:
        recorder = _Recorder()
        app, log = _app([recorder], [KeyEvent("j"), KeyEvent("CTRL_Z"), KeyEvent("j"), QuitEvent()])

        app.run()

        self.assertEqual(
            recorder.seen,
            [Increment(1), Suspend(), Resume(), Increment(1), Quit()],
        )
        self.assertEqual(recorder.counter, 2)
        self.assertEqual(
            log,
            ["new-terminal", "enter", "suspend", "new-terminal", "enter", "exit"],
        )

    def test_terminal_is_restored_when_loop_raises(self) -> None:
        app, log = _app([_Recorder()], [KeyEvent("j"), RuntimeError("event source died")])

        with self.assertRaises(RuntimeError):
            app.run()

        self.assertEqual(log.count("exit"), 1)
        self.assertTrue(app.bus.closed)

    def test_default_roster_is_registered_in_paint_order(self) -> None:
        app = App(_config(), event_source=_ScriptedEvents([]))  # type: ignore[arg-type]
        self.assertEqual(
            [component.component_name for component in app.components],
            ["MainMenu", "Home", "FpsCounter", "HelpScreen", "ModeSwitcher"],
        )


if __name__ == "__main__":
    unittest.main()
