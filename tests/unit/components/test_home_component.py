"""Tests for the Home screen: counter, deferred work, and insert mode."""

from __future__ import annotations

import unittest

from modaltui.actions import (
    ChangeMode,
    CompleteInput,
    Decrement,
    EnterInsert,
    EnterNormal,
    EnterProcessing,
    ExitProcessing,
    Increment,
    ListNavDirection,
    NavigateList,
    Render,
    ScheduleDecrement,
    Tick,
    Update,
)
from modaltui.components import CursorMode, Home
from modaltui.mode import Mode
from modaltui.render import Canvas
from modaltui.runtime import ActionBus, App, Config, KeyEvent, LoopState


def _home(mode: Mode = Mode.Home) -> tuple[Home, ActionBus]:
    bus = ActionBus()
    home = Home(mode)
    home.register_action_handler(bus.sender())
    home.register_config_handler(Config(processing_delay=0))
    return home, bus


class HomeCounterTests(unittest.TestCase):
    def test_increment_and_saturating_decrement(self) -> None:
        home, _bus = _home()
        home.update(Increment(3))
        home.update(Decrement(1))
        self.assertEqual(home.counter, 2)

        home.update(Decrement(10))
        self.assertEqual(home.counter, 0)

    def test_tick_and_render_advance_tickers_and_clear_key_trail(self) -> None:
        home, _bus = _home()
        home.handle_raw_event(KeyEvent("x"))
        self.assertEqual(home.last_events, ["x"])

        home.update(Tick())
        home.update(Render())
        home.update(Render())

        self.assertEqual(home.app_ticker, 1)
        self.assertEqual(home.render_ticker, 2)
        self.assertEqual(home.last_events, [])

    def test_scheduled_increment_runs_off_thread_between_processing_markers(self) -> None:
        home, bus = _home()

        worker = home.schedule_increment(1)
        worker.join(timeout=2.0)

        self.assertFalse(worker.is_alive())
        self.assertTrue(worker.daemon)
        self.assertEqual(list(bus.drain()), [EnterProcessing(), Increment(1), ExitProcessing()])

    def test_schedule_action_spawns_worker(self) -> None:
        home, bus = _home()

        self.assertIsNone(home.update(ScheduleDecrement()))
        for worker in list(home._workers):
            worker.join(timeout=2.0)

        self.assertEqual(list(bus.drain()), [EnterProcessing(), Decrement(1), ExitProcessing()])

    def test_scheduling_without_sender_fails(self) -> None:
        with self.assertRaises(RuntimeError):
            Home().schedule_increment(1)

    def test_scheduled_work_after_bus_closes_is_dropped_quietly(self) -> None:
        home, bus = _home()
        bus.close()

        worker = home.schedule_increment(1)
        worker.join(timeout=2.0)

        self.assertFalse(worker.is_alive())

    def test_processing_nests_and_restores_previous_mode(self) -> None:
        home, _bus = _home()
        home.update(EnterProcessing())
        home.update(EnterProcessing())
        self.assertIs(home.mode, CursorMode.Processing)
        self.assertTrue(home.processing)

        home.update(ExitProcessing())
        self.assertIs(home.mode, CursorMode.Processing)
        home.update(ExitProcessing())
        self.assertIs(home.mode, CursorMode.Normal)
        self.assertFalse(home.processing)

        home.update(ExitProcessing())
        self.assertIs(home.mode, CursorMode.Normal)

    def test_processing_keeps_an_insert_cursor_taking_keys(self) -> None:
        home, _bus = _home()
        home.update(EnterInsert())
        home.update(ChangeMode(Mode.Insert))
        home.update(EnterProcessing())

        self.assertIs(home.mode, CursorMode.Insert)
        self.assertEqual(home.handle_raw_event(KeyEvent("a")), Update())
        home.update(ExitProcessing())
        self.assertIs(home.mode, CursorMode.Insert)

    def test_insert_entered_during_processing_survives_exit_processing(self) -> None:
        home, _bus = _home()
        home.update(EnterProcessing())
        self.assertEqual(home.update(EnterInsert()), ChangeMode(Mode.Insert))
        home.update(ChangeMode(Mode.Insert))

        home.update(ExitProcessing())

        self.assertIs(home.mode, CursorMode.Insert)
        self.assertEqual(home.handle_raw_event(KeyEvent("ESC")), EnterNormal())
        self.assertEqual(home.update(EnterNormal()), ChangeMode(Mode.Home))
        self.assertIs(home.mode, CursorMode.Normal)

    def test_leaving_insert_during_processing_waits_for_exit_processing(self) -> None:
        home, _bus = _home()
        home.update(EnterInsert())
        home.update(ChangeMode(Mode.Insert))
        home.update(EnterProcessing())

        self.assertEqual(home.update(EnterNormal()), ChangeMode(Mode.Home))
        self.assertIs(home.mode, CursorMode.Processing)
        home.update(ExitProcessing())
        self.assertIs(home.mode, CursorMode.Normal)

    def test_navigation_cycles_only_in_normal_mode_while_focused(self) -> None:
        home, _bus = _home()
        home.update(NavigateList(ListNavDirection.Left))
        self.assertEqual(home.todo_op_index, 3)

        home.update(ChangeMode(Mode.MainMenu))
        home.update(NavigateList(ListNavDirection.Right))
        self.assertEqual(home.todo_op_index, 3)


class HomeInsertModeTests(unittest.TestCase):
    def test_insert_round_trip_completes_input(self) -> None:
        home, bus = _home()

        self.assertEqual(home.update(EnterInsert()), ChangeMode(Mode.Insert))
        home.update(ChangeMode(Mode.Insert))
        self.assertEqual(home.handle_raw_event(KeyEvent("h")), Update())
        self.assertEqual(home.handle_raw_event(KeyEvent("i")), Update())
        self.assertEqual(home.input.value, "hi")

        self.assertEqual(home.handle_raw_event(KeyEvent("ENTER")), EnterNormal())
        self.assertEqual(list(bus.drain()), [CompleteInput("hi")])

        home.update(CompleteInput("hi"))
        self.assertEqual(home.text, ["hi"])
        self.assertEqual(home.input.value, "")
        self.assertEqual(home.update(EnterNormal()), ChangeMode(Mode.Home))
        self.assertIs(home.mode, CursorMode.Normal)

    def test_escape_leaves_insert_without_saving(self) -> None:
        home, bus = _home()
        home.update(EnterInsert())
        home.update(ChangeMode(Mode.Insert))
        home.handle_raw_event(KeyEvent("x"))

        self.assertEqual(home.handle_raw_event(KeyEvent("ESC")), EnterNormal())
        self.assertEqual(bus.pending(), 0)
        self.assertEqual(home.text, [])

    def test_keys_are_ignored_outside_insert_or_focus(self) -> None:
        home, _bus = _home()
        self.assertIsNone(home.handle_raw_event(KeyEvent("a")))
        self.assertEqual(home.input.value, "")

        unfocused, _ = _home(Mode.MainMenu)
        self.assertIsNone(unfocused.handle_raw_event(KeyEvent("a")))
        self.assertEqual(unfocused.last_events, [])

    def test_enter_normal_outside_insert_mode_requests_nothing(self) -> None:
        home, _bus = _home()
        self.assertIsNone(home.update(EnterNormal()))


class HomeDispatchTests(unittest.TestCase):
    """Home wired into the dispatch loop with the default keybindings."""

    def setUp(self) -> None:
        self.home = Home(Mode.Home)
        self.app = App(Config(), [self.home], mode=Mode.Home)
        self.app.startup()

    def _press(self, key: str) -> None:
        self.app.handle_event(KeyEvent(key))
        self.app.drain()

    def test_escape_leaves_insert_entered_while_increment_in_flight(self) -> None:
        self.app.dispatch(EnterProcessing())
        self._press("/")
        self.assertIs(self.app.mode, Mode.Insert)

        self.app.dispatch(Increment(1))
        self.app.dispatch(ExitProcessing())
        self.app.drain()
        self.assertIs(self.home.mode, CursorMode.Insert)

        self._press("x")
        self.assertEqual(self.home.input.value, "x")
        self._press("ESC")

        self.assertIs(self.app.mode, Mode.Home)
        self.assertIs(self.home.mode, CursorMode.Normal)
        self.assertEqual(self.home.counter, 1)

    def test_bound_keys_are_text_while_inserting(self) -> None:
        self._press("/")
        self._press("q")
        self._press("ENTER")

        self.assertIs(self.app.state, LoopState.RUNNING)
        self.assertIs(self.app.mode, Mode.Home)
        self.assertEqual(self.home.text, ["q"])


class HomeDrawTests(unittest.TestCase):
    def test_draw_shows_counter_tickers_and_input_box(self) -> None:
        home, _bus = _home()
        home.update(Increment(7))
        home.update(CompleteInput("buy milk"))
        canvas = Canvas(90, 24)

        home.draw(canvas, canvas.area)

        text = canvas.text()
        self.assertIn("modaltui", text)
        self.assertIn("Counter: 7", text)
        self.assertIn("App Ticker: 0", text)
        self.assertIn("buy milk", text)
        self.assertIn("Enter Input Mode", text)

    def test_draw_is_blank_when_not_focused(self) -> None:
        home, _bus = _home(Mode.MainMenu)
        canvas = Canvas(40, 12)

        home.draw(canvas, canvas.area)

        self.assertEqual(canvas.text().strip(), "")


if __name__ == "__main__":
    unittest.main()
