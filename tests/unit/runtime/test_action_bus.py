"""Tests for the multi-producer action bus."""

from __future__ import annotations

import threading
import unittest

from modaltui.actions import Increment, Quit, Render, Tick
from modaltui.errors import ChannelError
from modaltui.runtime import ActionBus


class ActionBusTests(unittest.TestCase):
    def test_actions_are_received_in_send_order(self) -> None:
        bus = ActionBus()
        sender = bus.sender()
        sender.send(Tick())
        sender.send(Render())
        sender.send(Quit())

        self.assertEqual(bus.pending(), 3)
        self.assertEqual(list(bus.drain()), [Tick(), Render(), Quit()])
        self.assertIsNone(bus.try_recv())

    def test_drain_includes_actions_sent_mid_drain(self) -> None:
        bus = ActionBus()
        sender = bus.sender()
        sender.send(Increment(1))

        seen = []
        for action in bus.drain():
            seen.append(action)
            if action == Increment(1):
                sender.send(Increment(2))

        self.assertEqual(seen, [Increment(1), Increment(2)])

    def test_cloned_senders_share_the_queue(self) -> None:
        bus = ActionBus()
        first = bus.sender()
        second = first.clone()
        first.send(Tick())
        second.send(Quit())

        self.assertEqual(list(bus.drain()), [Tick(), Quit()])

    def test_threaded_producers_keep_per_producer_order(self) -> None:
        bus = ActionBus()

        def produce(offset: int) -> None:
            sender = bus.sender()
            for amount in range(offset, offset + 50):
                sender.send(Increment(amount))

        workers = [threading.Thread(target=produce, args=(base,), daemon=True) for base in (0, 1000, 2000)]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join(timeout=2.0)

        received = [action.amount for action in bus.drain()]
        self.assertEqual(len(received), 150)
        for base in (0, 1000, 2000):
            mine = [amount for amount in received if base <= amount < base + 50]
            self.assertEqual(mine, list(range(base, base + 50)))

    def test_put_and_send_share_one_queue(self) -> None:
        bus = ActionBus()
        bus.put(Tick())
        bus.sender().send(Quit())

        self.assertEqual(list(bus.drain()), [Tick(), Quit()])
        bus.close()
        with self.assertRaises(ChannelError):
            bus.put(Render())

    def test_closed_bus_rejects_send_and_receive(self) -> None:
        bus = ActionBus()
        sender = bus.sender()
        bus.close()

        self.assertTrue(sender.closed)
        with self.assertRaises(ChannelError):
            sender.send(Tick())
        with self.assertRaises(ChannelError):
            bus.try_recv()


if __name__ == "__main__":
    unittest.main()
