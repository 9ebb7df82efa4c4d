"""Ticks-per-second and frames-per-second readout on the top row."""

from __future__ import annotations

import time
from collections.abc import Callable

from ..actions import BaseAction, Render, Tick
from ..render.canvas import Canvas, Rect
from .base import Component


class FpsCounter(Component):
    """Measure tick and render rates over one-second windows."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        start = clock()
        self.app_start = start
        self.app_frames = 0
        self.app_rate = 0.0
        self.render_start = start
        self.render_frames = 0
        self.render_rate = 0.0

    def app_tick(self) -> None:
        self.app_frames += 1
        now = self._clock()
        elapsed = now - self.app_start
        if elapsed >= 1.0:
            self.app_rate = self.app_frames / elapsed
            self.app_start = now
            self.app_frames = 0

    def render_tick(self) -> None:
        self.render_frames += 1
        now = self._clock()
        elapsed = now - self.render_start
        if elapsed >= 1.0:
            self.render_rate = self.render_frames / elapsed
            self.render_start = now
            self.render_frames = 0

    def update(self, action: BaseAction) -> BaseAction | None:
        if isinstance(action, Tick):
            self.app_tick()
        elif isinstance(action, Render):
            self.render_tick()
        return None

    def draw(self, canvas: Canvas, area: Rect) -> None:
        label = f"{self.app_rate:.2f} ticks per sec (app) {self.render_rate:.2f} frames per sec (render)"
        width = min(len(label), area.width)
        canvas.put_text(area.right - width, area.y, label, "", max_width=width)
