"""A pausable millisecond stopwatch."""

from __future__ import annotations

import time
from typing import Callable


def _milliseconds() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Stopwatch measuring milliseconds from a clock, with pause support."""

    def __init__(self, clock: Callable[[], int] = _milliseconds) -> None:
        self._clock = clock
        self._start_ticks = 0
        self._pause_ticks = 0
        self._started = False
        self._paused = False

    def start(self) -> None:
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._pause_ticks = 0

    def stop(self) -> None:
        if self._started:
            self._started = False
            self._paused = False
            self._start_ticks = 0
            self._pause_ticks = 0

    def pause(self) -> None:
        if self._started and not self._paused:
            self._paused = True
            self._pause_ticks = self._clock() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self._clock() - self._pause_ticks
            self._pause_ticks = 0

    def ticks(self) -> int:
        """Milliseconds elapsed while running; 0 when not started."""
        if not self._started:
            return 0
        if self._paused:
            return self._pause_ticks
        return self._clock() - self._start_ticks

    def is_paused(self) -> bool:
        return self._paused and self._started

    def is_started(self) -> bool:
        return self._started