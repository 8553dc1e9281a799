"""Session clock.

A SessionTimer is a single integer counter moved by scheduler ticks: work time
counts up, rest time counts down. Stopping cancels the tick handle
synchronously, and any tick that still arrives for a cancelled handle is
dropped.
"""

from collections.abc import Callable
from enum import StrEnum

from fitgenius.session.scheduler import TickHandle, TickScheduler


class TimerKind(StrEnum):
    COUNT_UP = "count_up"
    COUNTDOWN = "countdown"


class SessionTimer:
    def __init__(
        self,
        kind: TimerKind,
        scheduler: TickScheduler,
        *,
        interval: float = 1.0,
        on_expire: Callable[[], None] | None = None,
    ) -> None:
        self.kind = kind
        self.seconds = 0
        self._scheduler = scheduler
        self._interval = interval
        self._on_expire = on_expire
        self._handle: TickHandle | None = None
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    def reset(self, seconds: int = 0) -> None:
        self.seconds = max(0, seconds)

    def start(self) -> None:
        if self.running:
            return
        if self.kind == TimerKind.COUNTDOWN and self.seconds <= 0:
            self._expire()
            return
        self._generation += 1
        generation = self._generation
        self._handle = self._scheduler.call_every(self._interval, lambda: self._on_tick(generation))

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._generation += 1

    def pause(self) -> None:
        self.stop()

    def toggle(self) -> None:
        if self.running:
            self.pause()
        else:
            self.start()

    def adjust(self, delta_seconds: int) -> None:
        """Shift the counter, never below zero.

        A running countdown pushed to zero expires immediately.
        """
        self.seconds = max(0, self.seconds + delta_seconds)
        if self.kind == TimerKind.COUNTDOWN and self.seconds == 0 and self.running:
            self._expire()

    def tick(self) -> None:
        if self.kind == TimerKind.COUNT_UP:
            self.seconds += 1
            return
        self.seconds = max(0, self.seconds - 1)
        if self.seconds == 0:
            self._expire()

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation or self._handle is None:
            return
        self.tick()

    def _expire(self) -> None:
        self.stop()
        if self._on_expire is not None:
            self._on_expire()
