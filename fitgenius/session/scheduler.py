"""Periodic tick scheduling for session timers.

Timers never sleep or spawn threads; they ask a scheduler for a periodic
callback on the host's single event-driven thread and cancel the handle when
they stop.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

# -------------------------------------------------------------------
# Scheduler Interface (Contract)
# -------------------------------------------------------------------


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    """Runs a callback every `interval` seconds until its handle is cancelled."""

    def call_every(self, interval: float, callback: Callable[[], None]) -> TickHandle: ...


# -------------------------------------------------------------------
# Manual Scheduler (Deterministic)
# -------------------------------------------------------------------


@dataclass
class _ManualInterval:
    interval: float
    callback: Callable[[], None]
    next_due: float
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTickScheduler:
    """Scheduler driven explicitly by the host or a test.

    Time only moves when advance() is called; due callbacks fire in time order.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._intervals: list[_ManualInterval] = []

    def call_every(self, interval: float, callback: Callable[[], None]) -> _ManualInterval:
        handle = _ManualInterval(interval=interval, callback=callback, next_due=self.now + interval)
        self._intervals.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        while True:
            due = [handle for handle in self._intervals if not handle.cancelled and handle.next_due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.next_due)
            self.now = handle.next_due
            handle.next_due += handle.interval
            handle.callback()
        self.now = target
        self._intervals = [handle for handle in self._intervals if not handle.cancelled]

    @property
    def active_count(self) -> int:
        return sum(1 for handle in self._intervals if not handle.cancelled)


# -------------------------------------------------------------------
# Asyncio Scheduler
# -------------------------------------------------------------------


class _AsyncioInterval:
    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._timer = loop.call_later(interval, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._timer = self._loop.call_later(self._interval, self._fire)
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()


class AsyncioTickScheduler:
    """Scheduler on an asyncio event loop using re-armed call_later."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_every(self, interval: float, callback: Callable[[], None]) -> _AsyncioInterval:
        loop = self._loop or asyncio.get_running_loop()
        logger.debug(f"Scheduling tick every {interval}s on asyncio loop")
        return _AsyncioInterval(loop, interval, callback)
