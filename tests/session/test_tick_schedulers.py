import asyncio

from fitgenius.session.scheduler import AsyncioTickScheduler, ManualTickScheduler
from fitgenius.session.timer import SessionTimer, TimerKind


def test_manual_scheduler_fires_in_time_order():
    scheduler = ManualTickScheduler()
    fired: list[tuple[str, float]] = []
    scheduler.call_every(2.0, lambda: fired.append(("slow", scheduler.now)))
    scheduler.call_every(1.0, lambda: fired.append(("fast", scheduler.now)))

    scheduler.advance(4)

    assert fired == [
        ("fast", 1.0),
        ("slow", 2.0),
        ("fast", 2.0),
        ("fast", 3.0),
        ("slow", 4.0),
        ("fast", 4.0),
    ]
    assert scheduler.now == 4


def test_manual_scheduler_cancel_inside_callback_stops_further_ticks():
    scheduler = ManualTickScheduler()
    calls = []

    def callback():
        calls.append(scheduler.now)
        handle.cancel()

    handle = scheduler.call_every(1.0, callback)
    scheduler.advance(5)

    assert calls == [1.0]
    assert scheduler.active_count == 0


def test_asyncio_scheduler_drives_timer_on_event_loop():
    async def run() -> tuple[int, bool]:
        timer = SessionTimer(TimerKind.COUNT_UP, AsyncioTickScheduler(), interval=0.01)
        timer.start()
        await asyncio.sleep(0.105)
        timer.stop()
        seconds = timer.seconds
        await asyncio.sleep(0.05)
        return seconds, timer.seconds == seconds

    seconds, frozen_after_stop = asyncio.run(run())

    assert seconds >= 3
    assert frozen_after_stop
