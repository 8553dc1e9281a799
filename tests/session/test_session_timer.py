import pytest

from fitgenius.session.timer import SessionTimer, TimerKind


@pytest.fixture
def expirations() -> list[int]:
    return []


@pytest.fixture
def countdown(scheduler, expirations) -> SessionTimer:
    return SessionTimer(TimerKind.COUNTDOWN, scheduler, on_expire=lambda: expirations.append(1))


def test_count_up_ticks_once_per_interval(scheduler):
    timer = SessionTimer(TimerKind.COUNT_UP, scheduler)
    timer.start()

    scheduler.advance(3.5)

    assert timer.seconds == 3
    assert timer.running


def test_start_twice_does_not_double_tick(scheduler):
    timer = SessionTimer(TimerKind.COUNT_UP, scheduler)
    timer.start()
    timer.start()

    scheduler.advance(4)

    assert timer.seconds == 4
    assert scheduler.active_count == 1


def test_countdown_expires_once_and_stops(scheduler, countdown, expirations):
    countdown.reset(3)
    countdown.start()

    scheduler.advance(10)

    assert countdown.seconds == 0
    assert not countdown.running
    assert expirations == [1]


def test_countdown_started_at_zero_expires_immediately(countdown, expirations):
    countdown.start()

    assert expirations == [1]
    assert not countdown.running


def test_adjust_never_goes_below_zero(countdown):
    countdown.reset(20)
    countdown.adjust(-50)

    assert countdown.seconds == 0


def test_adjust_running_countdown_to_zero_expires(scheduler, countdown, expirations):
    countdown.reset(20)
    countdown.start()

    countdown.adjust(-20)

    assert expirations == [1]
    assert not countdown.running
    assert scheduler.active_count == 0


def test_adjust_paused_countdown_to_zero_does_not_expire(countdown, expirations):
    countdown.reset(20)
    countdown.adjust(-30)

    assert expirations == []


def test_stopped_timer_ignores_stale_ticks(scheduler):
    timer = SessionTimer(TimerKind.COUNT_UP, scheduler)
    timer.start()
    scheduler.advance(2)
    timer.stop()

    scheduler.advance(5)

    assert timer.seconds == 2
    assert scheduler.active_count == 0


def test_toggle_starts_then_pauses(scheduler):
    timer = SessionTimer(TimerKind.COUNT_UP, scheduler)
    timer.toggle()
    scheduler.advance(2)
    timer.toggle()
    scheduler.advance(2)

    assert timer.seconds == 2
    assert not timer.running


def test_reset_clamps_negative_values(scheduler):
    timer = SessionTimer(TimerKind.COUNTDOWN, scheduler)
    timer.reset(-5)

    assert timer.seconds == 0
