import datetime as dt

from fitgenius.progress.streaks import current_streak, log_streak, weekly_activity

TODAY = dt.date(2026, 10, 19)


def days_ago(*offsets: int) -> list[dt.date]:
    return [TODAY - dt.timedelta(days=offset) for offset in offsets]


def test_no_dates_no_streak():
    assert current_streak([], TODAY) == 0


def test_three_consecutive_days_ending_today():
    assert current_streak(days_ago(0, 1, 2), TODAY) == 3


def test_streak_may_end_yesterday():
    assert current_streak(days_ago(1, 2, 3, 4), TODAY) == 4


def test_last_activity_two_days_ago_resets_streak():
    assert current_streak(days_ago(2, 3, 4, 5, 6, 7, 8, 9), TODAY) == 0


def test_gap_truncates_streak():
    assert current_streak(days_ago(0, 1, 3, 4, 5), TODAY) == 2


def test_duplicate_dates_count_once():
    assert current_streak(days_ago(0, 0, 1, 1, 2), TODAY) == 3


def test_future_dates_do_not_anchor_streak():
    assert current_streak([TODAY + dt.timedelta(days=1)], TODAY) == 0


def test_log_streak_uses_calendar_dates(make_log, now):
    logs = [make_log(when=now - dt.timedelta(days=offset)) for offset in range(7)]

    assert log_streak(logs, now.date()) == 7


def test_weekly_activity_flags_last_seven_days(make_log, now):
    logs = [make_log(when=now), make_log(when=now - dt.timedelta(days=3)), make_log(when=now - dt.timedelta(days=9))]

    week = weekly_activity(logs, now.date())

    assert [day for day, _ in week] == [now.date() - dt.timedelta(days=offset) for offset in range(6, -1, -1)]
    assert [active for _, active in week] == [False, False, False, True, False, False, True]
