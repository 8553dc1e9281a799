import datetime as dt

from fitgenius.progress.activity import daily_volume, group_logs_by_date


def test_daily_volume_weights_bodyweight_as_one(make_log, now):
    logs = [
        make_log(name="Squat", sets=3, reps=10, weight=50, when=now),
        make_log(name="Push Up", sets=3, reps=20, weight=0, when=now),
        make_log(name="Squat", sets=2, reps=5, weight=100, when=now - dt.timedelta(days=1)),
    ]

    assert daily_volume(logs) == [
        (now.date() - dt.timedelta(days=1), 1000),
        (now.date(), 1560),
    ]


def test_daily_volume_keeps_most_recent_dates(make_log, now):
    logs = [make_log(when=now - dt.timedelta(days=offset)) for offset in range(10)]

    volume = daily_volume(logs, days=7)

    assert len(volume) == 7
    assert volume[0][0] == now.date() - dt.timedelta(days=6)
    assert volume[-1][0] == now.date()


def test_group_logs_by_date_newest_first(make_log, now):
    older = make_log(name="Row", when=now - dt.timedelta(days=2))
    first = make_log(name="Squat", when=now)
    second = make_log(name="Bench Press", when=now)

    grouped = group_logs_by_date([older, first, second])

    assert grouped == [(now.date(), [first, second]), (older.calendar_date, [older])]


def test_group_logs_filtered_to_one_date(make_log, now):
    older = make_log(name="Row", when=now - dt.timedelta(days=2))
    today = make_log(name="Squat", when=now)

    assert group_logs_by_date([older, today], on_date=older.calendar_date) == [(older.calendar_date, [older])]
