"""Activity streaks over calendar dates.

A streak is the run of consecutive active days ending at the most recent
active date, and it only counts while that date is today or yesterday.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from fitgenius.workouts.types import ExerciseLog

WEEK_DAYS = 7


def current_streak(active_dates: Iterable[date], today: date) -> int:
    """Count the current unbroken streak of active days.

    Args:
        active_dates: Dates with at least one log (duplicates allowed)
        today: Local calendar date the streak is anchored to

    Returns:
        Number of consecutive active days, 0 when the latest activity is
        older than yesterday
    """
    dates = sorted(set(active_dates), reverse=True)
    if not dates:
        return 0

    # A gap of two or more days since the last activity resets the streak entirely
    if dates[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    for newer, older in zip(dates, dates[1:]):
        if (newer - older).days != 1:
            break
        streak += 1
    return streak


def log_streak(logs: Iterable[ExerciseLog], today: date) -> int:
    return current_streak((log.calendar_date for log in logs), today)


def weekly_activity(logs: Iterable[ExerciseLog], today: date) -> list[tuple[date, bool]]:
    """Activity flags for the last seven days, oldest first, ending today."""
    active = {log.calendar_date for log in logs}
    days = [today - timedelta(days=offset) for offset in range(WEEK_DAYS - 1, -1, -1)]
    return [(day, day in active) for day in days]
