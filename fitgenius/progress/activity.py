"""History views for the dashboard and log browser.

Volume is derived from logs, never stored.
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from fitgenius.workouts.types import ExerciseLog


def daily_volume(logs: Iterable[ExerciseLog], days: int = 7) -> list[tuple[date, float]]:
    """Training volume per calendar date for the most recent active dates.

    Volume is sets * reps * weight; bodyweight logs use a weight factor of 1
    so they still show up.

    Args:
        logs: Log history
        days: Number of most recent active dates to return

    Returns:
        (date, volume) pairs in ascending date order
    """
    volume_by_date: dict[date, float] = defaultdict(float)
    for log in logs:
        weight_factor = log.weight if log.weight > 0 else 1
        volume_by_date[log.calendar_date] += log.sets * log.reps * weight_factor

    ordered = sorted(volume_by_date.items())
    if days <= 0:
        return []
    return ordered[-days:]


def group_logs_by_date(
    logs: Iterable[ExerciseLog],
    on_date: date | None = None,
) -> list[tuple[date, list[ExerciseLog]]]:
    """Group logs by calendar date, newest date first.

    Within a date, logs keep their stored order. When on_date is given only
    that date is returned.
    """
    grouped: dict[date, list[ExerciseLog]] = defaultdict(list)
    for log in logs:
        if on_date is not None and log.calendar_date != on_date:
            continue
        grouped[log.calendar_date].append(log)
    return sorted(grouped.items(), key=lambda item: item[0], reverse=True)
