"""End-of-session report for a workout day."""

from dataclasses import dataclass

from fitgenius.workouts.parsing import parse_leading_int
from fitgenius.workouts.types import WorkoutDay


@dataclass(frozen=True)
class SessionSummary:
    """Totals shown when a session completes.

    Attributes:
        exercise_count: Exercises in the day
        total_sets: Sum of target sets
        total_reps: Sum of target sets * target reps
        exercises: (name, sets text, reps text) per exercise, in order
    """

    exercise_count: int
    total_sets: int
    total_reps: int
    exercises: tuple[tuple[str, str, str], ...]


def _as_count(text: str) -> int:
    # Unreadable targets count as zero in the report
    value = parse_leading_int(text)
    return value if value is not None and value > 0 else 0


def summarize_day(day: WorkoutDay) -> SessionSummary:
    total_sets = 0
    total_reps = 0
    for exercise in day.exercises:
        sets = _as_count(exercise.sets)
        total_sets += sets
        total_reps += sets * _as_count(exercise.reps)
    return SessionSummary(
        exercise_count=len(day.exercises),
        total_sets=total_sets,
        total_reps=total_reps,
        exercises=tuple((exercise.name, exercise.sets, exercise.reps) for exercise in day.exercises),
    )
