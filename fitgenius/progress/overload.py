"""Progressive-overload advisor.

Looks at the most recent log for an exercise and proposes the next weight.
Bodyweight work (weight 0) gets no suggestion.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from fitgenius.config.settings import Language
from fitgenius.phrases import phrase
from fitgenius.workouts.types import ExerciseLog

DEFAULT_INCREMENT_KG = 2.5


@dataclass(frozen=True)
class OverloadSuggestion:
    """Next-session target derived from the last recorded performance.

    Attributes:
        exercise_name: Exercise the suggestion is for
        last_weight: Weight of the most recent log
        last_reps: Reps of the most recent log
        suggested_weight: Proposed weight for this session
        message: User-facing message
    """

    exercise_name: str
    last_weight: float
    last_reps: int
    suggested_weight: float
    message: str


def _format_number(value: float) -> str:
    return f"{value:g}"


def history_for_exercise(exercise_name: str, logs: Iterable[ExerciseLog]) -> list[ExerciseLog]:
    """Logs for one exercise (case-insensitive exact name), newest first."""
    wanted = exercise_name.strip().casefold()
    matching = [log for log in logs if log.exercise_name.strip().casefold() == wanted]
    return sorted(matching, key=lambda log: log.timestamp, reverse=True)


def suggest_overload(
    exercise_name: str,
    logs: Iterable[ExerciseLog],
    *,
    increment_kg: float = DEFAULT_INCREMENT_KG,
    language: Language = "en",
) -> OverloadSuggestion | None:
    """Propose the next weight for an exercise.

    Args:
        exercise_name: Exercise about to be performed
        logs: Full log history
        increment_kg: Weight step added to the last weight
        language: Message language

    Returns:
        Suggestion, or None when there is no history or the last log was bodyweight
    """
    history = history_for_exercise(exercise_name, logs)
    if not history:
        return None

    last = history[0]
    if last.weight <= 0:
        return None

    suggested = round(last.weight + increment_kg, 2)
    message = phrase(
        "overload",
        language,
        weight=_format_number(last.weight),
        reps=last.reps,
        newWeight=_format_number(suggested),
    )
    return OverloadSuggestion(
        exercise_name=exercise_name,
        last_weight=last.weight,
        last_reps=last.reps,
        suggested_weight=suggested,
        message=message,
    )
