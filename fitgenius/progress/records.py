"""Personal-record detection for manually submitted logs."""

from collections.abc import Iterable
from dataclasses import dataclass

from fitgenius.config.settings import Language
from fitgenius.phrases import phrase
from fitgenius.workouts.types import ExerciseLog, ManualLogEntry


@dataclass(frozen=True)
class PersonalRecordResult:
    is_new_pr: bool
    previous_best: float
    message: str | None = None


def best_weight(exercise_name: str, history: Iterable[ExerciseLog]) -> float:
    """Heaviest logged weight for an exercise name (exact match), 0 if none."""
    return max((log.weight for log in history if log.exercise_name == exercise_name), default=0.0)


def detect_personal_record(
    candidate: ManualLogEntry | ExerciseLog,
    history: Iterable[ExerciseLog],
    *,
    language: Language = "en",
) -> PersonalRecordResult:
    """Decide whether a candidate log beats every prior weight for its exercise.

    Args:
        candidate: Log about to be stored
        history: Prior logs (the candidate must not be included)
        language: Message language

    Returns:
        Result with the flag, the prior best and a message when it is a record
    """
    previous_best = best_weight(candidate.exercise_name, history)
    if candidate.weight > 0 and candidate.weight > previous_best:
        return PersonalRecordResult(
            is_new_pr=True,
            previous_best=previous_best,
            message=phrase("personal_record", language, exercise=candidate.exercise_name),
        )
    return PersonalRecordResult(is_new_pr=False, previous_best=previous_best)
