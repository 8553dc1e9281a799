"""Exercise content lookup.

The content service (search, AI-backed recommendation) lives outside the core.
The session only uses it to open an exercise guide, so a failed or empty
lookup never affects the workout.
"""

from typing import Protocol

from pydantic import BaseModel, Field

from fitgenius.config.settings import Language


class ExerciseDetails(BaseModel):
    """Guide content for an exercise."""

    id: str
    name: str
    body_part: str = ""
    equipment: str = ""
    target: str = ""
    youtube_id: str | None = None
    instructions: list[str] = Field(default_factory=list)


class ExerciseLookup(Protocol):
    def lookup_exercise_details(self, name: str, language: Language) -> list[ExerciseDetails]: ...


def _bodyweight(id_: str, name: str, body_part: str, target: str, youtube_id: str) -> ExerciseDetails:
    return ExerciseDetails(
        id=id_,
        name=name,
        body_part=body_part,
        equipment="Bodyweight",
        target=target,
        youtube_id=youtube_id,
    )


POPULAR_EXERCISES: tuple[ExerciseDetails, ...] = (
    _bodyweight("1", "Push Up", "Chest", "Pectorals", "IODxDxX7oi4"),
    _bodyweight("2", "Squat", "Legs", "Quadriceps", "YaXPRqUwItQ"),
    _bodyweight("3", "Plank", "Core", "Abs", "pSHjTRCQxIw"),
    _bodyweight("4", "Burpee", "Cardio", "Full Body", "TU8QYXLibKE"),
    _bodyweight("5", "Lunge", "Legs", "Glutes", "QOVaHwm-Q6U"),
    _bodyweight("6", "Glute Bridge", "Legs", "Glutes", "wPM8icPu6H8"),
    _bodyweight("7", "Mountain Climber", "Cardio", "Abs", "nmwgirgXLIg"),
    _bodyweight("8", "Bicycle Crunch", "Core", "Abs", "IwyvZENru84"),
    _bodyweight("9", "Leg Raise", "Core", "Abs", "JB2oyawG9KI"),
    _bodyweight("10", "Jumping Jack", "Cardio", "Full Body", "iSSAk4XCsRA"),
    _bodyweight("11", "Wall Sit", "Legs", "Quadriceps", "-cdph8zf0j0"),
    _bodyweight("12", "Tricep Dip (Chair)", "Arms", "Triceps", "0326dy_-CzM"),
)


class StaticExerciseCatalog:
    """Offline lookup over a fixed exercise list (case-insensitive substring match)."""

    def __init__(self, exercises: tuple[ExerciseDetails, ...] = POPULAR_EXERCISES) -> None:
        self._exercises = exercises

    def lookup_exercise_details(self, name: str, language: Language = "en") -> list[ExerciseDetails]:
        term = name.strip().casefold()
        if not term:
            return list(self._exercises)
        exact = [exercise for exercise in self._exercises if exercise.name.casefold() == term]
        partial = [
            exercise
            for exercise in self._exercises
            if term in exercise.name.casefold() and exercise not in exact
        ]
        return exact + partial
