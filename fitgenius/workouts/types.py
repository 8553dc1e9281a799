"""Workout plan and exercise-log schema.

Plans are authored elsewhere (generator, import, manual editing) and are
read-only to the session runner. Exercise logs are append-only records of
completed work:
- Targets (sets/reps) are free text and parsed defensively
- Weight 0 means bodyweight or unspecified
- A log is never edited after creation
"""

import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogSource = Literal["manual", "session"]


class WorkoutExercise(BaseModel):
    """One exercise inside a workout day.

    Attributes:
        name: Exercise name as shown to the user
        sets: Target set count, free text (e.g. "3", "3-4")
        reps: Target rep descriptor, free text (e.g. "10", "30s", "12/side")
    """

    name: str
    sets: str = "3"
    reps: str = "10"

    @field_validator("sets", "reps", mode="before")
    @classmethod
    def coerce_to_text(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


class WorkoutDay(BaseModel):
    """Ordered exercises for one training day."""

    day: str
    focus: str = ""
    exercises: list[WorkoutExercise] = Field(default_factory=list)


class WorkoutPlan(BaseModel):
    """Multi-day workout plan.

    Attributes:
        id: Plan identifier
        created_at: Creation time
        goal: Training goal label
        level: Experience level label
        equipment: Equipment label
        duration_minutes: Planned duration of one day, if declared
        days: Training days in order
    """

    id: str
    created_at: datetime | None = None
    goal: str = ""
    level: str = ""
    equipment: str = ""
    duration_minutes: int | None = Field(default=None, ge=0)
    days: list[WorkoutDay] = Field(default_factory=list)


class ExerciseLog(BaseModel):
    """Completed-exercise record.

    Attributes:
        id: Unique log id
        exercise_name: Exercise name
        sets: Completed sets
        reps: Reps per set
        weight: Load in kg (0 = bodyweight/unspecified)
        duration_minutes: Time spent
        timestamp: Moment the log was created
        calendar_date: Local calendar date of the log
        source: "manual" for user-entered logs, "session" for guided-session saves
    """

    model_config = ConfigDict(frozen=True)

    id: str
    exercise_name: str
    sets: int = Field(ge=0)
    reps: int = Field(ge=0)
    weight: float = Field(default=0.0, ge=0)
    duration_minutes: float = Field(default=0.0, ge=0)
    timestamp: datetime
    calendar_date: date
    source: LogSource = "manual"


class ManualLogEntry(BaseModel):
    """User-submitted log form, before it becomes an ExerciseLog."""

    exercise_name: str = Field(min_length=1)
    sets: int = Field(default=3, ge=0)
    reps: int = Field(default=10, ge=0)
    weight: float = Field(default=0.0, ge=0)
    duration_minutes: float = Field(default=0.0, ge=0)

    @field_validator("exercise_name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("exercise_name cannot be blank")
        return stripped


def new_exercise_log(
    *,
    exercise_name: str,
    sets: int,
    reps: int,
    timestamp: datetime,
    calendar_date: date,
    weight: float = 0.0,
    duration_minutes: float = 0.0,
    source: LogSource = "manual",
) -> ExerciseLog:
    """Create an ExerciseLog with a fresh unique id."""
    return ExerciseLog(
        id=str(uuid.uuid4()),
        exercise_name=exercise_name,
        sets=sets,
        reps=reps,
        weight=weight,
        duration_minutes=duration_minutes,
        timestamp=timestamp,
        calendar_date=calendar_date,
        source=source,
    )
