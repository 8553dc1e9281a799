"""Root conftest for all tests.

Shared fixtures: a frozen clock, a manually driven tick scheduler, a speech
output that records what it was asked to say, in-memory stores and a
sample plan.
"""

import datetime as dt
from zoneinfo import ZoneInfo

import pytest

from fitgenius.config.settings import Settings
from fitgenius.session.scheduler import ManualTickScheduler
from fitgenius.session.service import WorkoutSessionService
from fitgenius.stores.memory import InMemoryAchievementStore, InMemoryLogStore
from fitgenius.workouts.types import ExerciseLog, WorkoutDay, WorkoutExercise, WorkoutPlan, new_exercise_log

UTC = ZoneInfo("UTC")
NOW = dt.datetime(2026, 10, 19, 10, 0, tzinfo=UTC)


class RecordingSpeech:
    """SpeechOutput that records calls instead of speaking."""

    def __init__(self) -> None:
        self.spoken: list[str] = []
        self.cancels = 0
        self.beeps = 0

    def speak(self, text: str) -> None:
        self.spoken.append(text)

    def cancel(self) -> None:
        self.cancels += 1

    def beep(self) -> None:
        self.beeps += 1


def make_log(
    *,
    name: str = "Squat",
    sets: int = 3,
    reps: int = 10,
    weight: float = 0.0,
    duration_minutes: float = 0.0,
    when: dt.datetime = NOW,
) -> ExerciseLog:
    return new_exercise_log(
        exercise_name=name,
        sets=sets,
        reps=reps,
        weight=weight,
        duration_minutes=duration_minutes,
        timestamp=when,
        calendar_date=when.astimezone(UTC).date(),
    )


@pytest.fixture
def now() -> dt.datetime:
    return NOW


@pytest.fixture
def test_settings() -> Settings:
    return Settings(timezone="UTC", language="en", rest_seconds=60, tick_interval_seconds=1.0)


@pytest.fixture
def scheduler() -> ManualTickScheduler:
    return ManualTickScheduler()


@pytest.fixture
def speech() -> RecordingSpeech:
    return RecordingSpeech()


@pytest.fixture
def log_store() -> InMemoryLogStore:
    return InMemoryLogStore()


@pytest.fixture
def achievement_store() -> InMemoryAchievementStore:
    return InMemoryAchievementStore()


@pytest.fixture
def sample_plan() -> WorkoutPlan:
    return WorkoutPlan(
        id="plan-1",
        goal="Strength",
        level="Beginner",
        equipment="Gym",
        duration_minutes=45,
        days=[
            WorkoutDay(
                day="Day 1",
                focus="Full body",
                exercises=[
                    WorkoutExercise(name="Squat", sets="3", reps="10"),
                    WorkoutExercise(name="Bench Press", sets="2", reps="8"),
                ],
            ),
            WorkoutDay(day="Rest Day", focus="Recovery", exercises=[]),
        ],
    )


@pytest.fixture
def service(log_store, achievement_store, speech, scheduler, test_settings, now) -> WorkoutSessionService:
    return WorkoutSessionService(
        log_store=log_store,
        achievement_store=achievement_store,
        speech=speech,
        scheduler=scheduler,
        settings=test_settings,
        clock=lambda: now,
    )


@pytest.fixture(name="make_log")
def make_log_fixture():
    return make_log
