"""Workouts module - plan definitions and exercise logs.

This module provides:
- Read-only workout plan/day/exercise definitions
- Immutable exercise-log records
- Fail-closed parsing of free-text set/rep targets
"""

from fitgenius.workouts.parsing import parse_leading_int, parse_target_reps, parse_target_sets
from fitgenius.workouts.types import (
    ExerciseLog,
    LogSource,
    ManualLogEntry,
    WorkoutDay,
    WorkoutExercise,
    WorkoutPlan,
    new_exercise_log,
)

__all__ = [
    "ExerciseLog",
    "LogSource",
    "ManualLogEntry",
    "WorkoutDay",
    "WorkoutExercise",
    "WorkoutPlan",
    "new_exercise_log",
    "parse_leading_int",
    "parse_target_reps",
    "parse_target_sets",
]
