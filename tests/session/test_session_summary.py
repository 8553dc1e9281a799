from fitgenius.session.summary import summarize_day
from fitgenius.workouts.types import WorkoutDay, WorkoutExercise


def test_summary_totals_sets_and_reps():
    day = WorkoutDay(
        day="Day 1",
        exercises=[
            WorkoutExercise(name="Squat", sets="3", reps="10"),
            WorkoutExercise(name="Lunge", sets="2", reps="12/side"),
        ],
    )

    summary = summarize_day(day)

    assert summary.exercise_count == 2
    assert summary.total_sets == 5
    assert summary.total_reps == 54
    assert summary.exercises[1] == ("Lunge", "2", "12/side")


def test_summary_counts_unreadable_targets_as_zero():
    day = WorkoutDay(
        day="Day 1",
        exercises=[
            WorkoutExercise(name="Burpee", sets="AMRAP", reps="10"),
            WorkoutExercise(name="Plank", sets="3", reps="hold"),
        ],
    )

    summary = summarize_day(day)

    assert summary.total_sets == 3
    assert summary.total_reps == 0
