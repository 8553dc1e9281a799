import pytest

from fitgenius.progress.records import best_weight, detect_personal_record
from fitgenius.workouts.types import ManualLogEntry


@pytest.fixture
def bench_history(make_log):
    return [make_log(name="Bench Press", weight=50), make_log(name="Bench Press", weight=60)]


def test_heavier_weight_is_a_record(bench_history):
    result = detect_personal_record(ManualLogEntry(exercise_name="Bench Press", weight=65), bench_history)

    assert result.is_new_pr
    assert result.previous_best == 60
    assert result.message == "New personal record for Bench Press!"


def test_equal_weight_is_not_a_record(bench_history):
    result = detect_personal_record(ManualLogEntry(exercise_name="Bench Press", weight=60), bench_history)

    assert not result.is_new_pr
    assert result.message is None


def test_first_weighted_log_is_a_record():
    result = detect_personal_record(ManualLogEntry(exercise_name="Squat", weight=10), [])

    assert result.is_new_pr
    assert result.previous_best == 0


def test_bodyweight_log_is_never_a_record():
    result = detect_personal_record(ManualLogEntry(exercise_name="Push Up", weight=0), [])

    assert not result.is_new_pr


def test_other_exercises_do_not_count(make_log):
    history = [make_log(name="Squat", weight=140)]

    assert best_weight("Bench Press", history) == 0
    assert detect_personal_record(ManualLogEntry(exercise_name="Bench Press", weight=40), history).is_new_pr
