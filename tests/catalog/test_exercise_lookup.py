from fitgenius.catalog.lookup import POPULAR_EXERCISES, StaticExerciseCatalog


def test_exact_match_ranks_first():
    results = StaticExerciseCatalog().lookup_exercise_details("lunge")

    assert results[0].name == "Lunge"


def test_substring_search_is_case_insensitive():
    names = [exercise.name for exercise in StaticExerciseCatalog().lookup_exercise_details("PLANK")]

    assert names == ["Plank"]


def test_blank_term_returns_whole_catalog():
    assert len(StaticExerciseCatalog().lookup_exercise_details("  ")) == len(POPULAR_EXERCISES)


def test_unknown_exercise_returns_nothing():
    assert StaticExerciseCatalog().lookup_exercise_details("Snatch") == []
