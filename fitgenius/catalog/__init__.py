from fitgenius.catalog.lookup import POPULAR_EXERCISES, ExerciseDetails, ExerciseLookup, StaticExerciseCatalog

__all__ = ["POPULAR_EXERCISES", "ExerciseDetails", "ExerciseLookup", "StaticExerciseCatalog"]
