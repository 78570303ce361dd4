from engines.exercises import (
    ExerciseGenerator,
    ExerciseRecord,
    ExerciseType,
    Variant,
    generate_exercises,
)
from engines.records import BestScore, ScoreTracker, is_new_record

__all__ = [
    "ExerciseGenerator",
    "ExerciseRecord",
    "ExerciseType",
    "Variant",
    "generate_exercises",
    "BestScore",
    "ScoreTracker",
    "is_new_record",
]
