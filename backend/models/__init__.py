from models.progress import Child, Exercise, Score

__all__ = [
    "Child", "Exercise", "Score",
]
