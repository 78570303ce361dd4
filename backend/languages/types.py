"""Shared type definitions for language modules.

Closed enumerations: each value set is fixed, dispatch on them uses
exhaustive `match` statements.
"""
from enum import Enum
from typing import Literal

GrammaticalNumber = Literal["singular", "plural"]


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"


class Verb(str, Enum):
    """Verbs covered by the exercises (value is the infinitive)."""
    AVOIR = "avoir"
    ETRE = "être"
    ALLER = "aller"


class Level(str, Enum):
    """Difficulty levels (value is the French label shown to children)."""
    BEGINNER = "débutant"
    INTERMEDIATE = "intermédiaire"
    EXPERT = "expert"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        match self:
            case Level.BEGINNER:
                return "green"
            case Level.INTERMEDIATE:
                return "orange"
            case Level.EXPERT:
                return "red"
