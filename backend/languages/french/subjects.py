"""Grammatical subjects: the eight personal pronouns and first names."""
from dataclasses import dataclass

from languages.types import Gender

# Canonical pronoun keys, in person order. Conjugation lookups only
# ever use these keys.
PRONOUNS = ("je", "tu", "il", "elle", "nous", "vous", "ils", "elles")


@dataclass(frozen=True, slots=True)
class Subject:
    """A grammatical subject as it appears at the start of a sentence."""
    pronoun: str      # canonical key used for conjugation lookup
    display: str      # printable, capitalized form
    is_plural: bool
    gender: Gender
    is_name: bool = False


@dataclass(frozen=True, slots=True)
class Name:
    """A first name used as subject in expert exercises."""
    text: str
    gender: Gender


# je/tu/nous/vous carry no gender of their own; they agree as masculine
PRONOUN_SUBJECTS: tuple[Subject, ...] = (
    Subject("je", "Je", False, Gender.MASCULINE),
    Subject("tu", "Tu", False, Gender.MASCULINE),
    Subject("il", "Il", False, Gender.MASCULINE),
    Subject("elle", "Elle", False, Gender.FEMININE),
    Subject("nous", "Nous", True, Gender.MASCULINE),
    Subject("vous", "Vous", True, Gender.MASCULINE),
    Subject("ils", "Ils", True, Gender.MASCULINE),
    Subject("elles", "Elles", True, Gender.FEMININE),
)

NAMES: tuple[Name, ...] = (
    Name("Lucas", Gender.MASCULINE),
    Name("Hugo", Gender.MASCULINE),
    Name("Léo", Gender.MASCULINE),
    Name("Nathan", Gender.MASCULINE),
    Name("Arthur", Gender.MASCULINE),
    Name("Jules", Gender.MASCULINE),
    Name("Emma", Gender.FEMININE),
    Name("Léa", Gender.FEMININE),
    Name("Chloé", Gender.FEMININE),
    Name("Inès", Gender.FEMININE),
    Name("Jade", Gender.FEMININE),
    Name("Alice", Gender.FEMININE),
)


def name_subject(name: Name) -> Subject:
    """A single name behaves like il/elle."""
    pronoun = "il" if name.gender is Gender.MASCULINE else "elle"
    return Subject(pronoun, name.text, False, name.gender, is_name=True)


def compose_name_pair(first: Name, second: Name) -> Subject:
    """Coordinate two names: "Emma et Léa".

    The pair is plural; it is feminine (elles) only when both names are,
    otherwise masculine (ils).
    """
    both_feminine = first.gender is Gender.FEMININE and second.gender is Gender.FEMININE
    pronoun, gender = ("elles", Gender.FEMININE) if both_feminine else ("ils", Gender.MASCULINE)
    return Subject(pronoun, f"{first.text} et {second.text}", True, gender, is_name=True)
