"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .types import GrammaticalNumber, Verb


@dataclass(frozen=True, slots=True)
class GenderConfig:
    """Configuration for a grammatical gender."""
    id: str
    label: str
    short: str  # Single letter abbreviation


@dataclass(frozen=True, slots=True)
class NumberConfig:
    """Configuration for grammatical number."""
    id: GrammaticalNumber
    label: str


@dataclass(frozen=True, slots=True)
class VerbConfig:
    """A verb offered in exercises, with its full present-tense paradigm."""
    id: str
    label: str
    paradigm: tuple[tuple[str, str], ...]  # (pronoun, form) in person order


@dataclass(slots=True)
class GrammarConfig:
    """Language grammar configuration for frontend."""
    genders: list[GenderConfig] = field(default_factory=list)
    numbers: list[NumberConfig] = field(default_factory=list)
    verbs: list[VerbConfig] = field(default_factory=list)
    has_conjugation: bool = False
    has_elision: bool = False

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "genders": [{"id": g.id, "label": g.label, "short": g.short} for g in self.genders],
            "numbers": [{"id": n.id, "label": n.label} for n in self.numbers],
            "verbs": [
                {"id": v.id, "label": v.label, "paradigm": [{"pronoun": p, "form": f} for p, f in v.paradigm]}
                for v in self.verbs
            ],
            "hasConjugation": self.has_conjugation,
            "hasElision": self.has_elision,
        }


class LanguageModule(ABC):
    """Abstract base for language-specific functionality."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_grammar_config(self) -> GrammarConfig:
        """Get grammar configuration for frontend."""
        ...

    @abstractmethod
    def conjugate(self, verb: Verb, pronoun: str) -> str:
        """Present-tense form of `verb` for a canonical pronoun key.

        Raises on a pronoun outside the language's canonical set.
        """
        ...

    @abstractmethod
    def get_distractors(self, verb: Verb) -> tuple[str, ...]:
        """Wrong conjugated forms offered alongside the right one."""
        ...
