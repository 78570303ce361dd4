"""Exercise Generator Engine

Builds multiple-choice (QCM) conjugation exercises for avoir, être and
aller: a French sentence with the verb blanked out, the correct form and
two wrong forms of the same verb.

Levels:
  débutant       plain pronoun sentences       "J'___ un chat"
  intermédiaire  context / negation / adverb   "Tu ne ___ pas contents"
  expert         first names, alone or paired  "Emma et Léa ___ tristes"
"""
import random
from dataclasses import dataclass
from enum import Enum
from uuid import uuid4

from core.errors import (
    AppError,
    Ok,
    Result,
    invalid_choice,
    invalid_type,
    invariant_violated,
    out_of_range,
    raise_result,
)
from core.logging import engine_logger
from languages import get_module, Level, Verb
from languages.french.complements import (
    ALLER_COMPLEMENTS,
    AVOIR_COMPLEMENTS,
    DEFAULT_ADJECTIVES,
    matching_adjectives,
)
from languages.french.grammar import (
    ELIDED_JE,
    lowercase_subject,
    negation_particle,
    partitive_negation,
)
from languages.french.phrases import CONTEXT_PHRASES, FREQUENCY_ADVERBS
from languages.french.subjects import (
    NAMES,
    PRONOUN_SUBJECTS,
    Subject,
    compose_name_pair,
    name_subject,
)
from languages.types import Gender

log = engine_logger()

BLANK = "___"
OPTION_COUNT = 3


class ExerciseType(str, Enum):
    QCM = "QCM"


class Variant(str, Enum):
    """Surface shape of the sentence."""
    PLAIN = "plain"
    CONTEXT = "context"
    NEGATION = "negation"
    ADVERB = "adverb"
    NAME = "name"
    NAME_ADVERB = "name_adverb"
    NAME_PAIR = "name_pair"


INTERMEDIATE_VARIANTS = (Variant.CONTEXT, Variant.NEGATION, Variant.ADVERB)
EXPERT_VARIANTS = (Variant.NAME, Variant.NAME_ADVERB, Variant.NAME_PAIR)


@dataclass(frozen=True, slots=True)
class Combination:
    """A coherent subject + verb + complement, with its plain sentence."""
    subject: Subject
    verb: Verb
    complement: str
    correct_answer: str
    sentence: str

    @property
    def elides(self) -> bool:
        """je + ai is written j'ai."""
        return not self.subject.is_name and self.subject.pronoun == "je" and self.verb is Verb.AVOIR


@dataclass(frozen=True, slots=True)
class ExerciseRecord:
    """One generated exercise, handed over to the caller as-is."""
    id: str
    type: ExerciseType
    verb: Verb
    level: Level
    sentence: str
    correct_answer: str
    options: tuple[str, ...]
    subject: str
    variant: Variant

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "verb": self.verb.value,
            "level": self.level.value,
            "sentence": self.sentence,
            "correctAnswer": self.correct_answer,
            "options": list(self.options),
            "subject": self.subject,
            "variant": self.variant.value,
        }


def render_sentence(subject: Subject, verb: Verb, complement: str, adverb: str | None = None) -> str:
    """Sentence-initial rendering: "J'___ un chat", "Il ___ souvent au parc"."""
    tail = f"{adverb} {complement}" if adverb else complement
    if not subject.is_name and subject.pronoun == "je" and verb is Verb.AVOIR:
        return f"{ELIDED_JE}{BLANK} {tail}"
    return f"{subject.display} {BLANK} {tail}"


class ExerciseGenerator:
    """Generates QCM exercises from the static French tables.

    All randomness comes from the injected `random.Random`, so a seeded
    instance reproduces the same batch (ids aside).
    """

    __slots__ = ('_rng', '_lang')

    def __init__(self, rng: random.Random | None = None, language: str = "fr"):
        self._rng = rng if rng is not None else random.Random()
        self._lang = get_module(language)

    # --- combinations -----------------------------------------------------

    def build_combination(self) -> Combination:
        """Random pronoun subject, verb and agreeing complement."""
        subject = self._rng.choice(PRONOUN_SUBJECTS)
        return self._combine(subject)

    def build_name_combination(self, pair: bool = False) -> Combination:
        """Same as build_combination, with a first name (or two) as subject."""
        if pair:
            first, second = self._rng.sample(NAMES, 2)
            subject = compose_name_pair(first, second)
        else:
            subject = name_subject(self._rng.choice(NAMES))
        return self._combine(subject)

    def _combine(self, subject: Subject) -> Combination:
        verb = self._rng.choice(tuple(Verb))
        correct = self._lang.conjugate(verb, subject.pronoun)
        complement = self._select_complement(verb, subject)
        return Combination(
            subject=subject,
            verb=verb,
            complement=complement,
            correct_answer=correct,
            sentence=render_sentence(subject, verb, complement),
        )

    def _select_complement(self, verb: Verb, subject: Subject) -> str:
        match verb:
            case Verb.AVOIR:
                return self._rng.choice(AVOIR_COMPLEMENTS)
            case Verb.ETRE:
                candidates = matching_adjectives(subject.gender, subject.is_plural)
                if not candidates:
                    masculine = subject.gender is Gender.MASCULINE
                    fallback = DEFAULT_ADJECTIVES[(masculine, not subject.is_plural)]
                    log.warning("adjective_fallback", subject=subject.pronoun, adjective=fallback)
                    return fallback
                return self._rng.choice(candidates).text
            case Verb.ALLER:
                return self._rng.choice(ALLER_COMPLEMENTS)

    # --- options ----------------------------------------------------------

    def generate_options(self, verb: Verb, correct_answer: str) -> tuple[str, ...]:
        """Correct answer plus two distinct wrong forms, shuffled."""
        pool = self._lang.get_distractors(verb)
        if len(set(pool) - {correct_answer}) < OPTION_COUNT - 1:
            raise_result(invariant_violated(
                "distractors",
                f"not enough wrong forms for {verb.value}/{correct_answer}",
                origin="engine.exercises",
            ))

        options = [correct_answer]
        while len(options) < OPTION_COUNT:
            candidate = self._rng.choice(pool)
            if candidate not in options:
                options.append(candidate)

        self._rng.shuffle(options)
        return tuple(options)

    # --- variants ---------------------------------------------------------

    def _plain(self) -> tuple[Combination, str]:
        combo = self.build_combination()
        return combo, combo.sentence

    def _context(self) -> tuple[Combination, str]:
        combo = self.build_combination()
        prefix = self._rng.choice(CONTEXT_PHRASES)
        if combo.elides:
            return combo, f"{prefix}{ELIDED_JE.lower()}{BLANK} {combo.complement}"
        return combo, f"{prefix}{lowercase_subject(combo.subject.display)} {BLANK} {combo.complement}"

    def _negation(self) -> tuple[Combination, str]:
        combo = self.build_combination()
        particle = negation_particle(combo.correct_answer)
        # Only avoir's indefinite objects change under negation
        complement = partitive_negation(combo.complement) if combo.verb is Verb.AVOIR else combo.complement
        # ne/n' takes the elision slot, so je stays "Je"
        return combo, f"{combo.subject.display} {particle}{BLANK} pas {complement}"

    def _adverb(self) -> tuple[Combination, str]:
        combo = self.build_combination()
        adverb = self._rng.choice(FREQUENCY_ADVERBS)
        return combo, render_sentence(combo.subject, combo.verb, combo.complement, adverb)

    def _name(self) -> tuple[Combination, str]:
        combo = self.build_name_combination()
        return combo, combo.sentence

    def _name_adverb(self) -> tuple[Combination, str]:
        combo = self.build_name_combination()
        adverb = self._rng.choice(FREQUENCY_ADVERBS)
        return combo, render_sentence(combo.subject, combo.verb, combo.complement, adverb)

    def _name_pair(self) -> tuple[Combination, str]:
        combo = self.build_name_combination(pair=True)
        return combo, combo.sentence

    # --- exercises --------------------------------------------------------

    def choose_variant(self, level: Level) -> Variant:
        match level:
            case Level.BEGINNER:
                return Variant.PLAIN
            case Level.INTERMEDIATE:
                return self._rng.choice(INTERMEDIATE_VARIANTS)
            case Level.EXPERT:
                return self._rng.choice(EXPERT_VARIANTS)

    def build_exercise(self, level: Level, variant: Variant) -> ExerciseRecord:
        """Build one exercise of an explicit variant."""
        match variant:
            case Variant.PLAIN:
                combo, sentence = self._plain()
            case Variant.CONTEXT:
                combo, sentence = self._context()
            case Variant.NEGATION:
                combo, sentence = self._negation()
            case Variant.ADVERB:
                combo, sentence = self._adverb()
            case Variant.NAME:
                combo, sentence = self._name()
            case Variant.NAME_ADVERB:
                combo, sentence = self._name_adverb()
            case Variant.NAME_PAIR:
                combo, sentence = self._name_pair()

        return ExerciseRecord(
            id=f"{level.name.lower()}_qcm_{combo.subject.pronoun}_{combo.verb.name.lower()}_{uuid4().hex[:8]}",
            type=ExerciseType.QCM,
            verb=combo.verb,
            level=level,
            sentence=sentence,
            correct_answer=combo.correct_answer,
            options=self.generate_options(combo.verb, combo.correct_answer),
            subject=combo.subject.pronoun,
            variant=variant,
        )

    def generate_exercise(self, level: Level) -> ExerciseRecord:
        return self.build_exercise(level, self.choose_variant(level))

    def generate(self, level: Level, count: int) -> list[ExerciseRecord]:
        """Generate an ordered batch of `count` exercises for `level`."""
        raise_result(validate_count(count))
        exercises = [self.generate_exercise(level) for _ in range(count)]
        log.debug(
            "exercises_generated",
            level=level.value,
            count=len(exercises),
            variants=sorted({ex.variant.value for ex in exercises}),
        )
        return exercises


def parse_level(value: object) -> Result[Level, AppError]:
    """Accept a Level, its French label ("débutant") or its name ("beginner")."""
    if isinstance(value, Level):
        return Ok(value)
    if not isinstance(value, str):
        return invalid_type("level", "string", value, origin="engine.exercises")

    for level in Level:
        if value == level.value or value.lower() == level.name.lower():
            return Ok(level)
    return invalid_choice("level", value, [lvl.value for lvl in Level], origin="engine.exercises")


def validate_count(count: object) -> Result[int, AppError]:
    if isinstance(count, bool) or not isinstance(count, int):
        return invalid_type("count", "integer", count, origin="engine.exercises")
    if count < 0:
        return out_of_range("count", count, min_val=0, origin="engine.exercises")
    return Ok(count)


def generate_exercises(
    level: Level | str,
    count: int,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> list[ExerciseRecord]:
    """Generate `count` exercises for `level`.

    Input is validated before anything is generated; invalid input raises
    AppErrorException carrying a validation error. Pass `rng` or `seed`
    for reproducible output.
    """
    parsed = parse_level(level)
    raise_result(parsed)
    raise_result(validate_count(count))

    gen = ExerciseGenerator(rng if rng is not None else random.Random(seed))
    return gen.generate(parsed.unwrap(), count)
