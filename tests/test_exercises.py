import random

import pytest

from core.errors import AppErrorException, ErrorCode
from engines.exercises import (
    BLANK,
    EXPERT_VARIANTS,
    INTERMEDIATE_VARIANTS,
    ExerciseGenerator,
    ExerciseType,
    Variant,
    generate_exercises,
    parse_level,
    validate_count,
)
from languages import Level, Verb
from languages.french.complements import AVOIR_COMPLEMENTS, DEFAULT_ADJECTIVES, matching_adjectives
from languages.french.conjugation import CONJUGATIONS
from languages.french.grammar import partitive_negation, starts_with_vowel
from languages.french.phrases import CONTEXT_PHRASES, FREQUENCY_ADVERBS
from languages.french.subjects import NAMES, PRONOUN_SUBJECTS, Subject
from languages.types import Gender

SAMPLE = 300


def _subject(pronoun: str) -> Subject:
    return next(s for s in PRONOUN_SUBJECTS if s.pronoun == pronoun)


def _batch(level: Level, variant: Variant | None = None, seed: int = 7, count: int = SAMPLE):
    gen = ExerciseGenerator(random.Random(seed))
    if variant is None:
        return gen.generate(level, count)
    return [gen.build_exercise(level, variant) for _ in range(count)]


@pytest.mark.parametrize("level", list(Level))
@pytest.mark.parametrize("count", [0, 1, 20])
def test_count_and_level(level, count):
    records = generate_exercises(level, count, seed=3)
    assert len(records) == count
    assert all(r.level is level for r in records)


@pytest.mark.parametrize("level", list(Level))
def test_options_hold_correct_answer_once(level):
    for record in _batch(level):
        assert len(record.options) == 3
        assert len(set(record.options)) == 3
        assert record.options.count(record.correct_answer) == 1
        assert set(record.options) <= set(CONJUGATIONS[record.verb].values())


@pytest.mark.parametrize("level", list(Level))
def test_sentence_has_exactly_one_blank(level):
    for record in _batch(level):
        assert record.sentence.count(BLANK) == 1


@pytest.mark.parametrize("level", list(Level))
def test_correct_answer_matches_subject(level):
    for record in _batch(level):
        assert record.correct_answer == CONJUGATIONS[record.verb][record.subject]


@pytest.mark.parametrize("level", list(Level))
def test_etre_adjective_agrees_with_subject(level):
    for record in _batch(level):
        if record.verb is not Verb.ETRE:
            continue
        subject = _subject(record.subject)
        adjective = record.sentence.rsplit(" ", 1)[-1]
        assert adjective in {adj.text for adj in matching_adjectives(subject.gender, subject.is_plural)}


def test_beginner_uses_plain_variant_only():
    assert {r.variant for r in _batch(Level.BEGINNER)} == {Variant.PLAIN}


def test_intermediate_and_expert_variants():
    assert {r.variant for r in _batch(Level.INTERMEDIATE)} == set(INTERMEDIATE_VARIANTS)
    assert {r.variant for r in _batch(Level.EXPERT)} == set(EXPERT_VARIANTS)


def test_ids_carry_level_and_are_unique():
    records = _batch(Level.INTERMEDIATE)
    assert len({r.id for r in records}) == len(records)
    for record in records:
        assert record.id.startswith(f"intermediate_qcm_{record.subject}_{record.verb.name.lower()}_")


def test_je_avoir_elides_in_plain_sentences():
    je_avoir = [r for r in _batch(Level.BEGINNER) if r.subject == "je" and r.verb is Verb.AVOIR]
    assert je_avoir
    for record in je_avoir:
        assert record.sentence.startswith(f"J'{BLANK} ")
        assert record.correct_answer == "ai"

    for record in _batch(Level.BEGINNER):
        if record.subject == "je" and record.verb is not Verb.AVOIR:
            assert record.sentence.startswith(f"Je {BLANK} ")


def test_je_avoir_elides_after_adverb_insertion():
    records = [r for r in _batch(Level.INTERMEDIATE, Variant.ADVERB) if r.subject == "je" and r.verb is Verb.AVOIR]
    assert records
    for record in records:
        assert record.sentence.startswith(f"J'{BLANK} ")
        assert record.sentence.split(" ")[1] in FREQUENCY_ADVERBS


def test_context_lowercases_subject():
    for record in _batch(Level.INTERMEDIATE, Variant.CONTEXT):
        prefix = next(p for p in CONTEXT_PHRASES if record.sentence.startswith(p))
        rest = record.sentence[len(prefix):]
        if record.subject == "je" and record.verb is Verb.AVOIR:
            assert rest.startswith(f"j'{BLANK} ")
        else:
            assert rest.startswith(f"{record.subject} {BLANK} ")


def test_negation_particle_follows_correct_answer():
    records = _batch(Level.INTERMEDIATE, Variant.NEGATION)
    for record in records:
        if starts_with_vowel(record.correct_answer):
            assert f"n'{BLANK} pas " in record.sentence
        else:
            assert f"ne {BLANK} pas " in record.sentence
    # je is never elided when negated
    assert all(r.sentence.startswith("Je ") for r in records if r.subject == "je")


def test_negated_avoir_uses_partitive():
    expected = {partitive_negation(c) for c in AVOIR_COMPLEMENTS}
    records = [r for r in _batch(Level.INTERMEDIATE, Variant.NEGATION) if r.verb is Verb.AVOIR]
    assert records
    for record in records:
        complement = record.sentence.split(" pas ", 1)[1]
        assert complement in expected
        assert not complement.startswith(("un ", "une ", "des "))


def test_expert_sentences_start_with_names():
    name_texts = {name.text for name in NAMES}
    pronoun_displays = {s.display for s in PRONOUN_SUBJECTS}
    for record in _batch(Level.EXPERT):
        first_word = record.sentence.split(" ", 1)[0]
        assert first_word in name_texts
        assert first_word not in pronoun_displays


def test_name_pair_pronoun():
    genders = {name.text: name.gender for name in NAMES}
    for record in _batch(Level.EXPERT, Variant.NAME_PAIR):
        first, second = record.sentence.split(f" {BLANK}", 1)[0].split(" et ")
        assert first != second
        both_feminine = genders[first] is Gender.FEMININE and genders[second] is Gender.FEMININE
        assert record.subject == ("elles" if both_feminine else "ils")


def test_single_name_pronoun():
    genders = {name.text: name.gender for name in NAMES}
    for record in _batch(Level.EXPERT, Variant.NAME):
        name = record.sentence.split(" ", 1)[0]
        assert record.subject == ("il" if genders[name] is Gender.MASCULINE else "elle")


def test_beginner_end_to_end():
    records = generate_exercises(Level.BEGINNER, 5)
    assert len(records) == 5
    for record in records:
        data = record.to_dict()
        assert data["type"] == "QCM"
        assert data["level"] == "débutant"
        assert len(data["options"]) == 3
        assert data["correctAnswer"] in data["options"]
        assert record.type is ExerciseType.QCM


def test_seeded_batches_repeat():
    first = [(r.sentence, r.options) for r in generate_exercises("expert", 10, seed=42)]
    second = [(r.sentence, r.options) for r in generate_exercises("expert", 10, seed=42)]
    assert first == second


def test_adjective_fallback(monkeypatch, generator):
    import engines.exercises as exercises

    monkeypatch.setattr(exercises, "matching_adjectives", lambda gender, plural: [])
    elles = _subject("elles")
    je = _subject("je")
    assert generator._select_complement(Verb.ETRE, elles) == DEFAULT_ADJECTIVES[(False, False)]
    assert generator._select_complement(Verb.ETRE, je) == DEFAULT_ADJECTIVES[(True, True)]


def test_missing_distractors_fail_loudly(monkeypatch, generator):
    monkeypatch.setattr(generator._lang, "get_distractors", lambda verb: ("as", "ai"))
    with pytest.raises(AppErrorException) as exc_info:
        generator.generate_options(Verb.AVOIR, "ai")
    assert exc_info.value.error.code is ErrorCode.E5004_INVARIANT_VIOLATED


@pytest.mark.parametrize("value, level", [
    ("débutant", Level.BEGINNER),
    ("intermédiaire", Level.INTERMEDIATE),
    ("EXPERT", Level.EXPERT),
    ("beginner", Level.BEGINNER),
    (Level.EXPERT, Level.EXPERT),
])
def test_parse_level(value, level):
    assert parse_level(value).unwrap() is level


@pytest.mark.parametrize("value, code", [
    ("facile", ErrorCode.E2005_INVALID_CHOICE),
    (2, ErrorCode.E2004_INVALID_TYPE),
    (None, ErrorCode.E2004_INVALID_TYPE),
])
def test_parse_level_rejects(value, code):
    assert parse_level(value).unwrap_err().code is code


@pytest.mark.parametrize("count, code", [
    (-1, ErrorCode.E2003_OUT_OF_RANGE),
    ("3", ErrorCode.E2004_INVALID_TYPE),
    (True, ErrorCode.E2004_INVALID_TYPE),
    (2.5, ErrorCode.E2004_INVALID_TYPE),
])
def test_invalid_count(count, code):
    assert validate_count(count).unwrap_err().code is code
    with pytest.raises(AppErrorException) as exc_info:
        generate_exercises(Level.BEGINNER, count)
    assert exc_info.value.error.code is code


def test_invalid_level_rejected_before_generation():
    with pytest.raises(AppErrorException) as exc_info:
        generate_exercises("facile", 5)
    assert exc_info.value.error.code is ErrorCode.E2005_INVALID_CHOICE
