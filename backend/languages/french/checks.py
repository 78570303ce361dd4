"""Consistency checks over the static French tables.

The generator assumes these hold; a failure means a table was edited
incorrectly.
"""
from core.errors import AppError, Result, ensure, invariant_violated, raise_result, sequence_results
from languages.types import Gender, Verb

from .complements import AVOIR_COMPLEMENTS, ALLER_COMPLEMENTS, matching_adjectives
from .conjugation import CONJUGATIONS, DISTRACTORS
from .phrases import CONTEXT_PHRASES, FREQUENCY_ADVERBS
from .subjects import NAMES, PRONOUN_SUBJECTS, PRONOUNS

ORIGIN = "languages.french.checks"


def _conjugations_complete() -> Result[None, AppError]:
    missing = [
        f"{verb.value}/{pronoun}"
        for verb in Verb
        for pronoun in PRONOUNS
        if pronoun not in CONJUGATIONS.get(verb, {})
    ]
    return ensure(not missing, invariant_violated("conjugations", f"missing {missing}", origin=ORIGIN).error)


def _adjectives_cover_agreement() -> Result[None, AppError]:
    uncovered = [
        f"{gender.value}/{'plural' if plural else 'singular'}"
        for gender in Gender
        for plural in (False, True)
        if not matching_adjectives(gender, plural)
    ]
    return ensure(not uncovered, invariant_violated("etre_adjectives", f"no form for {uncovered}", origin=ORIGIN).error)


def _distractors_sufficient() -> Result[None, AppError]:
    short = []
    for verb in Verb:
        pool = set(DISTRACTORS.get(verb, ()))
        for correct in set(CONJUGATIONS[verb].values()):
            if len(pool - {correct}) < 2:
                short.append(f"{verb.value}/{correct}")
    return ensure(not short, invariant_violated("distractors", f"fewer than 2 wrong forms for {short}", origin=ORIGIN).error)


def _pools_not_empty() -> Result[None, AppError]:
    pools = {
        "pronoun_subjects": PRONOUN_SUBJECTS,
        "names": NAMES,
        "avoir_complements": AVOIR_COMPLEMENTS,
        "aller_complements": ALLER_COMPLEMENTS,
        "context_phrases": CONTEXT_PHRASES,
        "frequency_adverbs": FREQUENCY_ADVERBS,
    }
    empty = [name for name, pool in pools.items() if not pool]
    return ensure(not empty, invariant_violated("pools", f"empty {empty}", origin=ORIGIN).error)


def validate_tables() -> Result[None, AppError]:
    """Run every check, stopping at the first failure."""
    result = sequence_results([
        _conjugations_complete(),
        _adjectives_cover_agreement(),
        _distractors_sufficient(),
        _pools_not_empty(),
    ])
    return result.map(lambda _: None)


def check_tables() -> None:
    """Raise AppErrorException if any table invariant is broken."""
    raise_result(validate_tables())
