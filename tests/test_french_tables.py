import pytest

from core.errors import AppErrorException, ErrorCode
from languages import get_module, list_languages, Verb
from languages.french import check_tables, validate_tables
from languages.french.complements import ETRE_ADJECTIVES, matching_adjectives
from languages.french.conjugation import CONJUGATIONS, DISTRACTORS
from languages.french.subjects import PRONOUNS
from languages.types import Gender, Level


def test_tables_are_consistent():
    assert validate_tables().is_ok()
    check_tables()


def test_every_verb_has_every_person():
    for verb in Verb:
        assert set(CONJUGATIONS[verb]) == set(PRONOUNS)


@pytest.mark.parametrize("verb, pronoun, form", [
    (Verb.AVOIR, "je", "ai"),
    (Verb.AVOIR, "elles", "ont"),
    (Verb.ETRE, "vous", "êtes"),
    (Verb.ETRE, "nous", "sommes"),
    (Verb.ALLER, "tu", "vas"),
    (Verb.ALLER, "ils", "vont"),
])
def test_conjugate(verb, pronoun, form):
    assert get_module("fr").conjugate(verb, pronoun) == form


def test_conjugate_rejects_non_canonical_pronoun():
    with pytest.raises(AppErrorException) as exc_info:
        get_module("fr").conjugate(Verb.AVOIR, "Emma")
    error = exc_info.value.error
    assert error.code is ErrorCode.E5004_INVARIANT_VIOLATED
    assert error.metadata["pronoun"] == "Emma"


def test_distractors_leave_two_wrong_forms_for_every_answer():
    for verb in Verb:
        pool = set(DISTRACTORS[verb])
        assert pool <= set(CONJUGATIONS[verb].values())
        for correct in CONJUGATIONS[verb].values():
            assert len(pool - {correct}) >= 2


def test_every_agreement_cell_has_adjectives():
    for gender in Gender:
        for plural in (False, True):
            forms = matching_adjectives(gender, plural)
            assert forms
            assert all(adj.agrees_with(gender, plural) for adj in forms)
    assert len(ETRE_ADJECTIVES) % 4 == 0


def test_unknown_language():
    with pytest.raises(ValueError):
        get_module("xx")
    assert [lang["code"] for lang in list_languages()] == ["fr"]


def test_level_labels():
    assert [level.value for level in Level] == ["débutant", "intermédiaire", "expert"]
    assert Level.EXPERT.color == "red"


def test_check_tables_reports_broken_distractors(monkeypatch):
    from languages.french import checks

    monkeypatch.setattr(checks, "DISTRACTORS", {verb: ("as",) for verb in Verb})
    result = checks.validate_tables()
    assert result.is_err()
    assert result.unwrap_err().code is ErrorCode.E5004_INVARIANT_VIOLATED
    with pytest.raises(AppErrorException):
        checks.check_tables()


def test_grammar_config_numbers():
    config = get_module("fr").get_grammar_config()
    assert [number.id for number in config.numbers] == ["singular", "plural"]
    assert config.to_dict()["numbers"][1] == {"id": "plural", "label": "Pluriel"}
