from languages.french.grammar import (
    lowercase_subject,
    negation_particle,
    partitive_negation,
    starts_with_vowel,
)
from languages.french.subjects import NAMES, Name, compose_name_pair, name_subject
from languages.types import Gender


def test_starts_with_vowel():
    assert starts_with_vowel("ai")
    assert starts_with_vowel("êtes")
    assert starts_with_vowel("Emma")
    assert not starts_with_vowel("suis")
    assert not starts_with_vowel("")


def test_negation_particle_elides_before_vowel():
    assert negation_particle("ai") == "n'"
    assert negation_particle("es") == "n'"
    assert negation_particle("allons") == "n'"
    assert negation_particle("êtes") == "n'"
    assert negation_particle("suis") == "ne "
    assert negation_particle("vont") == "ne "


def test_partitive_negation():
    assert partitive_negation("un chat") == "de chat"
    assert partitive_negation("une voiture") == "de voiture"
    assert partitive_negation("des jouets") == "de jouets"
    assert partitive_negation("un ami") == "d'ami"
    assert partitive_negation("des amis") == "d'amis"
    assert partitive_negation("un ordinateur") == "d'ordinateur"


def test_partitive_negation_passes_other_complements_through():
    assert partitive_negation("au parc") == "au parc"
    assert partitive_negation("contents") == "contents"


def test_lowercase_subject():
    assert lowercase_subject("Il") == "il"
    assert lowercase_subject("Nous") == "nous"
    assert lowercase_subject("") == ""


def test_single_name_is_third_person_singular():
    lucas = name_subject(Name("Lucas", Gender.MASCULINE))
    emma = name_subject(Name("Emma", Gender.FEMININE))
    assert (lucas.pronoun, lucas.display, lucas.is_plural, lucas.is_name) == ("il", "Lucas", False, True)
    assert (emma.pronoun, emma.gender) == ("elle", Gender.FEMININE)


def test_name_pair_is_feminine_only_when_both_are():
    emma, lea, hugo = Name("Emma", Gender.FEMININE), Name("Léa", Gender.FEMININE), Name("Hugo", Gender.MASCULINE)

    pair = compose_name_pair(emma, lea)
    assert pair.display == "Emma et Léa"
    assert pair.pronoun == "elles"
    assert pair.is_plural

    mixed = compose_name_pair(emma, hugo)
    assert mixed.pronoun == "ils"
    assert mixed.gender is Gender.MASCULINE


def test_names_cover_both_genders():
    genders = {name.gender for name in NAMES}
    assert genders == {Gender.MASCULINE, Gender.FEMININE}
