"""Sentence complements, one table per verb.

avoir takes a noun phrase, être an agreeing adjective, aller a destination.
"""
from dataclasses import dataclass

from languages.types import Gender


@dataclass(frozen=True, slots=True)
class Adjective:
    """One agreed form of an adjective."""
    text: str
    masculine: bool
    singular: bool

    def agrees_with(self, gender: Gender, is_plural: bool) -> bool:
        return self.masculine == (gender is Gender.MASCULINE) and self.singular == (not is_plural)


AVOIR_COMPLEMENTS: tuple[str, ...] = (
    "un chat", "une voiture", "un chien", "une maison", "un jardin",
    "des amis", "des jouets", "un livre", "une télévision", "un téléphone",
    "un ordinateur", "une bicyclette", "un ballon", "une poupée", "un robot",
    "des crayons", "un sac", "une montre", "des bonbons", "un gâteau",
)

ALLER_COMPLEMENTS: tuple[str, ...] = (
    "à l'école", "au parc", "à la maison", "au magasin", "au cinéma",
    "au restaurant", "au musée", "au théâtre", "à la plage", "à la montagne",
    "à la bibliothèque", "au zoo", "à l'hôpital", "au marché", "à la piscine",
    "au stade", "à l'église", "au café", "à la gare", "à l'aéroport",
)


def _paradigm(masc_sing: str, fem_sing: str, masc_plur: str, fem_plur: str) -> tuple[Adjective, ...]:
    return (
        Adjective(masc_sing, True, True),
        Adjective(fem_sing, False, True),
        Adjective(masc_plur, True, False),
        Adjective(fem_plur, False, False),
    )


ETRE_ADJECTIVES: tuple[Adjective, ...] = (
    *_paradigm("content", "contente", "contents", "contentes"),
    *_paradigm("grand", "grande", "grands", "grandes"),
    *_paradigm("petit", "petite", "petits", "petites"),
    *_paradigm("amical", "amicale", "amicaux", "amicales"),
    *_paradigm("gentil", "gentille", "gentils", "gentilles"),
    *_paradigm("fort", "forte", "forts", "fortes"),
    *_paradigm("joli", "jolie", "jolis", "jolies"),
    *_paradigm("intelligent", "intelligente", "intelligents", "intelligentes"),
    *_paradigm("fatigué", "fatiguée", "fatigués", "fatiguées"),
    *_paradigm("heureux", "heureuse", "heureux", "heureuses"),
    *_paradigm("triste", "triste", "tristes", "tristes"),
    *_paradigm("malade", "malade", "malades", "malades"),
)

# Used only if ETRE_ADJECTIVES has no form for a (masculine, singular) pair
DEFAULT_ADJECTIVES: dict[tuple[bool, bool], str] = {
    (True, True): "content",
    (False, True): "contente",
    (True, False): "contents",
    (False, False): "contentes",
}


def matching_adjectives(gender: Gender, is_plural: bool) -> list[Adjective]:
    """Adjective forms agreeing with a subject's gender and number."""
    return [adj for adj in ETRE_ADJECTIVES if adj.agrees_with(gender, is_plural)]
