"""French surface-form rules: vowel detection, elision, negation."""

# Letters that trigger elision (je -> j', ne -> n', de -> d')
VOWELS = frozenset("aeiouyàâäéèêëîïôöùûüÿæœ")

INDEFINITE_ARTICLES = ("un ", "une ", "des ")

ELIDED_JE = "J'"


def starts_with_vowel(text: str) -> bool:
    return bool(text) and text[0].lower() in VOWELS


def _starts_with_vowel_sound(text: str) -> bool:
    # h is treated as mute
    return starts_with_vowel(text) or text[:1].lower() == "h"


def negation_particle(conjugated: str) -> str:
    """"n'" before a vowel-initial verb form, "ne " otherwise."""
    return "n'" if starts_with_vowel(conjugated) else "ne "


def partitive_negation(complement: str) -> str:
    """Rewrite an indefinite noun phrase for a negated sentence.

    "un chat" -> "de chat", "un ami" -> "d'ami", "des amis" -> "d'amis".
    Anything not introduced by un/une/des is returned unchanged.
    """
    for article in INDEFINITE_ARTICLES:
        if complement.startswith(article):
            noun = complement[len(article):]
            return f"d'{noun}" if _starts_with_vowel_sound(noun) else f"de {noun}"
    return complement


def lowercase_subject(display: str) -> str:
    """Subject no longer at the start of the sentence: "Il" -> "il"."""
    return display[:1].lower() + display[1:]
