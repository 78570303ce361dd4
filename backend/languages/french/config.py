"""French grammar configuration for frontend."""
from languages.base import GenderConfig, NumberConfig, VerbConfig, GrammarConfig

from .conjugation import CONJUGATIONS
from .subjects import PRONOUNS

GENDER_CONFIGS = [
    GenderConfig(id="masculine", label="Masculin", short="m"),
    GenderConfig(id="feminine", label="Féminin", short="f"),
]

NUMBER_CONFIGS = [
    NumberConfig(id="singular", label="Singulier"),
    NumberConfig(id="plural", label="Pluriel"),
]

VERB_CONFIGS = [
    VerbConfig(
        id=verb.name.lower(),
        label=verb.value,
        paradigm=tuple((pronoun, forms[pronoun]) for pronoun in PRONOUNS),
    )
    for verb, forms in CONJUGATIONS.items()
]

FRENCH_GRAMMAR_CONFIG = GrammarConfig(
    genders=GENDER_CONFIGS,
    numbers=NUMBER_CONFIGS,
    verbs=VERB_CONFIGS,
    has_conjugation=True,
    has_elision=True,
)
