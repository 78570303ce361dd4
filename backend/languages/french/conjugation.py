"""Present-tense conjugation and wrong-answer tables."""
from types import MappingProxyType

from languages.types import Verb

CONJUGATIONS = MappingProxyType({
    Verb.AVOIR: MappingProxyType({
        "je": "ai", "tu": "as", "il": "a", "elle": "a",
        "nous": "avons", "vous": "avez", "ils": "ont", "elles": "ont",
    }),
    Verb.ETRE: MappingProxyType({
        "je": "suis", "tu": "es", "il": "est", "elle": "est",
        "nous": "sommes", "vous": "êtes", "ils": "sont", "elles": "sont",
    }),
    Verb.ALLER: MappingProxyType({
        "je": "vais", "tu": "vas", "il": "va", "elle": "va",
        "nous": "allons", "vous": "allez", "ils": "vont", "elles": "vont",
    }),
})

# Every person except the first singular. The correct answer may appear
# here; option generation skips it.
DISTRACTORS = MappingProxyType({
    Verb.AVOIR: ("as", "a", "avons", "avez", "ont"),
    Verb.ETRE: ("es", "est", "sommes", "êtes", "sont"),
    Verb.ALLER: ("vas", "va", "allons", "allez", "vont"),
})
