"""Phrases that dress up a sentence at the harder levels."""

# Sentence openers; the subject that follows is lowercased
CONTEXT_PHRASES: tuple[str, ...] = (
    "Aujourd'hui, ",
    "Maintenant, ",
    "Ce matin, ",
    "En ce moment, ",
    "Le samedi, ",
    "Chaque jour, ",
)

# Placed right after the verb, before the complement
FREQUENCY_ADVERBS: tuple[str, ...] = (
    "toujours",
    "souvent",
    "parfois",
    "rarement",
    "encore",
)
