"""French language module implementation."""
from core.errors import invariant_violated, raise_result
from languages.base import LanguageModule, GrammarConfig
from languages.types import Verb

from .config import FRENCH_GRAMMAR_CONFIG
from .conjugation import CONJUGATIONS, DISTRACTORS
from .subjects import PRONOUNS


class FrenchModule(LanguageModule):
    """French: present tense of avoir, être and aller."""

    @property
    def code(self) -> str:
        return "fr"

    @property
    def name(self) -> str:
        return "French"

    @property
    def native_name(self) -> str:
        return "Français"

    def get_grammar_config(self) -> GrammarConfig:
        return FRENCH_GRAMMAR_CONFIG

    def conjugate(self, verb: Verb, pronoun: str) -> str:
        # Names are mapped to il/elle/ils/elles before lookup
        form = CONJUGATIONS.get(verb, {}).get(pronoun) if pronoun in PRONOUNS else None
        if form is None:
            raise_result(invariant_violated(
                "conjugations",
                f"no form for {verb.value}/{pronoun}",
                origin="languages.french",
                verb=verb.value,
                pronoun=pronoun,
            ))
        return form

    def get_distractors(self, verb: Verb) -> tuple[str, ...]:
        pool = DISTRACTORS.get(verb)
        if not pool:
            raise_result(invariant_violated(
                "distractors", f"no wrong forms for {verb.value}", origin="languages.french", verb=verb.value,
            ))
        return pool
