"""Language modules.

Registry of language-specific data and lookups. French is the only
registered language.
"""
from .registry import get_module, register, list_languages
from .base import LanguageModule, GrammarConfig
from .types import Gender, GrammaticalNumber, Level, Verb

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "LanguageModule",
    "GrammarConfig",
    "Gender",
    "GrammaticalNumber",
    "Level",
    "Verb",
]
