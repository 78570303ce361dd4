"""French language data: subjects, complements, conjugations and rules."""
from .module import FrenchModule
from .checks import check_tables, validate_tables

__all__ = ["FrenchModule", "check_tables", "validate_tables"]
