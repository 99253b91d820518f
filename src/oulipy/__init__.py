"""
oulipy - Writing constraint checks for French texts

Validates texts against Oulipo-style constraints: lipogram, monovocalism,
tautogram and systematic alliteration. Accented letters count as their
base letter, so a lipogram in "e" also forbids "é", "è", "ê" and "ë".
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("oulipy")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from oulipy.core.alphabet import ALPHABET, CONSONANTS, VOWELS
from oulipy.core.constraints import (
    CONSTRAINTS,
    ConstraintDefinition,
    ConstraintId,
    ParameterKind,
    ParameterSpec,
    ValidationResult,
    get_constraint,
)
from oulipy.core.text import normalize_text, tokenize_words

__all__ = [
    "__version__",
    "ALPHABET",
    "CONSONANTS",
    "VOWELS",
    "CONSTRAINTS",
    "ConstraintDefinition",
    "ConstraintId",
    "ParameterKind",
    "ParameterSpec",
    "ValidationResult",
    "get_constraint",
    "normalize_text",
    "tokenize_words",
]
