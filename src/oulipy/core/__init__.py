"""
oulipy.core - Constraint registry and text helpers
"""

from oulipy.core.alphabet import ALPHABET, CONSONANTS, VOWELS
from oulipy.core.constraints import (
    CONSTRAINTS,
    ConstraintDefinition,
    ConstraintId,
    ParameterKind,
    ParameterSpec,
    ValidationResult,
    constraint_ids,
    get_constraint,
)
from oulipy.core.text import normalize_text, tokenize_words

__all__ = [
    "ALPHABET",
    "CONSONANTS",
    "VOWELS",
    "CONSTRAINTS",
    "ConstraintDefinition",
    "ConstraintId",
    "ParameterKind",
    "ParameterSpec",
    "ValidationResult",
    "constraint_ids",
    "get_constraint",
    "normalize_text",
    "tokenize_words",
]
