"""
oulipy.core.constraints - Writing constraint registry.

Each constraint pairs display metadata (French name, description and
parameter specification) with a pure validation function taking the text
and a single parameter letter.

Constraints:
- lipogram: a given letter is forbidden
- monovocalism: a single vowel is allowed
- tautogram: every word starts with the same letter
- alliteration: every word starts with the same consonant
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from oulipy.core.alphabet import ALPHABET, CONSONANTS, VOWELS
from oulipy.core.text import normalize_text, tokenize_words


class ConstraintId(str, Enum):
    """Identifier tags of the available constraints."""

    LIPOGRAM = "lipogram"
    MONOVOCALISM = "monovocalism"
    TAUTOGRAM = "tautogram"
    ALLITERATION = "alliteration"


class ParameterKind(str, Enum):
    """Kind of letter a constraint parameter is drawn from."""

    LETTER = "letter"
    VOWEL = "vowel"
    CONSONANT = "consonant"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a text against a constraint.

    Attributes:
        is_valid: Whether the text satisfies the constraint
        error: French violation message, None when valid
    """

    is_valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting the error when valid."""
        data: dict[str, Any] = {"isValid": self.is_valid}
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class ParameterSpec:
    """
    Parameter accepted by a constraint.

    Attributes:
        kind: Letter family the parameter belongs to
        label: French label shown next to the parameter
        options: Ordered letters a caller may offer
    """

    kind: ParameterKind
    label: str
    options: tuple[str, ...]


Validator = Callable[[str, str], ValidationResult]


@dataclass(frozen=True)
class ConstraintDefinition:
    """
    A writing constraint and its validation function.

    Attributes:
        id: Identifier tag
        name: French display name
        description: French one-line description
        parameter: Parameter specification
        validator: Pure function (text, param) -> ValidationResult
    """

    id: ConstraintId
    name: str
    description: str
    parameter: ParameterSpec
    validator: Validator

    def validate(self, text: str, param: str) -> ValidationResult:
        """Validate text against this constraint.

        The parameter is not checked against ``parameter.options``; call
        sites offer only listed options (see ``accepts``).
        """
        return self.validator(text, param)

    def accepts(self, param: str) -> bool:
        """Check if param (case-insensitive) is one of the offered options."""
        return param.lower() in self.parameter.options

    def to_dict(self) -> dict[str, Any]:
        """Convert metadata to dictionary (the validator is left out)."""
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
            "parameter": {
                "type": self.parameter.kind.value,
                "label": self.parameter.label,
                "options": list(self.parameter.options),
            },
        }


def validate_lipogram(text: str, param: str) -> ValidationResult:
    """Fail if the forbidden letter appears, accented forms included."""
    forbidden_letter = param.lower()
    normalized_text = normalize_text(text.lower())
    if forbidden_letter in normalized_text:
        return ValidationResult.fail(f'Lettre interdite détectée : "{forbidden_letter}"')
    return ValidationResult.ok()


def validate_monovocalism(text: str, param: str) -> ValidationResult:
    """Fail on the first vowel other than the allowed one."""
    allowed_vowel = param.lower()
    other_vowels = {v for v in VOWELS if v != allowed_vowel}
    for char in normalize_text(text.lower()):
        if char in other_vowels:
            return ValidationResult.fail(f'Voyelle non autorisée détectée : "{char}"')
    return ValidationResult.ok()


def validate_tautogram(text: str, param: str) -> ValidationResult:
    """Fail on the first word not starting with the given letter."""
    initial_letter = param.lower()
    for word in tokenize_words(text):
        if not normalize_text(word.lower()).startswith(initial_letter):
            return ValidationResult.fail(
                f'Le mot "{word}" ne commence pas par "{initial_letter}"'
            )
    return ValidationResult.ok()


def validate_alliteration(text: str, param: str) -> ValidationResult:
    """Fail on the first word not starting with the given consonant.

    The parameter itself is not checked to be a consonant.
    """
    initial_consonant = param.lower()
    for word in tokenize_words(text):
        if not normalize_text(word.lower()).startswith(initial_consonant):
            return ValidationResult.fail(
                f'Le mot "{word}" ne commence pas par la consonne "{initial_consonant}"'
            )
    return ValidationResult.ok()


CONSTRAINTS: tuple[ConstraintDefinition, ...] = (
    ConstraintDefinition(
        id=ConstraintId.LIPOGRAM,
        name="Lipogramme",
        description="Interdiction d’une lettre donnée.",
        parameter=ParameterSpec(ParameterKind.LETTER, "Lettre interdite", ALPHABET),
        validator=validate_lipogram,
    ),
    ConstraintDefinition(
        id=ConstraintId.MONOVOCALISM,
        name="Monovocalisme",
        description="Autorisation d’une seule voyelle.",
        parameter=ParameterSpec(ParameterKind.VOWEL, "Voyelle autorisée", VOWELS),
        validator=validate_monovocalism,
    ),
    ConstraintDefinition(
        id=ConstraintId.TAUTOGRAM,
        name="Tautogramme",
        description="Tous les mots doivent commencer par la même lettre.",
        parameter=ParameterSpec(ParameterKind.LETTER, "Lettre initiale", ALPHABET),
        validator=validate_tautogram,
    ),
    ConstraintDefinition(
        id=ConstraintId.ALLITERATION,
        name="Allitération systématique",
        description="Tous les mots doivent commencer par la même consonne.",
        parameter=ParameterSpec(ParameterKind.CONSONANT, "Consonne initiale", CONSONANTS),
        validator=validate_alliteration,
    ),
)

_BY_ID: dict[str, ConstraintDefinition] = {c.id.value: c for c in CONSTRAINTS}


def get_constraint(identifier: str | ConstraintId) -> Optional[ConstraintDefinition]:
    """Look up a constraint by identifier tag.

    Args:
        identifier: ConstraintId or its string value (e.g., "lipogram")

    Returns:
        The ConstraintDefinition if found, None otherwise
    """
    if isinstance(identifier, ConstraintId):
        identifier = identifier.value
    return _BY_ID.get(identifier)


def constraint_ids() -> list[str]:
    """Get the identifier tags in registry order."""
    return [c.id.value for c in CONSTRAINTS]
