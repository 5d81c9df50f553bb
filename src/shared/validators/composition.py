"""Validators built from other validators or from a bound reference value."""

from . import messages
from .types import ValidationResult, Validator


def require_same_as(reference: str) -> Validator:
    """Build a validator that requires the value to equal ``reference`` exactly.

    Comparison is case-sensitive with no normalization. The reference is
    captured when the validator is built, so callers must build a new one
    whenever the reference value changes (e.g. the primary password).

    Args:
        reference: Value the field must repeat

    Returns:
        Validator for the confirmation field.

    Examples:
        >>> require_same_as("x")("x")
        >>> require_same_as("x")("X")
        'mismatch'

    """

    def validate(value: str) -> ValidationResult:
        if value != reference:
            return messages.MISMATCH
        return None

    return validate


def optional(validator: Validator) -> Validator:
    """Make a validator accept empty or whitespace-only values.

    Non-empty values are delegated to ``validator`` unchanged, so the format
    is still enforced when something is entered.

    Args:
        validator: Validator applied to non-empty values

    Returns:
        Wrapped validator.

    """

    def validate(value: str) -> ValidationResult:
        if not value.strip():
            return None
        return validator(value)

    return validate
