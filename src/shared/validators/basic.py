"""Basic field validators: required, email, number and numeric range."""

import logging
import re

from . import messages
from .exceptions import ValidatorConfigurationError
from .types import ValidationResult, Validator

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}")
NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")


def require_non_blank(value: str) -> ValidationResult:
    """Validate that a field has at least one non-whitespace character.

    The value itself is not modified, surrounding whitespace is only ignored
    for the emptiness check.

    Args:
        value: Raw field value

    Returns:
        None if valid, otherwise the error message.

    Examples:
        >>> require_non_blank("Ana")
        >>> require_non_blank("   ")
        'required'

    """
    if not value.strip():
        return messages.REQUIRED
    return None


def require_email(value: str) -> ValidationResult:
    """Validate the syntactic shape of an email address (``local@domain.tld``).

    Local part and domain cannot contain whitespace or ``@`` and the last
    segment must be at least two characters long. No DNS or deliverability
    check is performed.

    Args:
        value: Raw field value

    Returns:
        None if valid, otherwise the error message.

    Examples:
        >>> require_email("a@b.co")
        >>> require_email("a@b.c")
        'bad format'

    """
    if not value.strip():
        return messages.REQUIRED
    if not EMAIL_PATTERN.fullmatch(value):
        return messages.BAD_FORMAT
    return None


def require_number(value: str) -> ValidationResult:
    """Validate a decimal number such as ``-12``, ``3.5`` or ``0``.

    Only ASCII digits are accepted, with an optional leading minus and an
    optional fractional part. Exponents, ``+`` signs and surrounding
    whitespace are rejected.

    Args:
        value: Raw field value

    Returns:
        None if valid, otherwise the error message.

    """
    if not value.strip():
        return messages.REQUIRED
    if not NUMBER_PATTERN.fullmatch(value):
        return messages.NOT_A_NUMBER
    return None


def _parse_number(value: str) -> float | None:
    """Parse a number, returning None when the value is not one.

    Spelled-out values such as ``nan``, ``inf`` or ``1e3`` are rejected. Digit
    strings too large for a float parse as infinity and stay comparable.
    """
    if any(c.isalpha() for c in value):
        return None
    try:
        return float(value)
    except ValueError:
        return None


def require_in_range(minimum: float, maximum: float) -> Validator:
    """Build a validator checking that a number lies in ``[minimum, maximum]``.

    The returned validator parses the value again, so it should run after
    ``require_number`` when a distinct format message is wanted (see
    ``require_number_in_range``).

    Args:
        minimum: Lowest accepted value (inclusive)
        maximum: Highest accepted value (inclusive)

    Returns:
        Validator for the range.

    Raises:
        ValidatorConfigurationError: If minimum is greater than maximum.

    """
    if minimum > maximum:
        logger.error(f"Invalid range validator: minimum {minimum} is greater than maximum {maximum}")
        raise ValidatorConfigurationError(f"Range minimum ({minimum}) cannot exceed maximum ({maximum})")

    out_of_range = messages.OUT_OF_RANGE.format(minimum=minimum, maximum=maximum)

    def validate(value: str) -> ValidationResult:
        number = _parse_number(value)
        if number is None:
            return messages.NOT_A_NUMBER
        if number < minimum or number > maximum:
            return out_of_range
        return None

    return validate


def require_number_in_range(minimum: float, maximum: float) -> Validator:
    """Build a validator for a required number inside ``[minimum, maximum]``.

    The format check runs first and its failure short-circuits the range check.

    Raises:
        ValidatorConfigurationError: If minimum is greater than maximum.

    """
    in_range = require_in_range(minimum, maximum)

    def validate(value: str) -> ValidationResult:
        return require_number(value) or in_range(value)

    return validate
