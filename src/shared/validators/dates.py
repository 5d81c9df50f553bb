"""Date-of-birth validators."""

import logging
import re
from datetime import date

from . import messages
from .exceptions import ValidatorConfigurationError
from .types import ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_AGE = 18

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(value: str) -> date | None:
    """Parse an ISO 8601 calendar date (``YYYY-MM-DD``), or None if it is not one."""
    if not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def require_valid_date(value: str) -> ValidationResult:
    """Validate that a field holds a calendar date.

    Args:
        value: Raw field value, as submitted by a date input (``YYYY-MM-DD``)

    Returns:
        None if valid, otherwise the error message.

    Examples:
        >>> require_valid_date("2000-02-29")
        >>> require_valid_date("2001-02-29")
        'invalid date'

    """
    if not value:
        return messages.REQUIRED
    if parse_date(value) is None:
        return messages.INVALID_DATE
    return None


def calculate_age(birth_date: date, today: date) -> int:
    """Calculate age in whole years on ``today``.

    One year is subtracted while the birthday has not been reached yet in the
    current year, so the age increases on the birthday itself.
    """
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def require_adult(value: str, minimum_age: int = DEFAULT_MINIMUM_AGE, *, today: date | None = None) -> ValidationResult:
    """Validate that a birth date belongs to someone at least ``minimum_age`` years old.

    Date errors from ``require_valid_date`` are returned unchanged. A person
    born exactly ``minimum_age`` years before today is accepted.

    Args:
        value: Birth date (``YYYY-MM-DD``)
        minimum_age: Minimum age in whole years
        today: Reference date, defaults to the current date

    Returns:
        None if valid, otherwise the error message.

    Raises:
        ValidatorConfigurationError: If minimum_age is negative.

    """
    if minimum_age < 0:
        logger.error(f"Invalid age validator: minimum age {minimum_age} is negative")
        raise ValidatorConfigurationError(f"Minimum age cannot be negative, got {minimum_age}")

    error = require_valid_date(value)
    if error:
        return error

    birth_date = parse_date(value)
    assert birth_date is not None

    if calculate_age(birth_date, today or date.today()) < minimum_age:
        return messages.TOO_YOUNG.format(minimum_age=minimum_age)
    return None
