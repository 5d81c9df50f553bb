"""Password validation functions."""

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from . import messages
from .types import ValidationResult

MIN_LENGTH = 8
LONG_LENGTH = 12

# Minimum score for a password to be accepted
ACCEPTED_SCORE = 2
# Minimum score for the strong level
STRONG_SCORE = 4

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SYMBOL_PATTERN = re.compile(r"[^A-Za-z0-9]")


class StrengthLevel(StrEnum):
    """Password strength level shown by the strength indicator."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


class PasswordAssessment(BaseModel):
    """Strength assessment of a password.

    ``level`` drives the visual indicator, ``result`` decides whether the
    password is accepted. Both derive from ``score`` independently.
    """

    level: StrengthLevel
    score: int = Field(..., ge=0, le=5)
    result: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_valid(self) -> bool:
        """Check if the password is accepted."""
        return self.result is None


def score_password(password: str) -> int:
    """Count how many strength conditions a password satisfies (0 to 5).

    Conditions, one point each:
    - At least 8 characters
    - At least one uppercase letter (A-Z)
    - At least one digit (0-9)
    - At least one character that is not an ASCII letter or digit
    - At least 12 characters
    """
    conditions = (
        len(password) >= MIN_LENGTH,
        UPPERCASE_PATTERN.search(password) is not None,
        DIGIT_PATTERN.search(password) is not None,
        SYMBOL_PATTERN.search(password) is not None,
        len(password) >= LONG_LENGTH,
    )
    return sum(conditions)


def classify_score(score: int) -> StrengthLevel:
    """Map a password score to its strength level."""
    if score >= STRONG_SCORE:
        return StrengthLevel.STRONG
    if score >= ACCEPTED_SCORE:
        return StrengthLevel.MEDIUM
    return StrengthLevel.WEAK


def assess_password_strength(password: str) -> PasswordAssessment:
    """Assess password strength.

    Args:
        password: Password string to assess

    Returns:
        The assessment with level, score and validation result.

    Examples:
        >>> assess_password_strength("Abcdefg1")
        PasswordAssessment(level=<StrengthLevel.MEDIUM: 'medium'>, score=3, result=None)
        >>> assess_password_strength("abcdefgh").result
        'weak password'

    """
    score = score_password(password)

    if not password:
        result = messages.REQUIRED
    elif score < ACCEPTED_SCORE:
        result = messages.WEAK_PASSWORD
    else:
        result = None

    return PasswordAssessment(level=classify_score(score), score=score, result=result)


def require_strong_password(password: str) -> ValidationResult:
    """Validate a password, returning only the assessment result."""
    return assess_password_strength(password).result
