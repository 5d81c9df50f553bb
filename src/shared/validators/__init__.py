"""Shared validators package for the application.

This package contains the pure field validators used by the forms.
Every validator takes the raw field value and returns ``None`` when the
value is valid, or the error message to show next to the field.

Available validators:
- basic.py: Required, email, number and numeric range checks
- password.py: Password strength scoring and validation
- composition.py: Confirmation (same-as) and optional wrappers
- dates.py: Calendar date and minimum age checks
- formats.py: Phone, website and consent checks
"""

from .basic import require_email, require_in_range, require_non_blank, require_number, require_number_in_range
from .composition import optional, require_same_as
from .dates import calculate_age, require_adult, require_valid_date
from .exceptions import ValidatorConfigurationError
from .formats import require_consent, require_phone, require_website
from .password import PasswordAssessment, StrengthLevel, assess_password_strength, require_strong_password
from .types import ValidationResult, Validator

__all__ = [
    "PasswordAssessment",
    "StrengthLevel",
    "ValidationResult",
    "Validator",
    "ValidatorConfigurationError",
    "assess_password_strength",
    "calculate_age",
    "optional",
    "require_adult",
    "require_consent",
    "require_email",
    "require_in_range",
    "require_non_blank",
    "require_number",
    "require_number_in_range",
    "require_phone",
    "require_same_as",
    "require_strong_password",
    "require_valid_date",
    "require_website",
]
