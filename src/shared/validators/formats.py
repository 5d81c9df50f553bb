"""Single-pattern format validators for phone, website and consent fields."""

import re

from . import messages
from .types import ValidationResult

PHONE_PATTERN = re.compile(r"\+?[0-9]{7,15}")
WEBSITE_PATTERN = re.compile(r"https?://", re.IGNORECASE)


def require_phone(value: str) -> ValidationResult:
    """Validate a phone number: optional leading ``+`` then 7 to 15 digits."""
    if not PHONE_PATTERN.fullmatch(value):
        return messages.INVALID_PHONE
    return None


def require_website(value: str) -> ValidationResult:
    """Validate that a URL starts with ``http://`` or ``https://`` (any case)."""
    if not WEBSITE_PATTERN.match(value):
        return messages.INVALID_WEBSITE
    return None


def require_consent(accepted: bool) -> ValidationResult:
    """Validate that the terms checkbox is ticked."""
    if accepted is not True:
        return messages.CONSENT_REQUIRED
    return None
