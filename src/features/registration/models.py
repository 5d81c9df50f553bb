"""Registration form domain models."""

from enum import StrEnum


class RegistrationField(StrEnum):
    """Fields of the registration form, in display order."""

    FULL_NAME = "full_name"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirm_password"
    BIRTH_DATE = "birth_date"
    QUANTITY = "quantity"
    PHONE = "phone"
    WEBSITE = "website"
    ACCEPT_TERMS = "accept_terms"


# Fields that may be left empty
OPTIONAL_FIELDS = frozenset({RegistrationField.PHONE, RegistrationField.WEBSITE})
