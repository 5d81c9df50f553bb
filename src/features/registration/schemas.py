"""Registration form schemas."""

from pydantic import BaseModel, Field

from src.shared.validators import PasswordAssessment

from .models import RegistrationField


class RegistrationForm(BaseModel):
    """Current values of the registration form.

    Values are kept exactly as entered; validation never rewrites them.
    """

    full_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    birth_date: str = Field("", description="Birth date as YYYY-MM-DD")
    quantity: str = ""
    phone: str = ""
    website: str = ""
    accept_terms: bool = False

    def value_of(self, field: RegistrationField) -> str | bool:
        """Get the current value of a field."""
        return getattr(self, field.value)


class FormValidationResult(BaseModel):
    """Validation outcome of every field of a form."""

    errors: dict[RegistrationField, str | None]
    password_strength: PasswordAssessment

    @property
    def invalid_fields(self) -> dict[RegistrationField, str]:
        """Get the fields that failed validation with their messages."""
        return {field: error for field, error in self.errors.items() if error is not None}

    @property
    def is_submittable(self) -> bool:
        """Check if every field is valid."""
        return all(error is None for error in self.errors.values())
