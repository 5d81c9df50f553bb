"""Registration-related exceptions."""

from .models import RegistrationField


class RegistrationException(Exception):
    """Base registration exception."""

    def __init__(self, detail: str = "Registration operation failed"):
        super().__init__(detail)
        self.detail = detail


class FormNotSubmittable(RegistrationException):
    """Raised when submitting a form that still has invalid fields."""

    def __init__(self, errors: dict[RegistrationField, str]):
        self.errors = errors
        fields = ", ".join(field.value for field in errors)
        super().__init__(detail=f"Form has invalid fields: {fields}")
