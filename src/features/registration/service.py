"""Registration form service layer."""

import logging
from collections.abc import Callable
from datetime import date
from functools import partial
from typing import Any, TypeAlias

from src.config.settings import Settings, settings
from src.shared.validators import (
    PasswordAssessment,
    ValidationResult,
    assess_password_strength,
    optional,
    require_adult,
    require_consent,
    require_email,
    require_non_blank,
    require_number_in_range,
    require_phone,
    require_same_as,
    require_website,
)

from .exceptions import FormNotSubmittable
from .models import OPTIONAL_FIELDS, RegistrationField
from .schemas import FormValidationResult, RegistrationForm

logger = logging.getLogger(__name__)

FieldValidator: TypeAlias = Callable[[Any], ValidationResult]


class RegistrationFormService:
    """Service for registration form validation.

    Holds no form state: every call works on the values it is given, so the
    confirmation validator always compares against the current password.
    """

    def __init__(self, config: Settings = settings):
        self.config = config

    def build_validators(
        self,
        form: RegistrationForm,
        password_strength: PasswordAssessment | None = None,
        today: date | None = None,
    ) -> dict[RegistrationField, FieldValidator]:
        """Build the validator of every field for the current form values.

        Args:
            form: Current form values
            password_strength: Assessment of form.password, computed if not given
            today: Reference date for the age check, defaults to the current date

        Returns:
            Mapping from field to its validator.

        """
        if password_strength is None:
            password_strength = assess_password_strength(form.password)

        validators: dict[RegistrationField, FieldValidator] = {
            RegistrationField.FULL_NAME: require_non_blank,
            RegistrationField.EMAIL: require_email,
            RegistrationField.PASSWORD: lambda _: password_strength.result,
            RegistrationField.CONFIRM_PASSWORD: require_same_as(form.password),
            RegistrationField.BIRTH_DATE: partial(require_adult, minimum_age=self.config.minimum_age, today=today),
            RegistrationField.QUANTITY: require_number_in_range(self.config.quantity_min, self.config.quantity_max),
            RegistrationField.PHONE: require_phone,
            RegistrationField.WEBSITE: require_website,
            RegistrationField.ACCEPT_TERMS: require_consent,
        }
        for field in OPTIONAL_FIELDS:
            validators[field] = optional(validators[field])
        return validators

    def validate_field(
        self, form: RegistrationForm, field: RegistrationField, today: date | None = None
    ) -> ValidationResult:
        """Validate a single field of the form.

        Args:
            form: Current form values
            field: Field to validate
            today: Reference date for the age check

        Returns:
            None if the field is valid, otherwise its error message.

        """
        validator = self.build_validators(form, today=today)[field]
        return validator(form.value_of(field))

    def validate(self, form: RegistrationForm, today: date | None = None) -> FormValidationResult:
        """Validate every field of the form.

        Args:
            form: Current form values
            today: Reference date for the age check

        Returns:
            Per-field errors together with the password strength assessment.

        """
        password_strength = assess_password_strength(form.password)
        validators = self.build_validators(form, password_strength, today)

        errors = {field: validator(form.value_of(field)) for field, validator in validators.items()}
        result = FormValidationResult(errors=errors, password_strength=password_strength)

        logger.debug(
            f"Registration form validated: {len(result.invalid_fields)} invalid field(s), "
            f"password strength {password_strength.level}"
        )
        return result

    def submit(self, form: RegistrationForm, today: date | None = None) -> RegistrationForm:
        """Accept a form for submission if every field is valid.

        Args:
            form: Current form values
            today: Reference date for the age check

        Returns:
            The accepted form.

        Raises:
            FormNotSubmittable: If any field is invalid.

        """
        result = self.validate(form, today)
        if not result.is_submittable:
            logger.info(f"Registration form rejected: {', '.join(result.invalid_fields)}")
            raise FormNotSubmittable(result.invalid_fields)

        logger.info(f"Registration form accepted for {form.email}")
        return form
