"""Test configuration and fixtures."""

from datetime import date

import pytest

from src.config.settings import Settings
from src.features.registration.schemas import RegistrationForm
from src.features.registration.service import RegistrationFormService


@pytest.fixture
def today() -> date:
    """Fixed reference date for age checks."""
    return date(2026, 10, 18)


@pytest.fixture
def default_settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def service(default_settings: Settings) -> RegistrationFormService:
    """Registration form service bound to test settings."""
    return RegistrationFormService(default_settings)


@pytest.fixture
def valid_form() -> RegistrationForm:
    """Registration form with every field valid on the reference date."""
    return RegistrationForm(
        full_name="Ana García",
        email="ana@x.com",
        password="Abcdefg1!",
        confirm_password="Abcdefg1!",
        birth_date="2008-10-18",
        quantity="5",
        accept_terms=True,
    )
