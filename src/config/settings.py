"""Application settings and configuration."""

import logging
from typing import Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Formguard"
    app_version: str = "0.1.0"

    # Registration form rules
    minimum_age: int = 18
    quantity_min: int = 1
    quantity_max: int = 1000

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Log level must be a standard logging level, got {level}")
        return level

    @field_validator("minimum_age")
    @classmethod
    def validate_minimum_age(cls, v: int) -> int:
        """Validate that the minimum age is not negative."""
        if v < 0:
            raise ValueError(f"Minimum age cannot be negative, got {v}")
        return v

    @model_validator(mode="after")
    def validate_quantity_range(self) -> Self:
        """Validate that the quantity range is not empty."""
        if self.quantity_min > self.quantity_max:
            raise ValueError(
                f"quantity_min ({self.quantity_min}) cannot be greater than quantity_max ({self.quantity_max})"
            )
        return self


settings = Settings()
