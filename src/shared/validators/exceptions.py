"""Validator-related exceptions."""


class ValidatorConfigurationError(Exception):
    """Raised when a validator is built with invalid parameters.

    Invalid field values are never reported through exceptions; this is only
    for programmer errors such as a range whose minimum exceeds its maximum.
    """

    pass
