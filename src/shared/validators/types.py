"""Validator type aliases."""

from collections.abc import Callable
from typing import TypeAlias

# None means valid, a string is the message shown to the user
ValidationResult: TypeAlias = str | None

Validator: TypeAlias = Callable[[str], ValidationResult]
