"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration form rules and the validator
that turns a form submission into a UserRecord. It defines its own port
for the user directory, keeping storage behind an adapter.
"""

from .exceptions import RegistrationError, UserAlreadyExists
from .models import (
    Field,
    FieldError,
    Invalid,
    Ok,
    RegistrationInput,
    SubmitError,
    UserRecord,
    ValidationOutcome,
)
from .ports import UserDirectory
from .registration import PASSWORD_HINT, RegistrationValidator

__all__ = [
    "PASSWORD_HINT",
    "Field",
    "FieldError",
    "Invalid",
    "Ok",
    "RegistrationError",
    "RegistrationInput",
    "RegistrationValidator",
    "SubmitError",
    "UserAlreadyExists",
    "UserDirectory",
    "UserRecord",
    "ValidationOutcome",
]
