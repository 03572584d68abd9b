"""
Registration value objects.

Frozen dataclasses passed between the form surface, the validator
and the user directory.
"""

from dataclasses import dataclass
from enum import Enum


class Field(str, Enum):
    """Registration form fields, in the order they are validated."""

    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    PASSWORD_CONFIRMATION = "password_confirmation"


@dataclass(frozen=True)
class RegistrationInput:
    """Raw values of one submission attempt."""

    username: str
    email: str
    password: str
    password_confirmation: str


@dataclass(frozen=True)
class UserRecord:
    """
    A user that passed every registration rule.

    The password is plaintext here; hashing is the directory's job.
    """

    username: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"UserRecord(username={self.username!r}, email={self.email!r})"


@dataclass(frozen=True)
class FieldError:
    """A validation failure attributable to one form field."""

    field: Field
    message: str


@dataclass(frozen=True)
class Ok:
    """Validation succeeded."""

    record: UserRecord


@dataclass(frozen=True)
class Invalid:
    """Validation failed on one or more fields."""

    errors: tuple[FieldError, ...]


ValidationOutcome = Ok | Invalid


@dataclass(frozen=True)
class SubmitError:
    """User-safe description of a failed registration call."""

    message: str
