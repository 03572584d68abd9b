"""
Domain exceptions - Semantic error types for registration.

Field validation failures are returned as data, never raised. These
exceptions cover the directory side of registration only.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class UserAlreadyExists(RegistrationError):
    """Username or email was taken between validation and registration."""

    pass
