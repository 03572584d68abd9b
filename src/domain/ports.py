"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interface the domain requires from the user
directory. Adapters implement it structurally.
"""

from typing import Protocol

from .models import UserRecord


class UserDirectory(Protocol):
    """Port interface for user lookup and registration."""

    def username_is_not_in_use(self, username: str) -> bool:
        """
        Check that no existing account uses this username.

        Args:
            username: Username exactly as entered

        Returns:
            True if the username is free, False if already taken
        """
        ...

    def email_is_not_in_use(self, email: str) -> bool:
        """
        Check that no existing account uses this email address.

        Args:
            email: Email address as entered (adapters compare case-insensitively)

        Returns:
            True if the email is free, False if already taken
        """
        ...

    def register(self, user: UserRecord) -> None:
        """
        Persist a validated user.

        Args:
            user: Record produced by a successful validation

        Raises:
            UserAlreadyExists: If a concurrent registration took the username or email
            Exception: Any infrastructure failure
        """
        ...
