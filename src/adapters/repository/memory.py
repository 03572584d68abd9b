"""
In-memory user directory adapter - Implements UserDirectory protocol.

Dict-backed stand-in for PostgresUserDirectory, used when the
application runs without a database and in tests.
"""

import logging
import threading

import bcrypt

from src.domain.exceptions import UserAlreadyExists
from src.domain.models import UserRecord

logger = logging.getLogger(__name__)


class InMemoryUserDirectory:
    """
    Implements UserDirectory protocol with process-local storage.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Same matching rules as the Postgres adapter: exact usernames,
    case-insensitive emails.
    """

    def __init__(self, bcrypt_cost: int = 10) -> None:
        self._bcrypt_cost = bcrypt_cost
        self._lock = threading.Lock()
        self._users: dict[str, tuple[str, str]] = {}  # username -> (email, password_hash)

    def username_is_not_in_use(self, username: str) -> bool:
        with self._lock:
            return username not in self._users

    def email_is_not_in_use(self, email: str) -> bool:
        key = self._email_key(email)
        with self._lock:
            return all(self._email_key(stored) != key for stored, _ in self._users.values())

    def register(self, user: UserRecord) -> None:
        password_hash = bcrypt.hashpw(
            user.password.encode(), bcrypt.gensalt(rounds=self._bcrypt_cost)
        ).decode()
        key = self._email_key(user.email)

        with self._lock:
            taken = user.username in self._users or any(
                self._email_key(stored) == key for stored, _ in self._users.values()
            )
            if taken:
                raise UserAlreadyExists(user.username)
            self._users[user.username] = (user.email.strip(), password_hash)

        logger.debug("Stored user %s in memory", user.username)

    @staticmethod
    def _email_key(email: str) -> str:
        return email.strip().lower()
