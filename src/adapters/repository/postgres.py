"""
PostgreSQL user directory adapter - Implements UserDirectory protocol.

This module provides the PostgreSQL implementation of the domain's
directory port using psycopg3 with raw SQL.

Uniqueness is enforced twice: the lookups give the form its field
errors, and the unique indexes from migrations/001_users.sql reject a
registration that lost a race after validation. Emails are compared
case-insensitively, usernames exactly.
"""

import logging
from pathlib import Path

import bcrypt
from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from src.domain.exceptions import UserAlreadyExists
from src.domain.models import UserRecord

logger = logging.getLogger(__name__)


class PostgresUserDirectory:
    """
    Implements UserDirectory protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool, bcrypt_cost: int = 10) -> None:
        """
        Initialize directory with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
            bcrypt_cost: bcrypt work factor for stored password hashes
        """
        self._pool = pool
        self._bcrypt_cost = bcrypt_cost

    def username_is_not_in_use(self, username: str) -> bool:
        sql = "SELECT 1 FROM users WHERE username = %s"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (username,))
            return cursor.fetchone() is None

    def email_is_not_in_use(self, email: str) -> bool:
        sql = "SELECT 1 FROM users WHERE LOWER(email) = LOWER(%s)"
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email.strip(),))
            return cursor.fetchone() is None

    def register(self, user: UserRecord) -> None:
        """
        Insert a validated user with a bcrypt password hash.

        Args:
            user: Record produced by RegistrationValidator.validate()

        Raises:
            UserAlreadyExists: If the username or email was taken concurrently
        """
        password_hash = bcrypt.hashpw(
            user.password.encode(), bcrypt.gensalt(rounds=self._bcrypt_cost)
        ).decode()

        sql = """
            INSERT INTO users (username, email, password_hash, created_at)
            VALUES (%s, %s, %s, NOW())
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (user.username, user.email.strip(), password_hash))
                conn.commit()
        except UniqueViolation as e:
            raise UserAlreadyExists(user.username) from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
