"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

The ``users.email`` UNIQUE constraint is the authoritative guard against
duplicate registrations. A violation surfaces as ConstraintViolation;
connectivity problems surface as StorageUnavailable.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import ConnectionPool, PoolTimeout

from src.domain.exceptions import ConstraintViolation, StorageUnavailable
from src.domain.ports import User

logger = logging.getLogger(__name__)


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create(self, username: str, email: str, password_hash: str) -> User:
        """
        Insert a new user row.

        Args:
            username: Validated username
            email: Normalized email address (lowercase, stripped)
            password_hash: bcrypt-hashed password from domain layer

        Returns:
            The stored user with its generated id

        Raises:
            ConstraintViolation: If a user with this email already exists
            StorageUnavailable: If the database cannot be reached
        """
        sql = """
            INSERT INTO users (username, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (username, email, password_hash))
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation:
            raise ConstraintViolation(email) from None
        except (psycopg.OperationalError, PoolTimeout) as e:
            logger.error(f"User insert failed: {e}")
            raise StorageUnavailable("User store unavailable") from e

        return User(id=row[0], username=username, email=email, password_hash=password_hash)

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by email.

        Args:
            email: Normalized email address

        Returns:
            The matching user, or None if not registered

        Raises:
            StorageUnavailable: If the database cannot be reached
        """
        sql = """
            SELECT id, username, email, password_hash
            FROM users
            WHERE email = %s
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except (psycopg.OperationalError, PoolTimeout) as e:
            logger.error(f"User lookup failed: {e}")
            raise StorageUnavailable("User store unavailable") from e

        if row is None:
            return None
        return User(id=row[0], username=row[1], email=row[2], password_hash=row[3])


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
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
