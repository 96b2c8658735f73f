"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the value types that cross them.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class RegistrationCandidate:
    """
    Raw registration payload as submitted by a client.

    Every field may be None; nothing has been validated yet.
    """

    username: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class User:
    """Persisted user record."""

    id: int
    username: str
    email: str
    password_hash: str


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def create(self, username: str, email: str, password_hash: str) -> User:
        """
        Insert a new user row.

        Args:
            username: Validated username
            email: Normalized email address
            password_hash: bcrypt hashed password

        Returns:
            The stored user with its generated id

        Raises:
            ConstraintViolation: If the email already exists
            StorageUnavailable: If the database cannot be reached
        """
        ...

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by normalized email.

        Returns:
            The matching user, or None
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a salted digest embeddable as a single string."""
        ...
