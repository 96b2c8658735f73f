"""
Shared test fixtures and configuration.

This module provides:
- An in-memory UserRepository fake honoring the email UNIQUE constraint
- A fast bcrypt hasher for tests that do not inspect the cost factor
"""

import itertools
import threading

import pytest

from src.adapters.hashing import BcryptPasswordHasher
from src.domain.exceptions import ConstraintViolation
from src.domain.ports import User


class InMemoryUserRepository:
    """UserRepository fake backed by a dict keyed on email."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, username: str, email: str, password_hash: str) -> User:
        with self._lock:
            if email in self.users:
                raise ConstraintViolation(email)
            user = User(
                id=next(self._ids),
                username=username,
                email=email,
                password_hash=password_hash,
            )
            self.users[email] = user
            return user

    def find_by_email(self, email: str) -> User | None:
        return self.users.get(email)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def fast_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the minimum cost factor."""
    return BcryptPasswordHasher(rounds=4)
