"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation rules, message catalog and
registration flow. It defines its own port interfaces for
infrastructure abstraction.
"""

from .exceptions import (
    ConstraintViolation,
    RegistrationError,
    StorageUnavailable,
    ValidationFailed,
)
from .ports import PasswordHasher, RegistrationCandidate, User, UserRepository
from .registration import RegistrationService
from .validation import RegistrationValidator

__all__ = [
    "ConstraintViolation",
    "PasswordHasher",
    "RegistrationCandidate",
    "RegistrationError",
    "RegistrationService",
    "RegistrationValidator",
    "StorageUnavailable",
    "User",
    "UserRepository",
    "ValidationFailed",
]
