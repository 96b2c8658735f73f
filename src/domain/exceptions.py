"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationFailed(RegistrationError):
    """One or more candidate fields failed validation."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors


class ConstraintViolation(RegistrationError):
    """Storage rejected a write because the email is already taken."""

    pass


class StorageUnavailable(RegistrationError):
    """The user store could not be reached."""

    pass
