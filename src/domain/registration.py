"""
Registration domain service - User sign-up orchestration.

Flow: validate -> duplicate check -> hash -> persist.

The duplicate-email lookup done during validation only exists to give a
friendly error; two concurrent sign-ups may both pass it. The storage
UNIQUE constraint is authoritative, and losing that race is reported
exactly like the pre-check would have reported it.
"""

import logging
from dataclasses import dataclass
from typing import cast

from .exceptions import ConstraintViolation, ValidationFailed
from .messages import DEFAULT_LOCALE, translate
from .ports import PasswordHasher, RegistrationCandidate, User, UserRepository
from .validation import RegistrationValidator, normalize_email

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, email normalization,
    password hashing and user persistence.
    """

    repository: UserRepository
    hasher: PasswordHasher

    def register(self, candidate: RegistrationCandidate, locale: str = DEFAULT_LOCALE) -> User:
        """
        Register a new user.

        Args:
            candidate: Raw payload submitted by the client
            locale: Language for validation messages

        Returns:
            The persisted user

        Raises:
            ValidationFailed: If any field is invalid or the email is taken
            StorageUnavailable: If the user store cannot be reached
        """
        validator = RegistrationValidator(repository=self.repository)
        errors = validator.validate(candidate, locale)
        if errors:
            raise ValidationFailed(errors)

        # Validation guarantees all three fields are non-empty strings
        username = cast(str, candidate.username)
        email = normalize_email(cast(str, candidate.email))
        password_hash = self.hasher.hash(cast(str, candidate.password))

        try:
            user = self.repository.create(username, email, password_hash)
        except ConstraintViolation:
            logger.warning("Email uniqueness race lost at insert time")
            raise ValidationFailed({"email": translate("email_inuse", locale)}) from None

        logger.info("User registered: id=%s", user.id)
        return user
