"""
Registration validator - Ordered per-field rule chains.

Each field owns a tuple of (message_id, predicate) rules. Rules run in
order and the first failing rule is the only error recorded for that
field; every field is always checked.

The email uniqueness lookup needs the user store, so it runs as a
separate phase after the synchronous email rules have passed.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from .messages import DEFAULT_LOCALE, translate
from .ports import RegistrationCandidate, UserRepository

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")
_CONTROL = re.compile(r"[\x00-\x1f\x7f]")

Rule = tuple[str, Callable[[str], bool]]


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    """Syntax-only email check (no DNS lookups)."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def has_required_characters(password: str) -> bool:
    """At least one lowercase letter, one uppercase letter and one digit."""
    return all(pattern.search(password) for pattern in (_LOWERCASE, _UPPERCASE, _DIGIT))


USERNAME_RULES: tuple[Rule, ...] = (
    ("username_length", lambda value: USERNAME_MIN_LENGTH <= len(value) <= USERNAME_MAX_LENGTH),
    ("username_invalid", lambda value: _CONTROL.search(value) is None),
)

EMAIL_RULES: tuple[Rule, ...] = (
    ("email_format", lambda value: is_valid_email(value.strip())),
)

PASSWORD_RULES: tuple[Rule, ...] = (
    ("password_length", lambda value: len(value) >= PASSWORD_MIN_LENGTH),
    ("password_pattern", has_required_characters),
)


def check_field(field: str, value: str | None, rules: tuple[Rule, ...]) -> str | None:
    """
    Run one field's rule chain.

    Returns:
        The message id of the first failing rule, or None if all pass.
        Empty or missing values fail with ``<field>_null``.
    """
    if not value:
        return f"{field}_null"
    for message_id, predicate in rules:
        if not predicate(value):
            return message_id
    return None


@dataclass
class RegistrationValidator:
    """
    Validates registration candidates and localizes the errors.

    Produces an ordered mapping field -> message with keys in
    ``username, email, password`` order; a missing key means the
    field passed.
    """

    repository: UserRepository

    def check(self, candidate: RegistrationCandidate) -> dict[str, str]:
        """
        Validate a candidate and return message ids per failing field.

        Args:
            candidate: Raw payload to check

        Returns:
            Ordered mapping field -> message id
        """
        failures: dict[str, str] = {}

        username_error = check_field("username", candidate.username, USERNAME_RULES)
        if username_error:
            failures["username"] = username_error

        email_error = check_field("email", candidate.email, EMAIL_RULES)
        if email_error is None and candidate.email is not None:
            if self.repository.find_by_email(normalize_email(candidate.email)) is not None:
                email_error = "email_inuse"
        if email_error:
            failures["email"] = email_error

        password_error = check_field("password", candidate.password, PASSWORD_RULES)
        if password_error:
            failures["password"] = password_error

        return failures

    def validate(
        self, candidate: RegistrationCandidate, locale: str = DEFAULT_LOCALE
    ) -> dict[str, str]:
        """
        Validate a candidate and return localized messages per failing field.

        Args:
            candidate: Raw payload to check
            locale: Message catalog to resolve errors with

        Returns:
            Ordered mapping field -> localized message (empty when valid)
        """
        return {
            field: translate(message_id, locale)
            for field, message_id in self.check(candidate).items()
        }
