"""
Unit tests for API request/response models.

Tests Pydantic model validation and serialization for the registration endpoint.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    ValidationErrorResponse,
)


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_valid_register_request(self) -> None:
        """All three fields are accepted as given."""
        request = RegisterRequest(username="test_user", email="testuser@mail.com", password="Password2")
        assert request.username == "test_user"
        assert request.email == "testuser@mail.com"
        assert request.password == "Password2"

    def test_fields_default_to_none(self) -> None:
        """Missing fields are None so the domain validator can report them."""
        request = RegisterRequest()
        assert request.username is None
        assert request.email is None
        assert request.password is None

    def test_explicit_nulls_accepted(self) -> None:
        """Explicit nulls parse without error."""
        request = RegisterRequest.model_validate({"username": None, "email": None, "password": None})
        assert request.email is None

    def test_no_format_checks_at_schema_level(self) -> None:
        """Malformed values are left for the domain validator."""
        request = RegisterRequest(username="u", email="user@mail", password="1")
        assert request.email == "user@mail"

    def test_non_string_rejected(self) -> None:
        """Non-string values raise ValidationError."""
        with pytest.raises(ValidationError):
            RegisterRequest.model_validate({"username": {"nested": True}})


class TestResponseModels:
    """Tests for response models."""

    def test_register_response(self) -> None:
        """RegisterResponse carries the success message."""
        assert RegisterResponse(message="User created!").model_dump() == {"message": "User created!"}

    def test_validation_error_response_uses_camel_case_key(self) -> None:
        """validationErrors is the serialized key."""
        body = ValidationErrorResponse(validation_errors={"email": "Email is already in use"})
        assert body.model_dump(by_alias=True) == {
            "validationErrors": {"email": "Email is already in use"}
        }

    def test_validation_error_response_accepts_alias(self) -> None:
        """The model can be built from the wire format."""
        body = ValidationErrorResponse.model_validate({"validationErrors": {"username": "x"}})
        assert body.validation_errors == {"username": "x"}

    def test_validation_error_response_preserves_order(self) -> None:
        """Field order survives serialization."""
        errors = {"username": "a", "email": "b", "password": "c"}
        body = ValidationErrorResponse(validation_errors=errors)
        assert list(body.model_dump(by_alias=True)["validationErrors"]) == [
            "username",
            "email",
            "password",
        ]

    def test_error_response(self) -> None:
        """ErrorResponse carries a detail string."""
        assert ErrorResponse(detail="Internal server error").detail == "Internal server error"
