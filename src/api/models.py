"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Fields are nullable on purpose: missing and null values are reported
    by the domain validator as localized errors rather than by pydantic.
    """

    username: str | None = Field(None, description="Username (4-32 characters)")
    email: str | None = Field(None, description="Email address, unique per user")
    password: str | None = Field(
        None,
        description="Password (min 6 characters, with lowercase, uppercase and a digit)",
    )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Per-field localized validation errors."""

    model_config = ConfigDict(populate_by_name=True)

    validation_errors: dict[str, str] = Field(..., alias="validationErrors")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
