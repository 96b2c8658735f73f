"""
API v1 routes.

Defines REST endpoints for the user registration API.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_locale, get_registration_service
from src.api.models import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    ValidationErrorResponse,
)
from src.domain.exceptions import ValidationFailed
from src.domain.ports import RegistrationCandidate
from src.domain.registration import RegistrationService

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "User store unavailable"},
    },
    summary="Register a new user",
    description="Submit username, email and password to create an account. "
    "Validation messages follow the Accept-Language header (en, tr).",
)
async def register(
    request_data: RegisterRequest,
    locale: str = Depends(get_locale),
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Register a new user.

    - **username**: 4 to 32 characters
    - **email**: Valid email address not already registered
    - **password**: At least 6 characters with lowercase, uppercase and a digit

    Returns 400 with per-field messages when validation fails.
    """
    candidate = RegistrationCandidate(
        username=request_data.username,
        email=request_data.email,
        password=request_data.password,
    )
    try:
        service.register(candidate, locale)
    except ValidationFailed as e:
        body = ValidationErrorResponse(validation_errors=e.errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True),
        )
    return RegisterResponse(message="User created!")
