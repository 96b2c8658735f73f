"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Header, Request
from psycopg_pool import ConnectionPool

from src.adapters.hashing import BcryptPasswordHasher
from src.adapters.repository.postgres import PostgresUserRepository
from src.config.settings import Settings, get_settings
from src.domain.messages import resolve_locale
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> BcryptPasswordHasher:
    """Create bcrypt hasher with the configured cost factor."""
    return BcryptPasswordHasher(rounds=settings.bcrypt_cost)


def get_registration_service(
    repository: PostgresUserRepository = Depends(get_repository),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and password hasher for the domain service.
    """
    return RegistrationService(repository=repository, hasher=hasher)


def get_locale(
    accept_language: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Resolve the message locale from the Accept-Language header.

    Unsupported or missing languages fall back to the configured default.
    """
    return resolve_locale(accept_language, default=settings.default_locale)
