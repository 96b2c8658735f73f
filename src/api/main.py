"""
Signup API application.

Builds the FastAPI app: the connection pool and schema are prepared on
startup, registration routes live under ``/api/1.0`` and user store
outages are reported as a generic 500.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings
from src.domain.exceptions import StorageUnavailable

logger = logging.getLogger(__name__)

API_PREFIX = "/api/1.0"

tags_metadata = [
    {
        "name": "v1",
        "description": "User Registration API 1.0 - Create user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the user store pool, apply migrations, close the pool on exit."""
    settings = get_settings()

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    logger.info(
        "User store pool opened (min=%s, max=%s)",
        settings.pool_min_size,
        settings.pool_max_size,
    )

    run_migrations(pool)
    app.state.pool = pool
    logger.info("Signup API ready, serving %s/users", API_PREFIX)

    try:
        yield
    finally:
        pool.close()
        logger.info("User store pool closed")


app = FastAPI(
    title="signup",
    description="User Registration API - Validated, localized account creation",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix=API_PREFIX)


@app.exception_handler(StorageUnavailable)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailable) -> JSONResponse:
    """Map user store outages to a generic 500 without leaking driver details."""
    logger.error("Request %s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Report healthy once the user store answers ``SELECT 1``."""
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")
    return {"status": "healthy"}
