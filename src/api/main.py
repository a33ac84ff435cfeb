"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes, logging, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.memory import InMemoryAccountRepository
from src.adapters.repository.postgres import PostgresAccountRepository, run_migrations
from src.api.auth import router as auth_router
from src.config.logging_config import setup_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Account registration - individual customers and business admins",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Configures logging
    - Creates the account repository for the configured storage backend
    - For postgres: opens the connection pool and runs migrations,
      closes the pool on shutdown
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("Starting application...")

    pool: ConnectionPool | None = None
    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.repository = PostgresAccountRepository(pool)
    else:
        logger.info("Using in-memory account storage")
        app.state.repository = InMemoryAccountRepository()

    app.state.pool = pool

    logger.info("Application startup complete")
    logger.info("Registration endpoints:")
    logger.info("  POST /api/auth/register/individual")
    logger.info("  POST /api/auth/register/business")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Build the FastAPI application with routes mounted under /api/auth."""
    application = FastAPI(
        title="account-registration",
        description="Account Registration API - Individual and business account sign-up",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    application.include_router(auth_router, prefix="/api/auth")

    @application.get("/health")
    def health_check(request: Request) -> dict[str, str]:
        """
        Health check endpoint.

        Returns 200 OK if the application is up. With the postgres
        backend, also validates database connectivity.
        """
        pool = getattr(request.app.state, "pool", None)
        if pool is not None:
            with pool.connection() as conn:
                conn.execute("SELECT 1")

        return {"status": "healthy"}

    return application


app = create_app()
