"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from hoaxify.adapters.repository import InMemoryUserStore, PostgresUserStore, run_migrations
from hoaxify.api.dependencies import create_localizer, create_notifier
from hoaxify.api.v1 import router as v1_router
from hoaxify.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "users",
        "description": "User registration - create inactive accounts and send activation tokens",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the user store (database pool + migrations for postgres)
    - Creates the notifier and loads locale tables
    - Closes connection pool on shutdown
    """
    settings = get_settings()

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
        app.state.user_store = PostgresUserStore(pool)
    else:
        logger.warning("Using in-memory user store; accounts are lost on restart")
        app.state.user_store = InMemoryUserStore()

    app.state.pool = pool
    app.state.notifier = create_notifier(settings)
    app.state.localizer = create_localizer(settings)

    logger.info(
        "Application startup complete (storage=%s, notifier=%s)",
        settings.storage_backend,
        settings.notifier_backend,
    )

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="hoaxify",
    description="User Registration API - inactive accounts with transactional activation email",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/api/1.0")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}
