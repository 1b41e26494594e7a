"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from src.adapters.repository.memory import InMemoryActivityRepository, InMemoryUserRepository
from src.api.error_handlers import register_error_handlers
from src.api.routes import accounts_router, activities_router
from src.config.observability import setup_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "accounts",
        "description": "Register student and admin accounts and obtain access tokens",
    },
    {
        "name": "activities",
        "description": "List, create and update activities; join them as a student",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Configures console logging at the configured level on startup
    - Creates empty in-memory user and activity stores on startup
    - Drops them on shutdown (nothing is persisted)
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info("Starting application...")

    # Store repositories in app state for dependency injection
    app.state.users = InMemoryUserRepository()
    app.state.activities = InMemoryActivityRepository()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    del app.state.users
    del app.state.activities
    logger.info("In-memory stores discarded")


app = FastAPI(
    title="activityhub",
    description="Student Activity API - Register, log in, manage and join student activities",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(accounts_router)
app.include_router(activities_router)


@app.middleware("http")
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log one line per incoming request."""
    logger.info("[REQUEST] %s %s", request.method, request.url)
    return await call_next(request)


@app.get("/")
async def index() -> dict[str, str]:
    """Welcome message for browsers and connectivity checks."""
    return {
        "message": "Welcome to the Student Activity Management API",
        "status": "Server running normally",
        "guide": "Use an HTTP client such as Postman to register and log in.",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK while the process is serving."""
    return {"status": "healthy"}
