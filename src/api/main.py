"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance and its lifespan
events, and mounts the registration page routes.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from src.adapters.http.client import HttpRegistrationClient
from src.api.routes import router as register_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "register",
        "description": "Registration form - Validate input and submit it to the registration endpoint",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Applies the configured log level
    - Creates the shared HTTP client for the registration endpoint
    - Closes the HTTP client on shutdown
    """
    settings = get_settings()
    logging.getLogger("src").setLevel(settings.log_level.upper())

    logger.info("Starting application...")
    logger.info("Registration endpoint: %s", settings.registration_url)

    http_client = httpx.AsyncClient(timeout=settings.request_timeout_seconds)

    # Store client in app state for dependency injection
    app.state.registration_client = HttpRegistrationClient(
        http_client, settings.registration_url
    )

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await http_client.aclose()
    logger.info("HTTP client closed")


app = FastAPI(
    title="registerform",
    description="Registration form - validation and submission state machine",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(register_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK while the application is up."""
    return {"status": "healthy"}
