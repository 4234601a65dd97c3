"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Hevy Insights API",
        description="Workout summaries and lift progression analytics for Hevy accounts",
        version="1.0.0",
    )

    _configure_cors(app, settings)

    _include_routers(app)

    _log_configuration(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for hevy-insights-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    trusted_origins.extend(settings.cors_allowed_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        workouts_router,
        progression_router,
        exercises_router,
        tools_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(workouts_router)
    app.include_router(progression_router)
    app.include_router(exercises_router)
    app.include_router(tools_router)


def _log_configuration(settings: Settings) -> None:
    """Log the effective configuration at startup."""
    if not settings.hevy_configured:
        logger.warning("HEVY_API_KEY is not set; analytics endpoints will return 503")
    else:
        logger.info(f"Hevy API configured at {settings.hevy_base_url}")

    if settings.sort_progress_defensively:
        logger.info("SORT_PROGRESS_DEFENSIVELY is active")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
