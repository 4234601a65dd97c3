"""
FastAPI Dependency Providers for the Hevy Insights API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and the Hevy client are cached per-process (lru_cache)
- The exercise template cache is shared per gateway (one client context)
- Services and the tool executor are created per-request

Usage in routers:
    from api.deps import get_summary_service
    from backend.core.workout_summary_service import WorkoutSummaryService

    @router.get("/workouts/summary")
    async def summary(
        service: WorkoutSummaryService = Depends(get_summary_service),
    ):
        return await service.summarize_recent_workouts()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_hevy_gateway] = lambda: FakeHevyGateway()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException

# Protocol types (interfaces)
from application.ports import HevyGateway

# Concrete implementations
from infrastructure import HevyClient

from backend.core.exercise_catalog import ExerciseTemplateCache
from backend.core.progression_service import LiftProgressionService
from backend.core.workout_summary_service import WorkoutSummaryService
from backend.services.tool_executor import ToolExecutor, create_tool_executor
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Hevy Client Provider
# =============================================================================


@lru_cache
def get_hevy_client() -> Optional[HevyClient]:
    """
    Get Hevy client instance (cached).

    Creates a HevyClient using credentials from settings.
    Returns None if the API key is not configured.

    Returns:
        HevyClient: Hevy API client instance, or None if not configured
    """
    # Get settings directly to ensure caching works properly
    settings = _get_settings()

    if not settings.hevy_api_key:
        return None

    return HevyClient(
        settings.hevy_api_key,
        base_url=settings.hevy_base_url,
        timeout=settings.hevy_request_timeout,
        retry_attempts=settings.hevy_retry_attempts,
    )


def get_hevy_gateway() -> HevyGateway:
    """
    Get the HevyGateway implementation, raising if not configured.

    Raises:
        HTTPException: 503 if HEVY_API_KEY is not configured
    """
    client = get_hevy_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Hevy API not available. HEVY_API_KEY not configured.",
        )
    return client


# =============================================================================
# Template Cache Provider
# =============================================================================


@lru_cache(maxsize=8)
def _template_cache_for(gateway: HevyGateway) -> ExerciseTemplateCache:
    return ExerciseTemplateCache(gateway)


def get_template_cache(
    gateway: HevyGateway = Depends(get_hevy_gateway),
) -> ExerciseTemplateCache:
    """
    Get the exercise template cache for the current gateway.

    The cache lives as long as the gateway it was built for, so the
    catalog is fetched once per client context rather than per request.
    """
    return _template_cache_for(gateway)


# =============================================================================
# Service Providers
# =============================================================================


def get_summary_service(
    gateway: HevyGateway = Depends(get_hevy_gateway),
    cache: ExerciseTemplateCache = Depends(get_template_cache),
    settings: Settings = Depends(get_settings),
) -> WorkoutSummaryService:
    """Get a WorkoutSummaryService bound to the shared template cache."""
    return WorkoutSummaryService(
        gateway,
        cache,
        detail_concurrency=settings.workout_detail_concurrency,
    )


def get_progression_service(
    gateway: HevyGateway = Depends(get_hevy_gateway),
    cache: ExerciseTemplateCache = Depends(get_template_cache),
    settings: Settings = Depends(get_settings),
) -> LiftProgressionService:
    """Get a LiftProgressionService bound to the shared template cache."""
    return LiftProgressionService(
        gateway,
        cache,
        sort_progress_defensively=settings.sort_progress_defensively,
    )


def get_tool_executor(
    summary_service: WorkoutSummaryService = Depends(get_summary_service),
    progression_service: LiftProgressionService = Depends(get_progression_service),
    cache: ExerciseTemplateCache = Depends(get_template_cache),
) -> ToolExecutor:
    """Get a ToolExecutor over the analytics services."""
    return create_tool_executor(summary_service, progression_service, cache)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Hevy
    "get_hevy_client",
    "get_hevy_gateway",
    "get_template_cache",
    # Services
    "get_summary_service",
    "get_progression_service",
    "get_tool_executor",
]
