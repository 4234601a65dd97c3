"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    """
    Simple liveness endpoint for hevy-insights-api.

    Returns:
        dict: Status indicator for health checks, plus whether a Hevy
        API key is configured
    """
    return {
        "status": "ok",
        "hevy_configured": settings.hevy_configured,
    }
