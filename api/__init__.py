"""
API package for the Hevy Insights API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Translation of gateway errors into HTTP errors
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_hevy_client,
    get_hevy_gateway,
    get_template_cache,
    get_summary_service,
    get_progression_service,
    get_tool_executor,
)

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
