"""
Router package for the Hevy Insights API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- workouts: Recent workout summaries
- progression: Lift progression analytics
- exercises: Exercise template search and name resolution
- tools: Tool listing and execution for tool-calling clients
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router
from api.routers.progression import router as progression_router
from api.routers.exercises import router as exercises_router
from api.routers.tools import router as tools_router

__all__ = [
    "health_router",
    "workouts_router",
    "progression_router",
    "exercises_router",
    "tools_router",
]
