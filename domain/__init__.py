"""
Domain layer for the Hevy Insights API.

This package contains pure domain models that are independent of
infrastructure concerns (HTTP transport, FastAPI, settings).
"""

from domain.models import (
    ExerciseTemplate,
    LiftGoal,
    LiftProgressionResult,
    Trend,
    Workout,
    WorkoutSet,
    WorkoutSummaryItem,
)

__all__ = [
    "ExerciseTemplate",
    "LiftGoal",
    "LiftProgressionResult",
    "Trend",
    "Workout",
    "WorkoutSet",
    "WorkoutSummaryItem",
]
