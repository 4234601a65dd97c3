"""
Domain models for the Hevy Insights API.

This package contains pure domain models that are independent of
infrastructure concerns (HTTP transport, FastAPI, settings).

These models represent the core concepts:
- ExerciseTemplate: A named class of exercise from the remote catalog
- Workout / WorkoutExercise / WorkoutSet: Logged training data
- WorkoutSummaryItem: Derived summary of a recent workout
- WorkoutListItem: One row of a workout listing
- ExerciseProgress / ExerciseStats: Remote per-exercise history and stats
- LiftGoal / LiftProgressionResult: Input and output of progression analysis
- FetchOutcome: Success or absence of an optional remote fetch

Usage:
    >>> from domain.models import LiftGoal, WorkoutSet

    >>> goal = LiftGoal(name="bench", goal_kg=100)
    >>> WorkoutSet(type="normal", weight_kg=80, reps=5).is_qualifying
    True

    >>> # Serialize with the camelCase wire names
    >>> goal.model_dump(by_alias=True)
    {'name': 'bench', 'goalKg': 100.0}
"""

from domain.models.exercise import ExerciseTemplate
from domain.models.fetch import FetchOutcome, FetchStatus
from domain.models.progression import (
    NOT_FOUND_EXERCISE_ID,
    ExerciseProgress,
    ExerciseStats,
    LiftGoal,
    LiftProgressionResult,
    RecentSession,
    TopSet,
    Trend,
)
from domain.models.summary import (
    BestSet,
    ExerciseSummary,
    WorkoutListItem,
    WorkoutSummaryItem,
)
from domain.models.workout import SetType, Workout, WorkoutExercise, WorkoutSet

__all__ = [
    # Catalog
    "ExerciseTemplate",
    # Workouts
    "Workout",
    "WorkoutExercise",
    "WorkoutSet",
    "SetType",
    # Summaries
    "WorkoutSummaryItem",
    "WorkoutListItem",
    "ExerciseSummary",
    "BestSet",
    # Progression
    "ExerciseProgress",
    "ExerciseStats",
    "LiftGoal",
    "LiftProgressionResult",
    "RecentSession",
    "TopSet",
    "Trend",
    "NOT_FOUND_EXERCISE_ID",
    # Fetch outcomes
    "FetchOutcome",
    "FetchStatus",
]
