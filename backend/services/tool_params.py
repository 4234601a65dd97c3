"""
Parameter models for the analytics tools.

Schemas for:
- WorkoutSummaryParams: arguments of get-workout-summary
- LiftProgressionParams: arguments of get-lift-progression
- ExerciseSearchParams: arguments of search-exercise-templates
- ExerciseNameParams: arguments of get-exercise-name
- WorkoutListParams: arguments of get-workouts
- WorkoutIdParams: arguments of get-workout
- WorkoutEventsParams: arguments of get-workout-events

Field names on the wire are camelCase (``exerciseFilter``, ``lookbackDays``,
``goalKg``, ``startDate``, ``sinceDate``); snake_case names are accepted
too.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from backend.core.constants import (
    DEFAULT_LOOKBACK_DAYS,
    DEFAULT_SUMMARY_COUNT,
    FIRST_PAGE,
    MAX_LOOKBACK_DAYS,
    MAX_SUMMARY_COUNT,
    WORKOUTS_PAGE_SIZE,
)
from domain.models import LiftGoal


class _ToolParams(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class WorkoutSummaryParams(_ToolParams):
    """Arguments for a recent-workouts summary."""
    count: int = Field(
        default=DEFAULT_SUMMARY_COUNT,
        ge=1,
        description=f"Number of recent workouts to fetch (default: {DEFAULT_SUMMARY_COUNT}, max: {MAX_SUMMARY_COUNT})",
    )
    exercise_filter: Optional[str] = Field(
        default=None,
        description="Optional filter to only show specific exercises (e.g., 'bench', 'squat')",
    )

    @field_validator("count")
    @classmethod
    def clamp_count(cls, v: int) -> int:
        """Counts above the cap are clamped rather than rejected."""
        return min(v, MAX_SUMMARY_COUNT)


class LiftProgressionParams(_ToolParams):
    """Arguments for lift progression analysis."""
    exercises: List[LiftGoal] = Field(
        ...,
        min_length=1,
        description="Exercises to track, each with an optional goal in kg",
    )
    lookback_days: int = Field(
        default=DEFAULT_LOOKBACK_DAYS,
        ge=1,
        le=MAX_LOOKBACK_DAYS,
        description=f"How many days back to analyze for trends (default: {DEFAULT_LOOKBACK_DAYS})",
    )


class ExerciseSearchParams(_ToolParams):
    """Arguments for an exercise template search."""
    query: str = Field(
        default="",
        description="Case-insensitive substring of the exercise name",
    )


class ExerciseNameParams(_ToolParams):
    """Arguments for exercise name resolution."""
    id: str = Field(..., min_length=1, description="Exercise template ID")


class WorkoutListParams(_ToolParams):
    """Arguments for a date-filtered workout listing."""
    start_date: Optional[date] = Field(
        default=None,
        description="Only workouts on or after this date (YYYY-MM-DD)",
    )
    end_date: Optional[date] = Field(
        default=None,
        description="Only workouts on or before this date (YYYY-MM-DD)",
    )
    page: int = Field(default=FIRST_PAGE, ge=FIRST_PAGE, description="Page number (1-based)")
    page_size: int = Field(
        default=WORKOUTS_PAGE_SIZE,
        ge=1,
        le=WORKOUTS_PAGE_SIZE,
        description=f"Workouts per page (max: {WORKOUTS_PAGE_SIZE})",
    )

    @model_validator(mode="after")
    def check_date_range(self) -> "WorkoutListParams":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self


class WorkoutIdParams(_ToolParams):
    """Arguments for a single workout lookup."""
    id: str = Field(..., min_length=1, description="Workout ID")


class WorkoutEventsParams(_ToolParams):
    """Arguments for workout change events."""
    since_date: date = Field(..., description="Earliest event date (YYYY-MM-DD)")
