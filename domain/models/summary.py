"""
Derived workout summary structures.

These are computed per request and never persisted. Serialized field names
are camelCase (``exerciseId``, ``bestSet``); set payloads keep the remote
snake_case keys.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.workout import WorkoutSet


class BestSet(BaseModel):
    """Heaviest qualifying set of an exercise."""

    model_config = ConfigDict(frozen=True)

    weight_kg: float
    reps: int


class ExerciseSummary(BaseModel):
    """An exercise inside a workout summary, with its resolved name."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str
    exercise_id: str
    notes: Optional[str] = None
    sets: List[WorkoutSet] = Field(default_factory=list)
    best_set: Optional[BestSet] = None


class WorkoutSummaryItem(BaseModel):
    """One workout in a recent-workouts summary."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    description: Optional[str] = None
    date: Optional[str] = None
    duration: str
    exercises: List[ExerciseSummary] = Field(default_factory=list)


class WorkoutListItem(BaseModel):
    """One row of a workout listing: identity, date and duration only."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    date: Optional[str] = None
    duration: str
