"""
Lift progression models.

Remote inputs (per-exercise statistics and progress history) and the
derived per-exercise result of a progression analysis.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.fetch import FetchStatus
from domain.models.workout import WorkoutSet

NOT_FOUND_EXERCISE_ID = "NOT_FOUND"


class Trend(str, Enum):
    """Direction of estimated-1RM change across the trend window."""

    IMPROVING = "improving"
    PLATEAU = "plateau"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


class ExerciseProgress(BaseModel):
    """
    One session of an exercise in the remote progress history.

    The remote service returns these most recent first.
    """

    model_config = ConfigDict(extra="ignore")

    date: str
    workout_id: str
    sets: List[WorkoutSet] = Field(default_factory=list)


class ExerciseStats(BaseModel):
    """Remote per-exercise statistics."""

    model_config = ConfigDict(extra="ignore")

    one_rep_max_kg: Optional[float] = None
    personal_records: List[Dict[str, Any]] = Field(default_factory=list)


class LiftGoal(BaseModel):
    """
    A lift to analyze, named by a search term rather than a resolved id.

    ``goal_kg`` is an optional target for the estimated one-rep max.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(..., min_length=1)
    goal_kg: Optional[float] = Field(default=None, gt=0)


class TopSet(BaseModel):
    """A heavy qualifying set reported for a recent session."""

    model_config = ConfigDict(frozen=True)

    weight_kg: float
    reps: int


class RecentSession(BaseModel):
    """A recent session with its heaviest qualifying sets."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    date: str
    workout_id: str
    top_sets: List[TopSet] = Field(default_factory=list)


class LiftProgressionResult(BaseModel):
    """
    Progression analysis for one requested lift.

    Constructed once per analysis call and never mutated. Numeric fields are
    None when the data needed to compute them is unavailable.

    ``stats_status`` and ``progress_status`` record whether the optional
    statistics/progress fetches succeeded, failed, or were never attempted.
    They are excluded from serialization.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    exercise_name: str
    exercise_id: str
    goal_kg: Optional[float] = None
    current_estimated_1rm: Optional[float] = Field(
        default=None,
        alias="currentEstimated1RM",
    )
    progress_percent: Optional[int] = None
    remaining_kg: Optional[float] = None
    personal_records: List[Dict[str, Any]] = Field(default_factory=list)
    trend: Trend = Trend.INSUFFICIENT_DATA
    trend_delta_kg: Optional[float] = None
    recent_sessions: List[RecentSession] = Field(default_factory=list)

    stats_status: FetchStatus = Field(default=FetchStatus.NOT_ATTEMPTED, exclude=True)
    progress_status: FetchStatus = Field(default=FetchStatus.NOT_ATTEMPTED, exclude=True)

    @property
    def found(self) -> bool:
        return self.exercise_id != NOT_FOUND_EXERCISE_ID
