"""
Workout records as returned by the remote tracking service.

A Workout contains exercises, and each exercise contains the sets that
were actually performed. Keys mirror the remote payload (snake_case).
"""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SetType(str, Enum):
    """Kind of a recorded set."""

    NORMAL = "normal"
    WARMUP = "warmup"
    DROPSET = "dropset"
    FAILURE = "failure"


class WorkoutSet(BaseModel):
    """
    A single recorded set.

    Strength analytics only consider *qualifying* sets: both weight and
    reps recorded (non-zero) and the set is not a warm-up.
    """

    model_config = ConfigDict(extra="ignore")

    index: Optional[int] = None
    type: SetType = SetType.NORMAL
    weight_kg: Optional[float] = None
    reps: Optional[int] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[float] = None
    rpe: Optional[float] = None

    @property
    def is_qualifying(self) -> bool:
        return bool(self.weight_kg) and bool(self.reps) and self.type != SetType.WARMUP


class WorkoutExercise(BaseModel):
    """An exercise performed within a workout."""

    model_config = ConfigDict(extra="ignore")

    index: Optional[int] = None
    title: Optional[str] = None
    exercise_template_id: str
    superset_id: Optional[Union[int, str]] = None
    notes: Optional[str] = None
    sets: List[WorkoutSet] = Field(default_factory=list)


class Workout(BaseModel):
    """
    A logged training session.

    Timestamps are kept as the ISO-8601 strings sent by the remote service;
    the summary layer parses them when computing durations.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    exercises: List[WorkoutExercise] = Field(default_factory=list)
