"""
Exercise template value object.

An exercise template identifies a class of exercise (e.g. "Bench Press
(Barbell)") in the remote catalog. Performed instances inside a workout
reference a template by its id.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExerciseTemplate(BaseModel):
    """
    Read-only snapshot of a remote exercise template.

    Examples:
        >>> template = ExerciseTemplate(id="79D0BB3A", title="Bench Press (Barbell)")
        >>> template.matches("bench")
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Remote template identifier")
    title: str = Field(..., description="Human-readable display name")
    type: Optional[str] = Field(
        default=None,
        description="Tracking type (e.g. 'weight_reps', 'duration')",
    )
    primary_muscle_group: Optional[str] = None
    secondary_muscle_groups: List[str] = Field(default_factory=list)
    equipment: Optional[str] = None
    is_custom: bool = False

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match of ``query`` against the title."""
        return query.lower() in self.title.lower()
