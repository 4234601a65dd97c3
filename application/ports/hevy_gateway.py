"""
Hevy Gateway Interface (Port).

This module defines the abstract interface for reading workout and exercise
data from the remote fitness-tracking service. Used by the template cache,
the workout summary service and the lift progression service.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

from domain.models import (
    ExerciseProgress,
    ExerciseStats,
    ExerciseTemplate,
    Workout,
)


class HevyGateway(Protocol):
    """
    Abstract interface for remote workout data access.

    Every method either returns its typed payload or raises a
    ``GatewayError`` subclass. Callers do not distinguish failure kinds
    beyond succeeded/failed.
    """

    async def get_workouts(
        self,
        *,
        page: int = 1,
        page_size: int = 10,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Workout]:
        """
        Get one page of workouts, most recent first.

        Args:
            page: Page number (1-based)
            page_size: Workouts per page (service maximum is 10)
            start_date: Only workouts on or after this date
            end_date: Only workouts on or before this date

        Returns:
            List of workouts (may be shorter than page_size on the last page)
        """
        ...

    async def get_workout(self, workout_id: str) -> Workout:
        """
        Get a single workout with full exercise and set detail.

        Args:
            workout_id: Remote workout ID

        Returns:
            Workout
        """
        ...

    async def get_workout_count(self) -> int:
        """Get the total number of workouts on the account."""
        ...

    async def get_workout_events(self, since: date) -> List[Dict[str, Any]]:
        """
        Get workout update/delete events since a date.

        Args:
            since: Earliest event date

        Returns:
            List of raw event dicts
        """
        ...

    async def get_exercise_templates(
        self,
        *,
        page: int = 1,
        page_size: int = 100,
    ) -> List[ExerciseTemplate]:
        """
        Get one page of the exercise template catalog.

        Args:
            page: Page number (1-based)
            page_size: Templates per page (service maximum is 100)

        Returns:
            List of templates (shorter than page_size on the last page)
        """
        ...

    async def get_exercise_stats(self, template_id: str) -> ExerciseStats:
        """
        Get statistics for an exercise.

        Args:
            template_id: Exercise template ID

        Returns:
            ExerciseStats with the current estimated 1RM and personal records
        """
        ...

    async def get_exercise_progress(
        self,
        template_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 50,
    ) -> List[ExerciseProgress]:
        """
        Get the per-session history of an exercise.

        Returns sessions ordered most recent first.

        Args:
            template_id: Exercise template ID
            start_date: Only sessions on or after this date
            end_date: Only sessions on or before this date
            limit: Maximum number of sessions

        Returns:
            List of ExerciseProgress entries
        """
        ...
