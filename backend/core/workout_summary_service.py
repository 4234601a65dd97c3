"""
Workout Summary Service.

Builds compact summaries of the most recent workouts:
- pages through the workout list, newest first
- fetches full workout detail concurrently (bounded)
- resolves exercise names from the template cache
- picks the best (heaviest qualifying) set per exercise
- optionally keeps only exercises whose name matches a filter

Also serves the read-only workout lookups: a date-filtered listing, a
single workout with resolved exercise names, the workout count and the
workout change events.
"""
import asyncio
import logging
import math
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from application.ports import HevyGateway
from backend.core.constants import (
    DEFAULT_DETAIL_CONCURRENCY,
    DEFAULT_SUMMARY_COUNT,
    FIRST_PAGE,
    WORKOUTS_PAGE_SIZE,
)
from backend.core.exercise_catalog import ExerciseTemplateCache
from domain.models import (
    BestSet,
    ExerciseSummary,
    Workout,
    WorkoutListItem,
    WorkoutSet,
    WorkoutSummaryItem,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_duration(start_time: Optional[str], end_time: Optional[str]) -> str:
    """
    Format the elapsed time between two ISO-8601 timestamps.

    Minutes are rounded to the nearest whole minute. Durations of an hour
    or more render as ``"{h}h {m}m"``, shorter ones as ``"{m}m"``.
    Missing, unparseable or negative spans render as ``"0m"``.

    Examples:
        >>> format_duration("2024-01-01T10:00:00Z", "2024-01-01T11:15:00Z")
        '1h 15m'
        >>> format_duration("2024-01-01T10:00:00Z", "2024-01-01T10:45:00Z")
        '45m'
    """
    if not start_time or not end_time:
        return "0m"

    try:
        elapsed = _parse_timestamp(end_time) - _parse_timestamp(start_time)
    except (ValueError, TypeError):
        logger.debug(f"Unparseable workout timestamps: {start_time!r} - {end_time!r}")
        return "0m"

    minutes = math.floor(elapsed.total_seconds() / 60 + 0.5)
    if minutes <= 0:
        return "0m"

    hours, minutes = divmod(minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def select_best_set(sets: Iterable[WorkoutSet]) -> Optional[BestSet]:
    """
    Heaviest qualifying set; the first one recorded wins a tie.

    Returns None if no set qualifies.
    """
    best: Optional[WorkoutSet] = None
    for workout_set in sets:
        if not workout_set.is_qualifying:
            continue
        if best is None or workout_set.weight_kg > best.weight_kg:
            best = workout_set

    if best is None:
        return None
    return BestSet(weight_kg=best.weight_kg, reps=best.reps)


def summarize_workout(workout: Workout, names: Dict[str, str]) -> WorkoutSummaryItem:
    """Build the summary of one detailed workout using an id -> name map."""
    exercises = [
        ExerciseSummary(
            name=names.get(exercise.exercise_template_id, exercise.exercise_template_id),
            exercise_id=exercise.exercise_template_id,
            notes=exercise.notes or None,
            sets=list(exercise.sets),
            best_set=select_best_set(exercise.sets),
        )
        for exercise in workout.exercises
    ]
    return WorkoutSummaryItem(
        id=workout.id,
        title=workout.title,
        description=workout.description or None,
        date=workout.start_time,
        duration=format_duration(workout.start_time, workout.end_time),
        exercises=exercises,
    )


def list_item(workout: Workout) -> WorkoutListItem:
    """Build the listing row of a workout."""
    return WorkoutListItem(
        id=workout.id,
        title=workout.title,
        date=workout.start_time,
        duration=format_duration(workout.start_time, workout.end_time),
    )


def apply_exercise_filter(
    summaries: Iterable[WorkoutSummaryItem],
    exercise_filter: Optional[str],
) -> List[WorkoutSummaryItem]:
    """
    Keep only exercises whose name contains ``exercise_filter``.

    Matching is case-insensitive. Workouts left with no exercises are
    dropped. An empty or missing filter keeps everything.
    """
    summaries = list(summaries)
    if not exercise_filter:
        return summaries

    needle = exercise_filter.lower()
    filtered: List[WorkoutSummaryItem] = []
    for summary in summaries:
        kept = [e for e in summary.exercises if needle in e.name.lower()]
        if kept:
            filtered.append(summary.model_copy(update={"exercises": kept}))
    return filtered


# =============================================================================
# Workout Summary Service
# =============================================================================


class WorkoutSummaryService:
    """
    Service for recent workout summaries and read-only workout lookups.

    Shares the exercise template cache with the rest of the client context
    so names are resolved without extra remote calls once it is loaded.
    """

    def __init__(
        self,
        gateway: HevyGateway,
        template_cache: ExerciseTemplateCache,
        *,
        detail_concurrency: int = DEFAULT_DETAIL_CONCURRENCY,
        page_size: int = WORKOUTS_PAGE_SIZE,
    ):
        if detail_concurrency < 1:
            raise ValueError(f"detail_concurrency must be >= 1, got {detail_concurrency}")
        self._gateway = gateway
        self._cache = template_cache
        self._detail_concurrency = detail_concurrency
        self._page_size = page_size

    async def summarize_recent_workouts(
        self,
        count: int = DEFAULT_SUMMARY_COUNT,
        exercise_filter: Optional[str] = None,
    ) -> List[WorkoutSummaryItem]:
        """
        Summarize the ``count`` most recent workouts.

        Args:
            count: Number of recent workouts to consider
            exercise_filter: Optional case-insensitive substring of exercise names

        Returns:
            Summaries, most recent first. With a filter, only workouts that
            still contain at least one exercise are returned.

        Raises:
            GatewayError: If the template catalog, the workout list or any
                workout detail cannot be fetched
        """
        await self._cache.ensure_loaded()

        workouts = await self.get_recent_workouts_with_details(count)
        names = self._cache.name_map()

        summaries = [summarize_workout(w, names) for w in workouts]
        result = apply_exercise_filter(summaries, exercise_filter)

        logger.info(
            f"Summarized {len(result)} of {len(workouts)} recent workout(s)"
            + (f" matching '{exercise_filter}'" if exercise_filter else "")
        )
        return result

    async def get_recent_workouts_with_details(self, count: int) -> List[Workout]:
        """
        Fetch the ``count`` most recent workouts with full detail.

        Order of the result matches the order of the workout list.
        """
        if count <= 0:
            return []

        listed = await self._list_recent_workouts(count)
        if not listed:
            return []

        return await self._fetch_details([w.id for w in listed])

    # -------------------------------------------------------------------------
    # Read-only workout lookups
    # -------------------------------------------------------------------------

    async def list_workouts(
        self,
        *,
        page: int = FIRST_PAGE,
        page_size: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WorkoutListItem]:
        """
        List one page of workouts, most recent first, without detail.

        Args:
            page: Page number (1-based)
            page_size: Workouts per page (defaults to the service maximum)
            start_date: Only workouts on or after this date
            end_date: Only workouts on or before this date

        Returns:
            Listing rows with title, date and duration
        """
        workouts = await self._gateway.get_workouts(
            page=page,
            page_size=page_size or self._page_size,
            start_date=start_date,
            end_date=end_date,
        )
        return [list_item(w) for w in workouts]

    async def get_workout(self, workout_id: str) -> WorkoutSummaryItem:
        """
        Get one workout with resolved exercise names and best sets.

        Raises:
            GatewayError: If the template catalog or the workout cannot be fetched
        """
        await self._cache.ensure_loaded()
        workout = await self._gateway.get_workout(workout_id)
        return summarize_workout(workout, self._cache.name_map())

    async def get_workout_count(self) -> int:
        """Total number of workouts on the account."""
        return await self._gateway.get_workout_count()

    async def get_workout_events(self, since: date) -> List[Dict[str, Any]]:
        """Workout update and delete events since ``since``, as sent by the remote service."""
        events = await self._gateway.get_workout_events(since)
        logger.info(f"Fetched {len(events)} workout event(s) since {since.isoformat()}")
        return events

    async def _list_recent_workouts(self, count: int) -> List[Workout]:
        max_pages = math.ceil(count / self._page_size)
        collected: List[Workout] = []

        for page in range(FIRST_PAGE, FIRST_PAGE + max_pages):
            batch = await self._gateway.get_workouts(page=page, page_size=self._page_size)
            collected.extend(batch)
            if len(batch) < self._page_size or len(collected) >= count:
                break

        return collected[:count]

    async def _fetch_details(self, workout_ids: List[str]) -> List[Workout]:
        semaphore = asyncio.Semaphore(self._detail_concurrency)

        async def fetch_one(workout_id: str) -> Workout:
            async with semaphore:
                return await self._gateway.get_workout(workout_id)

        tasks = [asyncio.ensure_future(fetch_one(workout_id)) for workout_id in workout_ids]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
