"""
Progression Service for Lift Tracking.

This module provides business logic for strength progression analytics:
- Estimated 1RM (Brzycki, with a linear estimate for high-rep sets)
- Trend detection across the lookback window
- Goal progress against a target 1RM
- Recent session shaping
"""
import logging
import math
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from application.exceptions import GatewayError
from application.ports import HevyGateway
from backend.core.constants import (
    BRZYCKI_MAX_REPS,
    DEFAULT_LOOKBACK_DAYS,
    PROGRESS_HISTORY_LIMIT,
    RECENT_SESSION_COUNT,
    TOP_SETS_PER_SESSION,
    TREND_THRESHOLD_KG,
)
from backend.core.exercise_catalog import ExerciseTemplateCache
from domain.models import (
    NOT_FOUND_EXERCISE_ID,
    ExerciseProgress,
    ExerciseStats,
    ExerciseTemplate,
    FetchOutcome,
    LiftGoal,
    LiftProgressionResult,
    RecentSession,
    TopSet,
    Trend,
    WorkoutSet,
)

logger = logging.getLogger(__name__)


# =============================================================================
# 1RM Calculation Formulas
# =============================================================================


def calculate_1rm_brzycki(weight: float, reps: int) -> float:
    """
    Calculate estimated 1RM using Brzycki formula.

    Formula: 1RM = weight * 36 / (37 - reps)

    Most accurate for low-to-moderate rep ranges.

    Args:
        weight: Weight lifted
        reps: Number of reps completed

    Returns:
        Estimated 1RM
    """
    if reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)

    return weight * 36 / (37 - reps)


def calculate_1rm_epley(weight: float, reps: int) -> float:
    """
    Calculate estimated 1RM using Epley formula.

    Formula: 1RM = weight * (1 + reps/30)

    Used for high-rep sets where Brzycki degrades.

    Args:
        weight: Weight lifted
        reps: Number of reps completed

    Returns:
        Estimated 1RM
    """
    if reps <= 0:
        return 0.0
    if reps == 1:
        return float(weight)

    return weight * (1 + reps / 30)


def estimate_1rm(weight: float, reps: int) -> float:
    """
    Estimate 1RM for a single set.

    A single is exact, 2-12 reps use Brzycki, and anything above
    12 reps uses the linear (Epley) estimate.
    """
    if reps == 1:
        return float(weight)
    if reps > BRZYCKI_MAX_REPS:
        return calculate_1rm_epley(weight, reps)
    return calculate_1rm_brzycki(weight, reps)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero for positives, matching the usual display rounding."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


# =============================================================================
# Trend and Goal Analytics
# =============================================================================


def max_estimated_1rm(sessions: Iterable[ExerciseProgress]) -> float:
    """Best estimated 1RM over all qualifying sets in ``sessions`` (0.0 if none)."""
    best = 0.0
    for session in sessions:
        for workout_set in session.sets:
            if workout_set.is_qualifying:
                e1rm = estimate_1rm(workout_set.weight_kg, workout_set.reps)
                if e1rm > best:
                    best = e1rm
    return best


def classify_trend(delta_kg: float) -> Trend:
    """Classify a 1RM change; the threshold itself counts as a plateau."""
    if delta_kg > TREND_THRESHOLD_KG:
        return Trend.IMPROVING
    if delta_kg < -TREND_THRESHOLD_KG:
        return Trend.DECLINING
    return Trend.PLATEAU


def compute_trend(
    progress: Sequence[ExerciseProgress],
) -> Tuple[Trend, Optional[float]]:
    """
    Compare the older and newer halves of a progress history.

    ``progress`` is most recent first: the head of the list (before the
    midpoint) is the newer half, the tail is the older half.

    Returns:
        (trend, delta in kg rounded to 0.1) or (INSUFFICIENT_DATA, None)
    """
    if len(progress) < 2:
        return Trend.INSUFFICIENT_DATA, None

    midpoint = len(progress) // 2
    older_max = max_estimated_1rm(progress[midpoint:])
    newer_max = max_estimated_1rm(progress[:midpoint])

    if older_max <= 0 or newer_max <= 0:
        return Trend.INSUFFICIENT_DATA, None

    delta = newer_max - older_max
    return classify_trend(delta), round_half_up(delta, 1)


def compute_goal_progress(
    goal_kg: Optional[float],
    current_1rm: Optional[float],
) -> Tuple[Optional[int], Optional[float]]:
    """
    Progress toward a goal 1RM.

    Returns:
        (percent of goal reached, kg remaining) or (None, None) when either
        the goal or the current estimate is missing
    """
    if not goal_kg or not current_1rm:
        return None, None

    progress_percent = int(round_half_up(current_1rm / goal_kg * 100))
    remaining_kg = max(0.0, round_half_up(goal_kg - current_1rm, 1))
    return progress_percent, remaining_kg


def top_sets(sets: Iterable[WorkoutSet], limit: int = TOP_SETS_PER_SESSION) -> List[TopSet]:
    """Heaviest qualifying sets, heaviest first (ties keep recorded order)."""
    qualifying = [s for s in sets if s.is_qualifying]
    qualifying.sort(key=lambda s: s.weight_kg, reverse=True)
    return [TopSet(weight_kg=s.weight_kg, reps=s.reps) for s in qualifying[:limit]]


def recent_sessions(
    progress: Sequence[ExerciseProgress],
    count: int = RECENT_SESSION_COUNT,
) -> List[RecentSession]:
    """Shape the most recent sessions (head of the list) for reporting."""
    return [
        RecentSession(
            date=entry.date,
            workout_id=entry.workout_id,
            top_sets=top_sets(entry.sets),
        )
        for entry in progress[:count]
    ]


# =============================================================================
# Lift Progression Service
# =============================================================================


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class LiftProgressionService:
    """
    Service for lift progression analysis.

    For each requested lift: resolves the exercise template by name,
    fetches statistics and progress history, and computes estimated-1RM
    trend and goal progress. Missing statistics or history degrade the
    result for that lift only.
    """

    def __init__(
        self,
        gateway: HevyGateway,
        template_cache: ExerciseTemplateCache,
        *,
        sort_progress_defensively: bool = False,
        today: Callable[[], date] = _utc_today,
    ):
        """
        Initialize the progression service.

        Args:
            gateway: Remote data gateway
            template_cache: Exercise template cache shared with the client context
            sort_progress_defensively: Re-sort history by date (newest first)
                instead of trusting the remote ordering
            today: Clock used to compute the lookback start date
        """
        self._gateway = gateway
        self._cache = template_cache
        self._sort_progress_defensively = sort_progress_defensively
        self._today = today

    async def analyze_lift_progression(
        self,
        goals: Sequence[LiftGoal],
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
    ) -> List[LiftProgressionResult]:
        """
        Analyze progression for each requested lift.

        Goals are processed one after another, in input order, to bound the
        load placed on the remote service.

        Args:
            goals: Lifts to analyze, each with an optional goal weight
            lookback_days: Days of history to analyze

        Returns:
            One LiftProgressionResult per goal, in input order

        Raises:
            GatewayError: If the exercise template catalog cannot be loaded
        """
        await self._cache.ensure_loaded()

        start_date = self._today() - timedelta(days=lookback_days)
        logger.info(
            f"Analyzing progression for {len(goals)} lift(s) since {start_date.isoformat()}"
        )

        results: List[LiftProgressionResult] = []
        for goal in goals:
            results.append(await self._analyze_goal(goal, start_date))
        return results

    async def _analyze_goal(
        self,
        goal: LiftGoal,
        start_date: date,
    ) -> LiftProgressionResult:
        matches = self._cache.matching(goal.name)
        if not matches:
            logger.info(f"No exercise template matches '{goal.name}'")
            skipped = FetchOutcome.not_attempted()
            return LiftProgressionResult(
                exercise_name=goal.name,
                exercise_id=NOT_FOUND_EXERCISE_ID,
                goal_kg=goal.goal_kg,
                trend=Trend.INSUFFICIENT_DATA,
                stats_status=skipped.status,
                progress_status=skipped.status,
            )

        # First match in catalog order; no relevance ranking
        template = matches[0]

        stats_outcome = await self._fetch_stats(template)
        progress_outcome = await self._fetch_progress(template, start_date)

        stats: Optional[ExerciseStats] = stats_outcome.value if stats_outcome.succeeded else None
        progress: List[ExerciseProgress] = (
            progress_outcome.value if progress_outcome.succeeded else []
        )
        if self._sort_progress_defensively:
            progress = sorted(progress, key=lambda p: p.date, reverse=True)

        trend, trend_delta_kg = compute_trend(progress)

        current_1rm = stats.one_rep_max_kg if stats else None
        progress_percent, remaining_kg = compute_goal_progress(goal.goal_kg, current_1rm)

        return LiftProgressionResult(
            exercise_name=template.title,
            exercise_id=template.id,
            goal_kg=goal.goal_kg,
            current_estimated_1rm=current_1rm,
            progress_percent=progress_percent,
            remaining_kg=remaining_kg,
            personal_records=list(stats.personal_records) if stats else [],
            trend=trend,
            trend_delta_kg=trend_delta_kg,
            recent_sessions=recent_sessions(progress),
            stats_status=stats_outcome.status,
            progress_status=progress_outcome.status,
        )

    async def _fetch_stats(self, template: ExerciseTemplate) -> FetchOutcome[ExerciseStats]:
        try:
            stats = await self._gateway.get_exercise_stats(template.id)
        except GatewayError as e:
            logger.warning(f"Stats unavailable for exercise {template.id}: {e}")
            return FetchOutcome.failed(str(e))
        return FetchOutcome.ok(stats)

    async def _fetch_progress(
        self,
        template: ExerciseTemplate,
        start_date: date,
    ) -> FetchOutcome[List[ExerciseProgress]]:
        try:
            progress = await self._gateway.get_exercise_progress(
                template.id,
                start_date=start_date,
                limit=PROGRESS_HISTORY_LIMIT,
            )
        except GatewayError as e:
            logger.warning(f"Progress history unavailable for exercise {template.id}: {e}")
            return FetchOutcome.failed(str(e))
        return FetchOutcome.ok(progress)
