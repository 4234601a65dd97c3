"""
Workouts router for workout summaries and read-only workout lookups.

This router provides endpoints for:
- Summaries of the most recent workouts with resolved exercise names
- Date-filtered workout listing
- A single workout with resolved exercise names
- Workout count and workout change events
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from api.deps import get_summary_service
from api.errors import gateway_http_error
from application.exceptions import GatewayError
from backend.core.constants import (
    DEFAULT_SUMMARY_COUNT,
    FIRST_PAGE,
    MAX_SUMMARY_COUNT,
    WORKOUTS_PAGE_SIZE,
)
from backend.core.workout_summary_service import WorkoutSummaryService
from domain.models import WorkoutListItem, WorkoutSummaryItem

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Response Models
# =============================================================================


class WorkoutCountResponse(BaseModel):
    """Response model for the workout count."""
    count: int


class WorkoutEventsResponse(BaseModel):
    """Response model for workout change events."""
    since: date
    events: List[Dict[str, Any]]
    count: int


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "/summary",
    response_model=List[WorkoutSummaryItem],
    response_model_exclude_none=True,
)
async def get_workout_summary(
    count: int = Query(
        DEFAULT_SUMMARY_COUNT,
        ge=1,
        description=f"Number of recent workouts (values above {MAX_SUMMARY_COUNT} are clamped)",
    ),
    exercise_filter: Optional[str] = Query(
        None,
        description="Only include exercises whose name contains this text",
    ),
    service: WorkoutSummaryService = Depends(get_summary_service),
) -> List[WorkoutSummaryItem]:
    """
    Summarize the most recent workouts.

    Each workout carries its duration and its exercises with resolved names,
    recorded sets, and best (heaviest qualifying) set. With an exercise
    filter, workouts without a matching exercise are omitted.
    """
    try:
        return await service.summarize_recent_workouts(
            count=min(count, MAX_SUMMARY_COUNT),
            exercise_filter=exercise_filter,
        )
    except GatewayError as e:
        raise gateway_http_error(e)


@router.get("/count", response_model=WorkoutCountResponse)
async def get_workout_count(
    service: WorkoutSummaryService = Depends(get_summary_service),
) -> WorkoutCountResponse:
    """Total number of workouts on the account."""
    try:
        count = await service.get_workout_count()
    except GatewayError as e:
        raise gateway_http_error(e)

    return WorkoutCountResponse(count=count)


@router.get("/events", response_model=WorkoutEventsResponse)
async def get_workout_events(
    since: date = Query(..., description="Earliest event date (YYYY-MM-DD)"),
    service: WorkoutSummaryService = Depends(get_summary_service),
) -> WorkoutEventsResponse:
    """Workout update and delete events since a date."""
    try:
        events = await service.get_workout_events(since)
    except GatewayError as e:
        raise gateway_http_error(e)

    return WorkoutEventsResponse(since=since, events=events, count=len(events))


@router.get(
    "",
    response_model=List[WorkoutListItem],
    response_model_exclude_none=True,
)
async def list_workouts(
    start_date: Optional[date] = Query(None, description="Only workouts on or after this date"),
    end_date: Optional[date] = Query(None, description="Only workouts on or before this date"),
    page: int = Query(FIRST_PAGE, ge=FIRST_PAGE, description="Page number (1-based)"),
    page_size: int = Query(
        WORKOUTS_PAGE_SIZE,
        ge=1,
        le=WORKOUTS_PAGE_SIZE,
        description="Workouts per page",
    ),
    service: WorkoutSummaryService = Depends(get_summary_service),
) -> List[WorkoutListItem]:
    """
    List one page of workouts, most recent first.

    Rows carry title, date and duration only; use GET /workouts/{workout_id}
    for exercise detail.
    """
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=422, detail="start_date must not be after end_date")

    try:
        return await service.list_workouts(
            page=page,
            page_size=page_size,
            start_date=start_date,
            end_date=end_date,
        )
    except GatewayError as e:
        raise gateway_http_error(e)


@router.get(
    "/{workout_id}",
    response_model=WorkoutSummaryItem,
    response_model_exclude_none=True,
)
async def get_workout(
    workout_id: str = Path(..., description="Workout ID"),
    service: WorkoutSummaryService = Depends(get_summary_service),
) -> WorkoutSummaryItem:
    """Get one workout with resolved exercise names, sets and best sets."""
    try:
        return await service.get_workout(workout_id)
    except GatewayError as e:
        raise gateway_http_error(e)
