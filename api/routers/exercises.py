"""
Exercises router for the exercise template catalog.

This router provides endpoints for:
- Searching exercise templates by name
- Resolving an exercise template ID to its display name
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Query
from pydantic import BaseModel

from api.deps import get_template_cache
from api.errors import gateway_http_error
from application.exceptions import GatewayError
from backend.core.exercise_catalog import ExerciseTemplateCache
from domain.models import ExerciseTemplate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Response Models
# =============================================================================


class ExerciseSearchResponse(BaseModel):
    """Response model for exercise template search."""
    query: str
    templates: List[ExerciseTemplate]
    count: int


class ExerciseNameResponse(BaseModel):
    """Response model for exercise name resolution."""
    id: str
    name: str


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "/search",
    response_model=ExerciseSearchResponse,
    response_model_exclude_none=True,
)
async def search_exercises(
    query: str = Query("", description="Case-insensitive substring of the exercise name"),
    cache: ExerciseTemplateCache = Depends(get_template_cache),
) -> ExerciseSearchResponse:
    """
    Search exercise templates by name.

    An empty query returns the whole catalog.
    """
    try:
        templates = await cache.search(query)
    except GatewayError as e:
        raise gateway_http_error(e)

    return ExerciseSearchResponse(query=query, templates=templates, count=len(templates))


@router.get("/{exercise_id}/name", response_model=ExerciseNameResponse)
async def get_exercise_name(
    exercise_id: str = Path(..., description="Exercise template ID"),
    cache: ExerciseTemplateCache = Depends(get_template_cache),
) -> ExerciseNameResponse:
    """
    Resolve an exercise template ID to its display name.

    Unknown IDs resolve to the ID itself.
    """
    try:
        name = await cache.resolve_exercise_name(exercise_id)
    except GatewayError as e:
        raise gateway_http_error(e)

    return ExerciseNameResponse(id=exercise_id, name=name)
