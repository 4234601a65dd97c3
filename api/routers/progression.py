"""
Progression router for lift analytics.

This router provides endpoints for:
- Estimated 1RM, goal progress, trend and recent sessions per requested lift
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_progression_service
from api.errors import gateway_http_error
from application.exceptions import GatewayError
from backend.core.progression_service import LiftProgressionService
from backend.services.tool_params import LiftProgressionParams
from domain.models import LiftProgressionResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/progression",
    tags=["Progression"],
)


@router.post(
    "/lifts",
    response_model=List[LiftProgressionResult],
    response_model_exclude_none=True,
)
async def analyze_lifts(
    request: LiftProgressionParams,
    service: LiftProgressionService = Depends(get_progression_service),
) -> List[LiftProgressionResult]:
    """
    Analyze progression for one or more lifts.

    Lifts are named by search term (e.g. "bench"); the first matching
    exercise template is analyzed. Unmatched names are reported with
    exerciseId "NOT_FOUND" rather than failing the request.
    """
    try:
        return await service.analyze_lift_progression(
            request.exercises,
            lookback_days=request.lookback_days,
        )
    except GatewayError as e:
        raise gateway_http_error(e)
