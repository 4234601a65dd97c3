"""
Translation of gateway failures into HTTP errors.

- HevyAPIUnavailable (connect failure, timeout) -> 504
- HevyAPIError, HevyResponseError, other gateway errors -> 502
"""

import logging

from fastapi import HTTPException

from application.exceptions import GatewayError
from infrastructure import HevyAPIError, HevyAPIUnavailable

logger = logging.getLogger(__name__)


def gateway_http_error(error: GatewayError) -> HTTPException:
    """Build the HTTPException reported for a failed remote call."""
    if isinstance(error, HevyAPIUnavailable):
        logger.warning(f"Hevy API unavailable: {error}")
        return HTTPException(status_code=504, detail=str(error))

    if isinstance(error, HevyAPIError):
        logger.error(f"Hevy API error {error.status_code}: {error}")
    else:
        logger.error(f"Hevy gateway failure: {error}")
    return HTTPException(status_code=502, detail=str(error))
