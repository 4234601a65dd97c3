"""
HTTP client for the Hevy public API.

This client handles communication with the remote fitness-tracking service
for reading workouts, exercise templates, per-exercise statistics and
per-exercise progress history.
"""

import json
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from application.exceptions import GatewayError
from domain.models import (
    ExerciseProgress,
    ExerciseStats,
    ExerciseTemplate,
    Workout,
)
from infrastructure.retry import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WAIT_SECONDS,
    DEFAULT_MIN_WAIT_SECONDS,
    create_async_retrying,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.hevyapp.com"
DEFAULT_TIMEOUT_SECONDS = 60.0

# Service-enforced page size limits
WORKOUTS_MAX_PAGE_SIZE = 10
TEMPLATES_MAX_PAGE_SIZE = 100

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})

ModelT = TypeVar("ModelT", bound=BaseModel)


class HevyClientError(GatewayError):
    """Base exception for Hevy client errors."""

    pass


class HevyAPIUnavailable(HevyClientError):
    """Raised when the Hevy API cannot be reached."""

    pass


class HevyAPITimeout(HevyAPIUnavailable):
    """Raised when a Hevy API request exceeds the configured timeout."""

    pass


class HevyAPIError(HevyClientError):
    """Raised when the Hevy API returns an error response."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class HevyResponseError(HevyClientError):
    """Raised when a successful response body cannot be parsed."""

    pass


def is_transient_error(exception: BaseException) -> bool:
    """
    Determine if a Hevy client error is worth retrying.

    Retryable errors include:
    - Rate limit errors (429)
    - Server errors (5xx)
    - Connection errors

    Timeouts are not retried: a timed-out request is a failure of that call.
    """
    if isinstance(exception, HevyAPITimeout):
        return False
    if isinstance(exception, HevyAPIUnavailable):
        return True
    if isinstance(exception, HevyAPIError):
        return exception.status_code in RETRYABLE_STATUS_CODES
    return False


def extract_error_detail(response: httpx.Response) -> str:
    """
    Pull a readable message out of an error response.

    Tries the common JSON error shapes first (``error.message``,
    ``message``, ``error``), then the raw body, then the reason phrase.
    """
    body = response.text
    if not body:
        return response.reason_phrase

    try:
        payload = json.loads(body)
    except ValueError:
        return body

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if payload.get("message"):
            return str(payload["message"])
        if isinstance(error, str) and error:
            return error
    return json.dumps(payload)


class HevyClient:
    """
    HTTP client for Hevy API communication.

    Implements the HevyGateway port. Each request carries the account's
    ``api-key`` header, is bounded by a fixed timeout, and is retried with
    exponential backoff on rate limiting, server errors and connection
    failures.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        *,
        retry_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_min_wait: float = DEFAULT_MIN_WAIT_SECONDS,
        retry_max_wait: float = DEFAULT_MAX_WAIT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Hevy client.

        Args:
            api_key: Hevy API key for the account
            base_url: Base URL of the Hevy API
            timeout: Request timeout in seconds
            retry_attempts: Maximum attempts for transient failures
            retry_min_wait: Minimum backoff between attempts in seconds
            retry_max_wait: Maximum backoff between attempts in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._retry_attempts = retry_attempts
        self._retry_min_wait = retry_min_wait
        self._retry_max_wait = retry_max_wait
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request with retry and return the decoded JSON body.

        Raises:
            HevyAPIUnavailable: If the Hevy API is not reachable
            HevyAPITimeout: If the request timed out
            HevyAPIError: If the Hevy API returns an error response
            HevyResponseError: If the response body is not valid JSON
        """
        retrying = create_async_retrying(
            is_transient_error,
            max_attempts=self._retry_attempts,
            min_wait_seconds=self._retry_min_wait,
            max_wait_seconds=self._retry_max_wait,
        )
        return await retrying(self._send, method, path, params)

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]],
    ) -> Any:
        url = f"{self._base_url}{path}"
        headers = {
            "api-key": self._api_key,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Hevy API timeout: {method} {path}")
            raise HevyAPITimeout("Hevy API request timed out") from e
        except httpx.TransportError as e:
            logger.error(f"Hevy API unavailable: {e}")
            raise HevyAPIUnavailable(
                f"Hevy API is not available at {self._base_url}"
            ) from e

        if not response.is_success:
            detail = extract_error_detail(response)
            logger.error(f"Hevy API error: {response.status_code} - {detail}")
            raise HevyAPIError(
                f"Hevy API error ({response.status_code}): {detail}",
                response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise HevyResponseError(
                f"Hevy API returned an invalid JSON body for {path}"
            ) from e

    @staticmethod
    def _parse(model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise HevyResponseError(
                f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)"
            ) from e

    @classmethod
    def _parse_list(cls, model: Type[ModelT], payload: Any, key: str) -> List[ModelT]:
        if not isinstance(payload, dict):
            raise HevyResponseError(f"Expected an object with '{key}'")
        items = payload.get(key) or []
        return [cls._parse(model, item) for item in items]

    # -------------------------------------------------------------------------
    # Workouts
    # -------------------------------------------------------------------------

    async def get_workouts(
        self,
        *,
        page: int = 1,
        page_size: int = WORKOUTS_MAX_PAGE_SIZE,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Workout]:
        """
        Get one page of workouts, most recent first.

        Args:
            page: Page number (1-based)
            page_size: Workouts per page (max 10)
            start_date: Only workouts on or after this date
            end_date: Only workouts on or before this date

        Returns:
            List of Workout summaries
        """
        params: Dict[str, Any] = {"page": page, "pageSize": page_size}
        if start_date:
            params["startDate"] = start_date.isoformat()
        if end_date:
            params["endDate"] = end_date.isoformat()

        payload = await self._request("GET", "/v1/workouts", params)
        return self._parse_list(Workout, payload, "workouts")

    async def get_workout(self, workout_id: str) -> Workout:
        """Get a single workout with full exercise and set detail."""
        payload = await self._request("GET", f"/v1/workouts/{quote(workout_id, safe='')}")
        return self._parse(Workout, payload)

    async def get_workout_count(self) -> int:
        """Get the total number of workouts on the account."""
        payload = await self._request("GET", "/v1/workouts/count")
        if not isinstance(payload, dict) or "workout_count" not in payload:
            raise HevyResponseError("Expected an object with 'workout_count'")
        return int(payload["workout_count"])

    async def get_workout_events(self, since: date) -> List[Dict[str, Any]]:
        """Get workout update/delete events since a date."""
        payload = await self._request(
            "GET",
            "/v1/workouts/events",
            {"since": since.isoformat()},
        )
        if not isinstance(payload, dict):
            raise HevyResponseError("Expected an object with 'events'")
        return list(payload.get("events") or [])

    # -------------------------------------------------------------------------
    # Exercise templates
    # -------------------------------------------------------------------------

    async def get_exercise_templates(
        self,
        *,
        page: int = 1,
        page_size: int = TEMPLATES_MAX_PAGE_SIZE,
    ) -> List[ExerciseTemplate]:
        """
        Get one page of the exercise template catalog.

        Args:
            page: Page number (1-based)
            page_size: Templates per page (max 100)

        Returns:
            List of ExerciseTemplate
        """
        payload = await self._request(
            "GET",
            "/v1/exercise_templates",
            {"page": page, "pageSize": page_size},
        )
        return self._parse_list(ExerciseTemplate, payload, "exercise_templates")

    # -------------------------------------------------------------------------
    # Per-exercise analytics
    # -------------------------------------------------------------------------

    async def get_exercise_stats(self, template_id: str) -> ExerciseStats:
        """Get statistics (estimated 1RM, personal records) for an exercise."""
        payload = await self._request(
            "GET", f"/v1/exercises/{quote(template_id, safe='')}/stats"
        )
        return self._parse(ExerciseStats, payload)

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

        Args:
            template_id: Exercise template ID
            start_date: Only sessions on or after this date
            end_date: Only sessions on or before this date
            limit: Maximum number of sessions

        Returns:
            List of ExerciseProgress, most recent first
        """
        params: Dict[str, Any] = {"limit": limit}
        if start_date:
            params["start_date"] = start_date.isoformat()
        if end_date:
            params["end_date"] = end_date.isoformat()

        payload = await self._request(
            "GET",
            f"/v1/exercises/{quote(template_id, safe='')}/progress",
            params,
        )
        return self._parse_list(ExerciseProgress, payload, "progress")
