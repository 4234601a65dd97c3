"""Retry utilities for remote API calls with exponential backoff."""
import logging
from typing import Callable

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)


logger = logging.getLogger(__name__)

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 1
DEFAULT_MAX_WAIT_SECONDS = 10


def _validate_retry_params(
    max_attempts: int,
    min_wait_seconds: float,
    max_wait_seconds: float,
) -> None:
    """
    Validate retry parameters.

    Args:
        max_attempts: Maximum number of attempts (1 disables retrying)
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries

    Raises:
        ValueError: If any parameter is invalid
    """
    if max_attempts < 1:
        raise ValueError(
            f"max_attempts must be >= 1, got {max_attempts}. "
            "If max_attempts <= 0, the retry loop will never execute."
        )
    if min_wait_seconds <= 0:
        raise ValueError(
            f"min_wait_seconds must be positive, got {min_wait_seconds}"
        )
    if max_wait_seconds <= 0:
        raise ValueError(
            f"max_wait_seconds must be positive, got {max_wait_seconds}"
        )
    if min_wait_seconds > max_wait_seconds:
        raise ValueError(
            f"min_wait_seconds ({min_wait_seconds}) cannot exceed "
            f"max_wait_seconds ({max_wait_seconds})"
        )


def create_async_retrying(
    is_retryable: Callable[[BaseException], bool],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> AsyncRetrying:
    """
    Create an async retry controller with exponential backoff.

    Only exceptions for which ``is_retryable`` returns True are retried;
    anything else, and the last retryable failure, is re-raised unchanged.

    Args:
        is_retryable: Predicate deciding whether an exception is transient
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries

    Returns:
        A tenacity AsyncRetrying instance

    Raises:
        ValueError: If parameters are invalid

    Usage:
        async for attempt in create_async_retrying(is_transient):
            with attempt:
                return await send()
    """
    _validate_retry_params(max_attempts, min_wait_seconds, max_wait_seconds)

    return AsyncRetrying(
        retry=retry_if_exception(is_retryable),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=1,
            min=min_wait_seconds,
            max=max_wait_seconds,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
