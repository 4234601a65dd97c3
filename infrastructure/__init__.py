"""
Infrastructure layer package for the Hevy Insights API.

This package contains concrete implementations of the port interfaces.
"""

from infrastructure.hevy_client import (
    HevyClient,
    HevyClientError,
    HevyAPIUnavailable,
    HevyAPITimeout,
    HevyAPIError,
    HevyResponseError,
)

__all__ = [
    "HevyClient",
    "HevyClientError",
    "HevyAPIUnavailable",
    "HevyAPITimeout",
    "HevyAPIError",
    "HevyResponseError",
]
