"""
Outcome of an optional remote fetch.

Used where a failed fetch degrades a result instead of failing the whole
operation. Keeps "never attempted" and "attempted but failed" apart.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FetchStatus(str, Enum):
    """Status of an optional fetch."""

    OK = "ok"
    NOT_ATTEMPTED = "not_attempted"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    """Value of an optional fetch, or the reason it is absent."""

    status: FetchStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "FetchOutcome[T]":
        return cls(status=FetchStatus.OK, value=value)

    @classmethod
    def failed(cls, reason: str) -> "FetchOutcome[T]":
        return cls(status=FetchStatus.FAILED, reason=reason)

    @classmethod
    def not_attempted(cls) -> "FetchOutcome[T]":
        return cls(status=FetchStatus.NOT_ATTEMPTED)

    @property
    def succeeded(self) -> bool:
        return self.status == FetchStatus.OK
