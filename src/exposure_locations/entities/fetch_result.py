"""Fetch result domain entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FetchStatus(str, Enum):
    """Outcome of fetching one upstream dataset."""

    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    """Explicit result of an upstream fetch.

    The service never raises on upstream failure; it returns a FAILED
    result instead and leaves the decision to degrade to the caller.

    Attributes:
        status: OK, EMPTY (fetched but no records) or FAILED
        data: Parsed JSON payload, None when the fetch failed
        reason: Failure description, only set for FAILED
        from_cache: Whether the payload came from the cache slot
    """

    status: FetchStatus
    data: Any = None
    reason: str | None = None
    from_cache: bool = False

    @classmethod
    def ok(cls, data: Any, from_cache: bool = False) -> "FetchResult":
        return cls(status=FetchStatus.OK, data=data, from_cache=from_cache)

    @classmethod
    def empty(cls, data: Any, from_cache: bool = False) -> "FetchResult":
        return cls(status=FetchStatus.EMPTY, data=data, from_cache=from_cache)

    @classmethod
    def failed(cls, reason: str) -> "FetchResult":
        return cls(status=FetchStatus.FAILED, reason=reason)

    @property
    def is_failed(self) -> bool:
        return self.status is FetchStatus.FAILED
