"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_slot import CacheSlot, SlotState
from .country import Country
from .fetch_result import FetchResult, FetchStatus
from .merged_location import MergedLocationEntity

__all__ = [
    "CacheSlot",
    "Country",
    "FetchResult",
    "FetchStatus",
    "MergedLocationEntity",
    "SlotState",
]
