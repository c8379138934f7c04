"""In-memory implementation of DatasetCache.

Holds one slot per country for the lifetime of the process. Nothing is
persisted; a restart starts every slot empty again.
"""

import time
from typing import Any

from exposure_locations.entities import CacheSlot, Country


class InMemoryDatasetCache:
    """Dictionary-backed implementation of the DatasetCache protocol.

    Slots are never expired. Writes replace the slot wholesale, so
    concurrent populations of the same country end with the last writer.

    Example:
        ```python
        cache = InMemoryDatasetCache()
        cache.get(Country.NZ).is_populated  # False
        cache.put(Country.NZ, {"locations": []})
        cache.get(Country.NZ).is_populated  # True
        ```
    """

    def __init__(self) -> None:
        self._slots: dict[Country, CacheSlot] = {country: CacheSlot() for country in Country}

    def get(self, country: Country) -> CacheSlot:
        return self._slots[country]

    def put(self, country: Country, data: Any) -> CacheSlot:
        slot = CacheSlot.populated(data, populated_at=time.time())
        self._slots[country] = slot
        return slot

    def clear(self) -> None:
        """Reset every slot to empty (used between test cases)."""
        for country in Country:
            self._slots[country] = CacheSlot()

    def slots(self) -> dict[Country, CacheSlot]:
        return dict(self._slots)
