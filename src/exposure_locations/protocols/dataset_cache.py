"""Dataset cache protocol.

Defines the interface for the per-country memo of raw upstream datasets.
One slot per country; a slot is either empty or populated.
"""

from typing import Any, Protocol, runtime_checkable

from exposure_locations.entities import CacheSlot, Country


@runtime_checkable
class DatasetCache(Protocol):
    """Protocol for raw dataset caches.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, country: Country) -> CacheSlot:
        """Return the slot for a country.

        Args:
            country: The country whose slot to read

        Returns:
            The current CacheSlot (EMPTY if never populated)
        """
        ...

    def put(self, country: Country, data: Any) -> CacheSlot:
        """Populate the slot for a country.

        Args:
            country: The country whose slot to write
            data: The raw dataset to memoize

        Returns:
            The populated CacheSlot
        """
        ...

    def clear(self) -> None:
        """Reset every slot to EMPTY."""
        ...

    def slots(self) -> dict[Country, CacheSlot]:
        """Return a snapshot of all slots keyed by country."""
        ...
