"""Upstream dataset source protocol."""

from typing import Any, Protocol, runtime_checkable

from exposure_locations.entities import Country


@runtime_checkable
class DatasetSource(Protocol):
    """Protocol for upstream exposure-location sources."""

    async def fetch(self, country: Country) -> Any:
        """Fetch and decode the raw dataset for a country.

        Args:
            country: The country to fetch

        Returns:
            The decoded JSON payload

        Raises:
            httpx.HTTPError: If the request fails or returns an error status
            ValueError: If the body is not valid JSON
        """
        ...

    def url_for(self, country: Country) -> str:
        """Return the upstream URL used for a country."""
        ...
