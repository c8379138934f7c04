"""HTTP implementation of DatasetSource.

Fetches the published exposure-location datasets with a single GET per
call. There is no retry, backoff or circuit breaking: a failed request
raises and the service layer decides what to do with it.

Sources:
    - NZ: Ministry of Health locations-of-interest GeoJSON on GitHub
    - AU: CRISPER covid_contact_locations table
"""

from typing import Any

import httpx

from exposure_locations.config import settings
from exposure_locations.entities import Country


class HttpDatasetSource:
    """httpx-based implementation of the DatasetSource protocol.

    This class satisfies the DatasetSource protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        source = HttpDatasetSource.create()
        raw = await source.fetch(Country.NZ)
        print(len(raw["locations"]))
        ```
    """

    def __init__(
        self,
        urls: dict[Country, str] | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the HTTP dataset source.

        Args:
            urls: Upstream URL per country. Defaults to settings.
            timeout: Request timeout in seconds. None waits indefinitely.
            client: Pre-built async client (tests pass one with a MockTransport).
        """
        self._urls = urls or {
            Country.NZ: settings.nz_source_url,
            Country.AU: settings.au_source_url,
        }
        self._timeout = timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    @classmethod
    def create(
        cls,
        urls: dict[Country, str] | None = None,
        timeout: float | None = None,
    ) -> "HttpDatasetSource":
        """Factory method to create HttpDatasetSource with defaults.

        Args:
            urls: Upstream URL per country. If None, uses settings.
            timeout: Request timeout in seconds. If None, uses settings.

        Returns:
            Configured HttpDatasetSource
        """
        return cls(urls=urls, timeout=timeout if timeout is not None else settings.fetch_timeout)

    def url_for(self, country: Country) -> str:
        return self._urls[country]

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
        response = await self.client.get(self.url_for(country))
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
