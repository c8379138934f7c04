"""Exposure service for fetch-with-cache orchestration.

This service coordinates the upstream source (network access) and the
dataset cache (process-wide memo), then hands raw payloads to the pure
reshapers.
"""

import asyncio
import logging
from datetime import tzinfo
from typing import Any

import httpx

from exposure_locations.config import settings
from exposure_locations.entities import CacheSlot, Country, FetchResult, MergedLocationEntity
from exposure_locations.protocols import DatasetCache, DatasetSource
from exposure_locations.services import reshape

logger = logging.getLogger(__name__)


class ExposureService:
    """Core exposure-location orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - DatasetSource: the HTTP upstream, or a fake in tests
    - DatasetCache: the in-memory slots, or anything with the same shape

    Example:
        ```python
        from exposure_locations.repositories import HttpDatasetSource, InMemoryDatasetCache
        from exposure_locations.services import ExposureService

        service = ExposureService.create(
            source=HttpDatasetSource.create(),
            cache=InMemoryDatasetCache(),
        )
        result = await service.fetch(Country.NZ)
        ```
    """

    def __init__(
        self,
        source: DatasetSource,
        cache: DatasetCache,
        nz_tz: tzinfo | None = None,
    ) -> None:
        """Initialize the exposure service.

        Args:
            source: Upstream dataset source (required).
            cache: Dataset cache (required).
            nz_tz: Timezone for NZ timestamps. Defaults to settings.
        """
        self._source = source
        self._cache = cache
        self._nz_tz = nz_tz or settings.nz_tzinfo

    @classmethod
    def create(
        cls,
        source: DatasetSource,
        cache: DatasetCache,
        nz_tz: tzinfo | None = None,
    ) -> "ExposureService":
        """Factory method to create ExposureService with sensible defaults.

        Args:
            source: Upstream dataset source (required).
            cache: Dataset cache (required).
            nz_tz: Timezone for NZ timestamps. If None, uses settings.

        Returns:
            Configured ExposureService instance
        """
        return cls(source=source, cache=cache, nz_tz=nz_tz)

    async def fetch(self, country: Country) -> FetchResult:
        """Fetch the raw dataset for a country.

        Business logic:
        1. Return the cache slot if it is populated (no network call)
        2. Otherwise GET the upstream dataset once
        3. Populate the slot on success
        4. Return FAILED on any transport, status or JSON error, leaving
           the slot empty so the next call retries

        Args:
            country: The country to fetch

        Returns:
            FetchResult describing the outcome
        """
        slot = self._cache.get(country)
        if slot.is_populated:
            logger.debug("Cache hit for %s dataset", country.value)
            return self._classify(country, slot.data, from_cache=True)

        try:
            data = await self._source.fetch(country)
        except httpx.HTTPError as e:
            return FetchResult.failed(f"{type(e).__name__}: {e}")
        except ValueError as e:
            return FetchResult.failed(f"Invalid JSON from upstream: {e}")

        self._cache.put(country, data)
        logger.info(
            "Cached %s dataset (%d records)",
            country.value,
            reshape.record_count(country, data),
        )
        return self._classify(country, data)

    async def fetch_all(self) -> dict[Country, FetchResult]:
        """Fetch both datasets concurrently.

        Returns:
            FetchResult per country
        """
        nz, au = await asyncio.gather(self.fetch(Country.NZ), self.fetch(Country.AU))
        return {Country.NZ: nz, Country.AU: au}

    def reshape(self, country: Country, raw: Any) -> list[MergedLocationEntity] | None:
        """Reshape a raw dataset with the country's reshaper.

        Args:
            country: Which schema the raw dataset uses
            raw: The decoded upstream payload

        Returns:
            Reshaped locations, or None when the dataset holds none
        """
        if country is Country.NZ:
            return reshape.reshape_nz(raw, self._nz_tz)
        return reshape.reshape_au(raw)

    def cache_slots(self) -> dict[Country, CacheSlot]:
        """Get a snapshot of the cache slots."""
        return self._cache.slots()

    def record_count(self, country: Country, raw: Any) -> int:
        return reshape.record_count(country, raw)

    def source_url(self, country: Country) -> str:
        return self._source.url_for(country)

    def _classify(self, country: Country, data: Any, from_cache: bool = False) -> FetchResult:
        if reshape.record_count(country, data) == 0:
            return FetchResult.empty(data, from_cache=from_cache)
        return FetchResult.ok(data, from_cache=from_cache)

    @property
    def source(self) -> DatasetSource:
        """Get the underlying source (for testing)."""
        return self._source

    @property
    def cache(self) -> DatasetCache:
        """Get the underlying cache (for testing)."""
        return self._cache
