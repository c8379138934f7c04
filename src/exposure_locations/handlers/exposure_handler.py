"""HTTP handlers for exposure-location endpoints.

Handlers convert between service results and DTOs (API contracts).
Upstream failures never become HTTP errors here: a failed fetch is
logged and served as an empty dataset.
"""

import logging
from typing import Any

from exposure_locations.dto import (
    CacheSlotItem,
    CacheStatsResponse,
    CombinedLocationsResponse,
    HealthCheckResponse,
    LocationsResponse,
    MergedLocationItem,
)
from exposure_locations.entities import Country, FetchResult, MergedLocationEntity
from exposure_locations.services import ExposureService, reshape

logger = logging.getLogger(__name__)

# What a failed fetch degrades to before reshaping
EMPTY_DATASET: list[Any] = []


class ExposureHandler:
    """HTTP handlers for exposure-location operations.

    This handler delegates fetching and reshaping to ExposureService
    and handles HTTP-specific concerns like:
    - Degrading failed fetches to empty data
    - Converting entities to DTOs

    Example:
        ```python
        handler = ExposureHandler(exposure_service=service)

        @app.get("/exposures/nz", response_model=LocationsResponse)
        async def nz_locations():
            return await handler.nz_locations()
        ```
    """

    def __init__(self, exposure_service: ExposureService) -> None:
        """Initialize the exposure handler.

        Args:
            exposure_service: The exposure service for business logic (required).
        """
        self._service = exposure_service

    async def nz_locations(self) -> LocationsResponse:
        """Handle GET /exposures/nz requests."""
        locations = await self._locations(Country.NZ)
        return LocationsResponse(locations=_to_items(locations))

    async def au_locations(self) -> LocationsResponse:
        """Handle GET /exposures/au requests."""
        locations = await self._locations(Country.AU)
        return LocationsResponse(locations=_to_items(locations))

    async def anz_locations(self) -> CombinedLocationsResponse:
        """Handle GET /exposures/anz requests.

        Both countries are fetched concurrently, then combined.

        Returns:
            CombinedLocationsResponse with NZ and AU lists kept separate
        """
        results = await self._service.fetch_all()
        combined = reshape.combine(
            self._reshape_result(Country.NZ, results[Country.NZ]),
            self._reshape_result(Country.AU, results[Country.AU]),
        )
        return CombinedLocationsResponse(
            nz=_to_items(combined[Country.NZ.value]),
            au=_to_items(combined[Country.AU.value]),
        )

    async def cache_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests.

        Returns:
            CacheStatsResponse with one entry per country slot
        """
        slots = {}
        for country, slot in self._service.cache_slots().items():
            slots[country.value] = CacheSlotItem(
                state=slot.state.value,
                populated_at=slot.populated_at,
                record_count=self._service.record_count(country, slot.data) if slot.is_populated else 0,
                source_url=self._service.source_url(country),
            )
        return CacheStatsResponse(slots=slots)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        return HealthCheckResponse(
            status="healthy",
            cache={
                country.value: slot.state.value
                for country, slot in self._service.cache_slots().items()
            },
        )

    async def _locations(self, country: Country) -> list[MergedLocationEntity] | None:
        return self._reshape_result(country, await self._service.fetch(country))

    def _reshape_result(self, country: Country, result: FetchResult) -> list[MergedLocationEntity] | None:
        if result.is_failed:
            logger.warning(
                "Failed to fetch %s exposure locations from %s: %s",
                country.value,
                self._service.source_url(country),
                result.reason,
            )
            return self._service.reshape(country, EMPTY_DATASET)
        return self._service.reshape(country, result.data)


def _to_items(locations: list[MergedLocationEntity] | None) -> list[MergedLocationItem] | None:
    if locations is None:
        return None
    return [MergedLocationItem(**location.to_dict()) for location in locations]
