"""Exposure Locations - NZ and AU COVID-19 exposure sites in one shape.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (DatasetCache, DatasetSource)
    - repositories: Data access implementations
    - services: Business logic (fetch-with-cache, reshaping)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from exposure_locations.repositories import HttpDatasetSource, InMemoryDatasetCache
    from exposure_locations.services import ExposureService

    service = ExposureService.create(
        source=HttpDatasetSource.create(),
        cache=InMemoryDatasetCache(),
    )
    ```

For HTTP API:
    ```python
    from exposure_locations.api.app import app
    ```
"""

from exposure_locations.config import settings
from exposure_locations.dto import CombinedLocationsResponse, LocationsResponse, MergedLocationItem
from exposure_locations.entities import Country, FetchResult, MergedLocationEntity
from exposure_locations.handlers import ExposureHandler
from exposure_locations.protocols import DatasetCache, DatasetSource
from exposure_locations.repositories import HttpDatasetSource, InMemoryDatasetCache
from exposure_locations.services import ExposureService

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "DatasetCache",
    "DatasetSource",
    # Services (business logic)
    "ExposureService",
    # Handlers (HTTP)
    "ExposureHandler",
    # Repositories (data access)
    "HttpDatasetSource",
    "InMemoryDatasetCache",
    # Entities (domain models)
    "Country",
    "FetchResult",
    "MergedLocationEntity",
    # DTOs (API contracts)
    "LocationsResponse",
    "CombinedLocationsResponse",
    "MergedLocationItem",
]
