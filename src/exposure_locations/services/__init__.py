"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from exposure_locations.services import ExposureService, reshape

    service = ExposureService.create(source=source, cache=cache)
    locations = reshape.reshape_nz(raw_nz)
    ```
"""

from . import reshape
from .exposure_service import ExposureService

__all__ = [
    "ExposureService",
    "reshape",
]
