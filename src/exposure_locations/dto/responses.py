"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class MergedLocationItem(BaseModel):
    """Single exposure location in the shared NZ/AU shape."""

    id: Any = Field(None, description="Upstream identifier")
    site: Any = Field(None, description="Venue or event name")
    location: Any = Field(None, description="Street address")
    region: Any = Field(None, description="City (NZ) or 'suburb, state' (AU)")
    information: Any = Field(None, description="Advice published with the exposure")
    coordinates: Any = Field(None, description="Coordinates as published upstream")
    start: Any = Field(
        None,
        description="Exposure start: parsed timestamp (NZ) or raw times value (AU)",
    )
    end: Any = Field(
        None,
        description="Exposure end: parsed timestamp (NZ) or raw times value (AU)",
    )
    status: Any = Field(None, description="'active' for NZ, upstream status for AU")


class LocationsResponse(BaseModel):
    """Response DTO for a single-country endpoint.

    ``locations`` is null when the upstream dataset held no record
    collection (including when the fetch failed).
    """

    locations: list[MergedLocationItem] | None = Field(
        None,
        description="Reshaped locations in upstream order",
    )


class CombinedLocationsResponse(BaseModel):
    """Response DTO for the combined NZ + AU endpoint."""

    nz: list[MergedLocationItem] | None = Field(None, description="NZ locations")
    au: list[MergedLocationItem] | None = Field(None, description="AU locations")


class CacheSlotItem(BaseModel):
    """State of one country's cache slot."""

    state: str = Field(..., description="'empty' or 'populated'")
    populated_at: float | None = Field(
        None,
        description="Unix timestamp when the slot was populated",
    )
    record_count: int = Field(0, description="Records held by the cached dataset", ge=0)
    source_url: str = Field(..., description="Upstream URL the slot is filled from")


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    slots: dict[str, CacheSlotItem] = Field(..., description="Cache slot per country code")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy'")
    cache: dict[str, str] = Field(
        default_factory=dict,
        description="Slot state per country code",
    )
