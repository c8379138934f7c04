"""Merged location domain entity."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class MergedLocationEntity:
    """Domain entity for one exposure location in the shared shape.

    Both the NZ and AU reshapers produce this record. Fields the source
    record did not carry are left as None.

    Attributes:
        id: Upstream identifier
        site: Display name of the venue or event
        location: Street address
        region: Locality string (NZ city, or "suburb, state" for AU)
        information: Free-text advice published with the exposure
        coordinates: Coordinates exactly as published upstream
        start: Exposure start (parsed datetime for NZ, raw ``times`` for AU)
        end: Exposure end (parsed datetime for NZ, raw ``times`` for AU)
        status: "active" for NZ, upstream status for AU
    """

    id: Any = None
    site: Any = None
    location: Any = None
    region: Any = None
    information: Any = None
    coordinates: Any = None
    start: Any = None
    end: Any = None
    status: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the entity to a plain dictionary."""
        return asdict(self)
