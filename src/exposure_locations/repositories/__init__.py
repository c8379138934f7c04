"""Repository layer for data access.

This layer abstracts external dependencies (upstream HTTP APIs, the
process-wide dataset memo) behind protocol-based interfaces.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from exposure_locations.protocols import DatasetCache, DatasetSource

from .http_source import HttpDatasetSource
from .memory_cache import InMemoryDatasetCache

__all__ = [
    "DatasetCache",
    "DatasetSource",
    "HttpDatasetSource",
    "InMemoryDatasetCache",
]
