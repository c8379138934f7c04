"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the in-memory cache for another store without touching services
- Unit testing with fake upstream sources
- Clear separation of concerns

Usage:
    ```python
    from exposure_locations.protocols import DatasetCache, DatasetSource

    cache: DatasetCache = InMemoryDatasetCache()
    source: DatasetSource = HttpDatasetSource.create()
    ```
"""

from .dataset_cache import DatasetCache
from .dataset_source import DatasetSource

__all__ = [
    "DatasetCache",
    "DatasetSource",
]
