"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Tests swap the handler with app.dependency_overrides
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from exposure_locations.config import configure_logging, settings
from exposure_locations.handlers import ExposureHandler
from exposure_locations.repositories import HttpDatasetSource, InMemoryDatasetCache
from exposure_locations.services import ExposureService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> ExposureHandler:
    """Dependency injection for ExposureHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ExposureHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "exposure_handler", None)
    if handler is None:
        raise RuntimeError("ExposureHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Source and cache (data access) - created explicitly
    2. Service (business logic) - stored in app.state.exposure_service
    3. Handler (HTTP endpoints) - stored in app.state.exposure_handler

    Cleanup:
        Closes the upstream HTTP client and removes services from app.state
    """
    configure_logging()

    source = HttpDatasetSource.create()
    cache = InMemoryDatasetCache()
    exposure_service = ExposureService.create(source=source, cache=cache)
    exposure_handler = ExposureHandler(exposure_service=exposure_service)

    app.state.source = source
    app.state.cache = cache
    app.state.exposure_service = exposure_service
    app.state.exposure_handler = exposure_handler

    logger.info("Exposure service initialized")
    logger.info("NZ source: %s", settings.nz_source_url)
    logger.info("AU source: %s", settings.au_source_url)

    yield

    await source.close()
    del app.state.exposure_handler
    del app.state.exposure_service
    del app.state.cache
    del app.state.source
    logger.info("Exposure service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ExposureHandler, Depends(get_handler)]
