from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from exposure_locations.api.dependencies import HandlerDep, lifespan
from exposure_locations.config import settings
from exposure_locations.dto import (
    CacheStatsResponse,
    CombinedLocationsResponse,
    HealthCheckResponse,
    LocationsResponse,
)

app = FastAPI(
    title="Exposure Locations API",
    description="COVID-19 exposure locations from New Zealand and Australia in one shape",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Exposure Locations API",
        "version": "0.1.0",
        "description": "COVID-19 exposure locations from New Zealand and Australia in one shape",
        "endpoints": {
            "nz": "/exposures/nz",
            "au": "/exposures/au",
            "anz": "/exposures/anz",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/exposures/nz", response_model=LocationsResponse)
async def nz_locations(handler: HandlerDep) -> LocationsResponse:
    """Exposure locations published by the NZ Ministry of Health."""
    return await handler.nz_locations()


@app.get("/exposures/au", response_model=LocationsResponse)
async def au_locations(handler: HandlerDep) -> LocationsResponse:
    """Exposure locations published through CRISPER (AU)."""
    return await handler.au_locations()


@app.get("/exposures/anz", response_model=CombinedLocationsResponse)
async def anz_locations(handler: HandlerDep) -> CombinedLocationsResponse:
    """NZ and AU exposure locations side by side."""
    return await handler.anz_locations()


@app.get("/stats", response_model=CacheStatsResponse)
async def get_stats(handler: HandlerDep) -> CacheStatsResponse:
    """Get upstream cache statistics."""
    return await handler.cache_stats()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "exposure_locations.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
