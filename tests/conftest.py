"""Shared fixtures: sample upstream payloads and a counting fake upstream."""

from collections import Counter
from typing import Any

import httpx
import pytest

from exposure_locations.entities import Country
from exposure_locations.handlers import ExposureHandler
from exposure_locations.repositories import HttpDatasetSource, InMemoryDatasetCache
from exposure_locations.services import ExposureService

NZ_URL = "https://nz.example.test/locations-of-interest.geojson"
AU_URL = "https://au.example.test/table/covid_contact_locations"

NZ_RAW = {
    "locations": [
        {
            "id": "1",
            "event": "Supermarket",
            "location": "123 Main St",
            "city": "Auckland",
            "information": "Wear a mask",
            "coordinates": [174.7, -36.8],
            "start": "01/08/2021, 10:00 am",
            "end": "01/08/2021, 11:00 am",
        },
        {
            "id": "2",
            "event": "Bus 22",
            "location": "Queen St",
            "city": "Auckland",
            "information": "Self-isolate",
            "coordinates": [174.76, -36.85],
            "start": "17/08/2021, 02:30 pm",
            "end": "17/08/2021, 03:15 pm",
        },
    ]
}

AU_RAW = [
    [
        {
            "id": "9",
            "venue": "Mall",
            "geocoded_address": "1 High St",
            "suburb": "Bondi",
            "state": "NSW",
            "alert": "Monitor",
            "coordinates": [151.2, -33.9],
            "times": "2021-08-01",
            "status": "cleared",
        },
        {
            "id": "10",
            "venue": "Cafe",
            "geocoded_address": "5 Beach Rd",
            "suburb": "Manly",
            "state": "NSW",
            "alert": "Get tested",
            "coordinates": [151.28, -33.8],
            "times": "2021-08-02 9am-10am",
            "status": "active",
        },
    ]
]


class FakeUpstream:
    """httpx transport handler that serves canned responses and counts calls."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = responses or {
            NZ_URL: httpx.Response(200, json=NZ_RAW),
            AU_URL: httpx.Response(200, json=AU_RAW),
        }
        self.calls: Counter[str] = Counter()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls[url] += 1
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    def calls_for(self, country: Country) -> int:
        return self.calls[NZ_URL if country is Country.NZ else AU_URL]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def cache() -> InMemoryDatasetCache:
    return InMemoryDatasetCache()


@pytest.fixture
def service(upstream: FakeUpstream, cache: InMemoryDatasetCache) -> ExposureService:
    source = HttpDatasetSource(
        urls={Country.NZ: NZ_URL, Country.AU: AU_URL},
        client=httpx.AsyncClient(transport=httpx.MockTransport(upstream)),
    )
    return ExposureService.create(source=source, cache=cache)


@pytest.fixture
def handler(service: ExposureService) -> ExposureHandler:
    return ExposureHandler(exposure_service=service)
