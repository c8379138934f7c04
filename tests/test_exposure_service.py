"""
Tests for fetch-with-cache behaviour of ExposureService.
"""

import asyncio

import httpx

from conftest import AU_URL, NZ_RAW, NZ_URL

from exposure_locations.entities import CacheSlot, Country, FetchStatus, SlotState
from exposure_locations.protocols import DatasetCache, DatasetSource
from exposure_locations.repositories import InMemoryDatasetCache


def test_fetch_populates_cache(service, upstream, cache):
    """Test a successful fetch stores the payload in the slot."""
    result = asyncio.run(service.fetch(Country.NZ))

    assert result.status is FetchStatus.OK
    assert result.data == NZ_RAW
    assert result.from_cache is False
    assert cache.get(Country.NZ).is_populated
    assert cache.get(Country.NZ).data == NZ_RAW
    assert not cache.get(Country.AU).is_populated


def test_second_fetch_is_cache_hit(service, upstream):
    """Test a second call does not reach the network."""
    asyncio.run(service.fetch(Country.NZ))
    result = asyncio.run(service.fetch(Country.NZ))

    assert result.from_cache is True
    assert result.data == NZ_RAW
    assert upstream.calls_for(Country.NZ) == 1


def test_transport_failure_is_not_cached(service, upstream, cache):
    """Test a network error returns FAILED and the next call retries."""
    upstream.responses[NZ_URL] = httpx.ConnectError("connection refused")

    result = asyncio.run(service.fetch(Country.NZ))

    assert result.status is FetchStatus.FAILED
    assert result.is_failed
    assert "ConnectError" in result.reason
    assert result.data is None
    assert not cache.get(Country.NZ).is_populated

    upstream.responses[NZ_URL] = httpx.Response(200, json=NZ_RAW)
    retried = asyncio.run(service.fetch(Country.NZ))

    assert retried.status is FetchStatus.OK
    assert upstream.calls_for(Country.NZ) == 2


def test_invalid_json_is_failure(service, upstream, cache):
    """Test a non-JSON body is a failure, not an exception."""
    upstream.responses[AU_URL] = httpx.Response(200, text="<html>maintenance</html>")

    result = asyncio.run(service.fetch(Country.AU))

    assert result.is_failed
    assert "Invalid JSON" in result.reason
    assert not cache.get(Country.AU).is_populated


def test_error_status_is_failure(service, upstream, cache):
    """Test an HTTP error status is a failure."""
    upstream.responses[AU_URL] = httpx.Response(503, json={"error": "unavailable"})

    result = asyncio.run(service.fetch(Country.AU))

    assert result.is_failed
    assert "HTTPStatusError" in result.reason
    assert not cache.get(Country.AU).is_populated


def test_empty_dataset_is_cached(service, upstream, cache):
    """Test a fetch with no records is EMPTY but still memoized."""
    upstream.responses[AU_URL] = httpx.Response(200, json=[])

    first = asyncio.run(service.fetch(Country.AU))
    second = asyncio.run(service.fetch(Country.AU))

    assert first.status is FetchStatus.EMPTY
    assert second.status is FetchStatus.EMPTY
    assert second.from_cache is True
    assert upstream.calls_for(Country.AU) == 1


def test_cache_clear_forces_refetch(service, upstream, cache):
    """Test clearing the injected cache resets every slot."""
    asyncio.run(service.fetch_all())
    cache.clear()

    assert cache.get(Country.NZ) == CacheSlot()
    asyncio.run(service.fetch(Country.NZ))
    assert upstream.calls_for(Country.NZ) == 2


def test_fetch_all_hits_both_sources_once(service, upstream):
    """Test fetch_all fetches each country exactly once."""
    results = asyncio.run(service.fetch_all())

    assert set(results) == {Country.NZ, Country.AU}
    assert all(r.status is FetchStatus.OK for r in results.values())
    assert upstream.calls_for(Country.NZ) == 1
    assert upstream.calls_for(Country.AU) == 1


def test_reshape_dispatches_by_country(service):
    """Test reshape uses the schema of the given country."""
    nz = service.reshape(Country.NZ, NZ_RAW)
    au = service.reshape(Country.AU, [])

    assert [loc.site for loc in nz] == ["Supermarket", "Bus 22"]
    assert au is None


def test_in_memory_cache_slots():
    """Test slot lifecycle of the in-memory cache."""
    cache = InMemoryDatasetCache()
    assert {c: s.state for c, s in cache.slots().items()} == {
        Country.NZ: SlotState.EMPTY,
        Country.AU: SlotState.EMPTY,
    }

    slot = cache.put(Country.AU, [])
    assert slot.is_populated
    assert slot.populated_at is not None
    assert cache.get(Country.AU) is slot


def test_service_exposes_injected_dependencies(service, cache):
    """Test the injected source and cache satisfy their protocols."""
    assert service.cache is cache
    assert isinstance(service.cache, DatasetCache)
    assert isinstance(service.source, DatasetSource)
    assert service.source.url_for(Country.AU) == AU_URL
