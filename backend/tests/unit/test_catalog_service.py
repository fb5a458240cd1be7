"""
Unit tests for the university catalog cache.

The service is async; tests drive it with asyncio.run.
"""

import asyncio

import pytest

from app.infrastructure.services.university_catalog import UniversityCatalogService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class BlockingRepository:
    """Repository whose get_all waits until the test releases it."""

    def __init__(self, rows):
        self.rows = rows
        self.calls = 0
        self.started = None
        self.release = None

    async def get_all(self):
        self.calls += 1
        rows = list(self.rows)
        self.started.set()
        await self.release.wait()
        return rows


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(university_repo, clock):
    return UniversityCatalogService(university_repo, ttl_seconds=60, clock=clock)


class TestUniversityCatalogService:
    """TTL and version based invalidation."""

    def test_first_read_loads_catalog(self, service, university_repo):
        rows = asyncio.run(service.get_catalog())

        assert len(rows) == 3
        assert university_repo.get_all_calls == 1

    def test_reads_within_ttl_hit_cache(self, service, university_repo, clock):
        asyncio.run(service.get_catalog())
        clock.now += 59
        asyncio.run(service.get_catalog())

        assert university_repo.get_all_calls == 1

    def test_expired_snapshot_reloads(self, service, university_repo, clock):
        asyncio.run(service.get_catalog())
        clock.now += 60
        asyncio.run(service.get_catalog())

        assert university_repo.get_all_calls == 2

    def test_invalidate_bumps_version(self, service, university_repo):
        asyncio.run(service.get_catalog())
        service.invalidate()

        assert service.version == 1
        asyncio.run(service.get_catalog())
        assert university_repo.get_all_calls == 2

    def test_invalidate_during_load_discards_stale_rows(self, clock):
        """Rows loaded before an invalidate are served once, never cached."""
        repo = BlockingRepository([{"id": "old"}])
        service = UniversityCatalogService(repo, ttl_seconds=60, clock=clock)

        async def scenario():
            repo.started = asyncio.Event()
            repo.release = asyncio.Event()
            load = asyncio.create_task(service.get_catalog())
            await repo.started.wait()

            repo.rows = [{"id": "new"}]
            service.invalidate()
            repo.release.set()

            in_flight = await load
            after = await service.get_catalog()
            return in_flight, after

        in_flight, after = asyncio.run(scenario())

        assert in_flight == [{"id": "old"}]
        assert after == [{"id": "new"}]
        assert repo.calls == 2

    def test_zero_ttl_disables_cache(self, university_repo, clock):
        service = UniversityCatalogService(university_repo, ttl_seconds=0, clock=clock)
        asyncio.run(service.get_catalog())
        asyncio.run(service.get_catalog())

        assert university_repo.get_all_calls == 2

    def test_callers_get_copies(self, service):
        first = asyncio.run(service.get_catalog())
        first.clear()

        assert len(asyncio.run(service.get_catalog())) == 3

    def test_concurrent_reads_load_once(self, service, university_repo):
        async def read_many():
            return await asyncio.gather(*(service.get_catalog() for _ in range(5)))

        results = asyncio.run(read_many())

        assert all(len(rows) == 3 for rows in results)
        assert university_repo.get_all_calls == 1
