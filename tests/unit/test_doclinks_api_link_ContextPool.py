"""Unit tests for the bounded context pool."""

import asyncio

import pytest

from doclinks.api.link._pool import ContextCrashed, ContextPool
from doclinks.api.link.FatalSetupError import FatalSetupError
from tests.conftest import FakeContextFactory, InFlightTracker


async def navigate_all(pool, urls):
    async def one(url):
        async with pool.acquire() as context:
            return await context.navigate(url)

    return await asyncio.gather(*(one(url) for url in urls), return_exceptions=True)


@pytest.mark.parametrize("size,tasks", [(1, 5), (2, 10), (4, 25)])
def test_in_flight_never_exceeds_pool_size(size, tasks):
    tracker = InFlightTracker()
    factory = FakeContextFactory(delay=0.01, tracker=tracker)

    async def run():
        pool = ContextPool(factory, size)
        await pool.start()
        results = await navigate_all(pool, [f"https://e.example/{i}" for i in range(tasks)])
        await pool.close()
        return results

    results = asyncio.run(run())
    assert results == [200] * tasks
    assert tracker.peak <= size
    assert tracker.peak == min(size, tasks)
    assert len(factory.created) == size
    assert all(context.closed for context in factory.created)


def test_waiters_are_served_fifo():
    tracker = InFlightTracker()
    factory = FakeContextFactory(delay=0.01, tracker=tracker)
    urls = [f"https://e.example/{i}" for i in range(6)]

    async def run():
        pool = ContextPool(factory, 1)
        await pool.start()
        await navigate_all(pool, urls)
        await pool.close()

    asyncio.run(run())
    assert tracker.urls == urls


def test_contexts_are_reused():
    factory = FakeContextFactory()

    async def run():
        pool = ContextPool(factory, 2)
        await pool.start()
        await navigate_all(pool, [f"https://e.example/{i}" for i in range(8)])
        await pool.close()

    asyncio.run(run())
    assert sum(context.navigations for context in factory.created) == 8
    assert len(factory.created) == 2


def test_start_failure_is_fatal_and_releases_created_contexts():
    factory = FakeContextFactory(fail_after=1)

    async def run():
        await ContextPool(factory, 3).start()

    with pytest.raises(FatalSetupError, match="browser failed to start"):
        asyncio.run(run())
    assert len(factory.created) == 1
    assert factory.created[0].closed


def test_crashed_context_is_replaced():
    factory = FakeContextFactory(statuses={"https://crash.example": ContextCrashed("target crashed")})

    async def run():
        pool = ContextPool(factory, 1)
        await pool.start()
        results = await navigate_all(pool, ["https://crash.example", "https://ok.example"])
        live = pool.live
        await pool.close()
        return results, live

    results, live = asyncio.run(run())
    assert isinstance(results[0], ContextCrashed)
    assert results[1] == 200
    assert live == 1
    assert len(factory.created) == 2


def test_dead_pool_fails_waiters_instead_of_hanging():
    factory = FakeContextFactory(fail_after=1, statuses={"https://crash.example": ContextCrashed("gone")})

    async def run():
        pool = ContextPool(factory, 1)
        await pool.start()
        results = await asyncio.wait_for(
            navigate_all(pool, ["https://crash.example", "https://a.example", "https://b.example"]),
            timeout=5,
        )
        return results, pool.live

    results, live = asyncio.run(run())
    assert live == 0
    assert all(isinstance(result, ContextCrashed) for result in results)


def test_acquire_requires_start():
    async def run():
        async with ContextPool(FakeContextFactory(), 1).acquire():
            pass

    with pytest.raises(RuntimeError, match="before start"):
        asyncio.run(run())


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        ContextPool(FakeContextFactory(), 0)
