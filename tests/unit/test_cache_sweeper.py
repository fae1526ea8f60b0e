"""Unit tests for the background cache sweeper tasks."""

import asyncio

from portfolio_dashboard.repositories.memory import ExpiringCache
from portfolio_dashboard.services.cache_sweeper import start_sweepers, stop_sweepers


def test_sweeper_purges_and_stops(clock):
    """
    GIVEN a cache holding an entry past its TTL
    WHEN a sweeper runs for a few check periods and is then stopped
    THEN the entry is gone and the task is finished
    """
    cache = ExpiringCache(ttl_seconds=5, check_period_seconds=0.01, name="quote cache", clock=clock)
    cache.set("quote:TCS.NS", "stale")
    clock.advance(6)

    async def run():
        tasks = start_sweepers([cache])
        await asyncio.sleep(0.05)
        await stop_sweepers(tasks)
        return tasks

    tasks = asyncio.run(run())

    assert len(cache) == 0
    assert all(task.done() for task in tasks)


def test_fresh_entries_survive(clock):
    """
    GIVEN a cache holding an entry within its TTL
    WHEN a sweeper runs
    THEN the entry is still readable
    """
    cache = ExpiringCache(ttl_seconds=5, check_period_seconds=0.01, clock=clock)
    cache.set("k", "v")

    async def run():
        tasks = start_sweepers([cache])
        await asyncio.sleep(0.03)
        await stop_sweepers(tasks)

    asyncio.run(run())

    assert cache.get("k") == "v"
