"""Background task that purges expired cache entries on each cache's check period."""

import asyncio
import logging
from typing import Sequence

from portfolio_dashboard.repositories.memory import ExpiringCache

logger = logging.getLogger(__name__)


async def sweep_periodically(cache: ExpiringCache) -> None:
    """Sweep one cache forever; cancel the task to stop."""
    while True:
        await asyncio.sleep(cache.check_period_seconds)
        cache.sweep()


def start_sweepers(caches: Sequence[ExpiringCache]) -> list[asyncio.Task]:
    """Start one sweeper task per cache on the running loop."""
    tasks = []
    for cache in caches:
        logger.debug("Starting sweeper for %s every %ss", cache.name, cache.check_period_seconds)
        tasks.append(asyncio.create_task(sweep_periodically(cache), name=f"sweep-{cache.name}"))
    return tasks


async def stop_sweepers(tasks: Sequence[asyncio.Task]) -> None:
    for task in tasks:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
