"""In-memory expiring cache shared across requests, backed by cachetools."""

import logging
import threading
import time
from typing import Callable, Generic, NamedTuple, Optional, TypeVar

from cachetools import TLRUCache

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_MAXSIZE = 4096


class _Entry(NamedTuple):
    value: object
    lifetime: float


def _time_to_use(key: str, entry: _Entry, now: float) -> float:
    return now + entry.lifetime


class ExpiringCache(Generic[V]):
    """
    Key-value store with a per-entry time-to-live.

    Expiry is passive: a read after the TTL has elapsed drops the entry and
    reports a miss, exactly as if the key had never been set. sweep() purges
    expired entries in bulk; the app runs it every check_period_seconds.
    Stored values must not be None (None is the miss marker).

    cachetools caches are not thread-safe; request threads and the sweeper
    share one lock.
    """

    def __init__(
        self,
        ttl_seconds: float,
        check_period_seconds: Optional[float] = None,
        name: str = "cache",
        clock: Callable[[], float] = time.monotonic,
        maxsize: int = DEFAULT_MAXSIZE,
    ):
        self._ttl = ttl_seconds
        self._check_period = check_period_seconds if check_period_seconds is not None else ttl_seconds
        self._name = name
        self._entries: TLRUCache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=clock)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def check_period_seconds(self) -> float:
        return self._check_period

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                # Expired entries linger until the next mutation
                self._entries.expire()
                return None
            return entry.value

    def set(self, key: str, value: V, ttl: Optional[float] = None) -> None:
        lifetime = self._ttl if ttl is None else ttl
        with self._lock:
            self._entries[key] = _Entry(value, lifetime)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("Cleared %s", self._name)

    def sweep(self) -> int:
        with self._lock:
            before = len(self._entries)
            self._entries.expire()
            removed = before - len(self._entries)
        if removed:
            logger.debug("Swept %d expired entries from %s", removed, self._name)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
