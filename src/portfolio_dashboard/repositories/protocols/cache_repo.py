"""Cache repository protocol for upstream market data."""

from typing import Optional, Protocol, TypeVar

V = TypeVar("V")


class CacheRepository(Protocol[V]):
    """Interface for an expiring key-value store."""

    def get(self, key: str) -> Optional[V]:
        """Return the cached value, or None if never set or expired."""
        ...

    def set(self, key: str, value: V, ttl: Optional[float] = None) -> None:
        """Store a value; ttl overrides the cache's default lifetime."""
        ...

    def clear(self) -> None:
        """Flush every entry."""
        ...

    def sweep(self) -> int:
        """Remove expired entries and return how many were removed."""
        ...
