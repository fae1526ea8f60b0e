"""Repository protocols (interfaces)."""

from portfolio_dashboard.repositories.protocols.cache_repo import CacheRepository

__all__ = ["CacheRepository"]
