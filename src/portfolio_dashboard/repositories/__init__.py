"""Repository layer - cache storage."""

from portfolio_dashboard.repositories.protocols import CacheRepository
from portfolio_dashboard.repositories.memory import ExpiringCache

__all__ = [
    "CacheRepository",
    "ExpiringCache",
]
