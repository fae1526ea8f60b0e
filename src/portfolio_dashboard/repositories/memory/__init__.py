"""In-process repository implementations."""

from portfolio_dashboard.repositories.memory.ttl_cache import ExpiringCache

__all__ = ["ExpiringCache"]
