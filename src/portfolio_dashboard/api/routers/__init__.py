"""API routers package."""

from portfolio_dashboard.api.routers.portfolio import router as portfolio_router
from portfolio_dashboard.api.routers.history import router as history_router
from portfolio_dashboard.api.routers.cache import router as cache_router

__all__ = [
    "portfolio_router",
    "history_router",
    "cache_router",
]
