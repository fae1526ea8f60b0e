"""Pydantic schemas for API responses."""

from portfolio_dashboard.api.schemas.portfolio import (
    PortfolioTotalsOut,
    PortfolioResponse,
    CacheClearedResponse,
)
from portfolio_dashboard.api.schemas.history import HistoryResponse

__all__ = [
    "PortfolioTotalsOut",
    "PortfolioResponse",
    "CacheClearedResponse",
    "HistoryResponse",
]
