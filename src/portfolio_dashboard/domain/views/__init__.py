"""View models for portfolio outputs."""

from portfolio_dashboard.domain.views.portfolio import (
    Quote,
    SecondaryMetric,
    EnrichedHolding,
    PortfolioTotals,
    PortfolioSnapshot,
    PriceHistory,
)

__all__ = [
    "Quote",
    "SecondaryMetric",
    "EnrichedHolding",
    "PortfolioTotals",
    "PortfolioSnapshot",
    "PriceHistory",
]
