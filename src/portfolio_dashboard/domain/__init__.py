"""Domain layer - view models and static reference data."""

from portfolio_dashboard.domain.views import (
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
