"""Service layer - enrichment pipeline orchestration."""

from portfolio_dashboard.services.symbol_resolver import SymbolResolver
from portfolio_dashboard.services.quote_service import QuoteService
from portfolio_dashboard.services.metrics_service import MetricsService
from portfolio_dashboard.services.valuation_service import ValuationService
from portfolio_dashboard.services.portfolio_service import PortfolioService
from portfolio_dashboard.services.history_service import HistoryService

__all__ = [
    "SymbolResolver",
    "QuoteService",
    "MetricsService",
    "ValuationService",
    "PortfolioService",
    "HistoryService",
]
