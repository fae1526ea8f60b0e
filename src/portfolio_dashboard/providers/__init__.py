"""Upstream market data providers."""

from portfolio_dashboard.providers.market_data_provider import (
    QuoteProvider,
    MetricsPageProvider,
    HistoryProvider,
)
from portfolio_dashboard.providers.yahoo_quote_provider import YahooQuoteProvider
from portfolio_dashboard.providers.google_finance_provider import GoogleFinanceProvider
from portfolio_dashboard.providers.yahoo_history_provider import YahooHistoryProvider

__all__ = [
    "QuoteProvider",
    "MetricsPageProvider",
    "HistoryProvider",
    "YahooQuoteProvider",
    "GoogleFinanceProvider",
    "YahooHistoryProvider",
]
