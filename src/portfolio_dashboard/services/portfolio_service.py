"""
Portfolio service: the request-time pipeline behind GET /api/portfolio.

holdings file -> symbol resolution -> live quotes + secondary metrics ->
valuation. Nothing computed here is persisted.
"""

import logging
from pathlib import Path
from typing import Union

from portfolio_dashboard.core.timezone import now_utc
from portfolio_dashboard.domain.views import PortfolioSnapshot
from portfolio_dashboard.holdings.loader import load_holdings
from portfolio_dashboard.services.metrics_service import MetricsService
from portfolio_dashboard.services.quote_service import QuoteService
from portfolio_dashboard.services.symbol_resolver import SymbolResolver
from portfolio_dashboard.services.valuation_service import ValuationService

logger = logging.getLogger(__name__)


class PortfolioService:
    """Builds a fresh PortfolioSnapshot on every call."""

    def __init__(
        self,
        holdings_file: Union[str, Path],
        resolver: SymbolResolver,
        quote_service: QuoteService,
        metrics_service: MetricsService,
        valuation_service: ValuationService,
    ):
        self._holdings_file = Path(holdings_file)
        self._resolver = resolver
        self._quote_svc = quote_service
        self._metrics_svc = metrics_service
        self._valuation_svc = valuation_service

    def get_portfolio(self) -> PortfolioSnapshot:
        """
        Load, enrich and total the holdings.

        Raises HoldingsFileError when the holdings file cannot be read or
        repaired. Upstream failures never raise; affected fields fall back
        to file values or null.
        """
        raw_holdings = load_holdings(self._holdings_file)
        symbols = self._resolver.resolve_all(raw_holdings)

        # Unique, first-seen order; holdings sharing a symbol share one fetch
        unique_symbols = list(dict.fromkeys(s for s in symbols if s))
        unresolved = len(symbols) - sum(1 for s in symbols if s)
        if unresolved:
            logger.info("%d of %d holdings have no resolvable symbol", unresolved, len(symbols))

        quotes = self._quote_svc.get_quotes(unique_symbols) if unique_symbols else {}
        metrics = self._metrics_svc.get_metrics(unique_symbols) if unique_symbols else {}

        holdings, totals = self._valuation_svc.reconcile(raw_holdings, symbols, quotes, metrics)
        return PortfolioSnapshot(last_updated=now_utc(), totals=totals, holdings=holdings)
