"""Application context: owns the shared caches, providers and services.

One context is created per FastAPI app and stored on ``app.state.context``.
Caches live as long as the context, so they are shared across requests
without module-level state.
"""

from typing import Optional

from portfolio_dashboard.config.settings import Settings, get_settings
from portfolio_dashboard.domain.views import PriceHistory, Quote, SecondaryMetric
from portfolio_dashboard.providers import (
    GoogleFinanceProvider,
    HistoryProvider,
    MetricsPageProvider,
    QuoteProvider,
    YahooHistoryProvider,
    YahooQuoteProvider,
)
from portfolio_dashboard.repositories.memory import ExpiringCache
from portfolio_dashboard.services import (
    HistoryService,
    MetricsService,
    PortfolioService,
    QuoteService,
    SymbolResolver,
    ValuationService,
)


class AppContext:
    """
    Application context providing access to all services.

    Providers can be injected (tests pass fakes); otherwise the real
    upstream clients are built from settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        quote_provider: Optional[QuoteProvider] = None,
        metrics_provider: Optional[MetricsPageProvider] = None,
        history_provider: Optional[HistoryProvider] = None,
    ):
        self.settings = settings or get_settings()
        s = self.settings

        self.quote_cache: ExpiringCache[Quote] = ExpiringCache(
            ttl_seconds=s.quote_cache_ttl_seconds,
            check_period_seconds=s.quote_cache_check_period_seconds,
            name="quote cache",
        )
        self.metrics_cache: ExpiringCache[SecondaryMetric] = ExpiringCache(
            ttl_seconds=s.metrics_cache_ttl_seconds,
            check_period_seconds=s.metrics_cache_check_period_seconds,
            name="metrics cache",
        )
        self.history_cache: ExpiringCache[PriceHistory] = ExpiringCache(
            ttl_seconds=s.history_cache_ttl_seconds,
            check_period_seconds=s.history_cache_check_period_seconds,
            name="history cache",
        )

        self._quote_provider = quote_provider or YahooQuoteProvider(
            base_url=s.yahoo_quote_url,
            timeout_seconds=s.http_timeout_seconds,
        )
        self._metrics_provider = metrics_provider or GoogleFinanceProvider(
            base_url=s.google_finance_url,
            timeout_seconds=s.http_timeout_seconds,
        )
        self._history_provider = history_provider or YahooHistoryProvider()

        # Service instances (lazy initialized)
        self._portfolio_service: Optional[PortfolioService] = None
        self._history_service: Optional[HistoryService] = None

    @property
    def caches(self) -> list[ExpiringCache]:
        return [self.quote_cache, self.metrics_cache, self.history_cache]

    @property
    def portfolio(self) -> PortfolioService:
        """Get the PortfolioService instance."""
        if self._portfolio_service is None:
            s = self.settings
            self._portfolio_service = PortfolioService(
                holdings_file=s.get_holdings_file(),
                resolver=SymbolResolver(default_suffix=s.default_exchange_suffix),
                quote_service=QuoteService(
                    provider=self._quote_provider,
                    cache=self.quote_cache,
                    batch_size=s.quote_batch_size,
                ),
                metrics_service=MetricsService(
                    provider=self._metrics_provider,
                    cache=self.metrics_cache,
                    market=s.secondary_market_qualifier,
                ),
                valuation_service=ValuationService(),
            )
        return self._portfolio_service

    @property
    def history(self) -> HistoryService:
        """Get the HistoryService instance."""
        if self._history_service is None:
            self._history_service = HistoryService(
                provider=self._history_provider,
                cache=self.history_cache,
            )
        return self._history_service

    def clear_caches(self) -> None:
        """Flush every cache (operational reset)."""
        for cache in self.caches:
            cache.clear()
