"""
Metrics service: P/E and latest earnings per symbol from the secondary source.
Sequential, one page per symbol. Every outcome is cached, including nulls,
so a failed scrape is not repeated until the cache entry expires.
"""

import logging
from typing import Optional, Sequence

from portfolio_dashboard.core.exceptions import UpstreamError
from portfolio_dashboard.domain.reference_data import EXCHANGE_SUFFIXES
from portfolio_dashboard.domain.views import SecondaryMetric
from portfolio_dashboard.providers.market_data_provider import MetricsPageProvider
from portfolio_dashboard.repositories.protocols import CacheRepository
from portfolio_dashboard.services.metrics_parser import parse_metrics

logger = logging.getLogger(__name__)


def _cache_key(symbol: str) -> str:
    return f"google:{symbol}"


def to_secondary_symbol(symbol: str, market: str = "NSE") -> Optional[str]:
    """Primary symbol -> secondary form: "TCS.NS" -> "TCS:NSE". Blank -> None."""
    base = (symbol or "").strip()
    upper = base.upper()
    for suffix in EXCHANGE_SUFFIXES:
        if upper.endswith(suffix):
            base = base[: -len(suffix)]
            break
    if not base:
        return None
    return f"{base}:{market}"


class MetricsService:
    """Fetches and parses secondary metrics through a shared long-lived cache."""

    def __init__(
        self,
        provider: MetricsPageProvider,
        cache: CacheRepository[SecondaryMetric],
        market: str = "NSE",
    ):
        self._provider = provider
        self._cache = cache
        self._market = market

    def get_metrics(self, symbols: Sequence[str]) -> dict[str, SecondaryMetric]:
        """Return symbol -> SecondaryMetric for every symbol. Never raises on upstream failure."""
        result: dict[str, SecondaryMetric] = {}
        for symbol in symbols:
            if symbol in result:
                continue
            cached = self._cache.get(_cache_key(symbol))
            if cached is not None:
                result[symbol] = cached
                continue
            metric = self._fetch(symbol)
            self._cache.set(_cache_key(symbol), metric)
            result[symbol] = metric
        return result

    def _fetch(self, symbol: str) -> SecondaryMetric:
        secondary = to_secondary_symbol(symbol, self._market)
        if secondary is None:
            return SecondaryMetric.empty()

        try:
            page = self._provider.fetch_page(secondary)
        except UpstreamError as exc:
            logger.warning("Metrics fetch failed for %s: %s", symbol, exc.message)
            return SecondaryMetric.empty()

        try:
            return parse_metrics(page)
        except (ValueError, TypeError) as exc:
            logger.warning("Metrics parse failed for %s: %s", symbol, exc)
            return SecondaryMetric.empty()
