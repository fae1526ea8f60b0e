"""
History service: aligned timestamp/close series for the chart endpoint.
Thin proxy over the history provider with a short-lived cache.
"""

import logging
import math

from portfolio_dashboard.core.exceptions import UpstreamError, ValidationError
from portfolio_dashboard.domain.views import PriceHistory
from portfolio_dashboard.providers.market_data_provider import HistoryProvider
from portfolio_dashboard.repositories.protocols import CacheRepository

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = "1mo"
DEFAULT_INTERVAL = "1d"
VALID_PERIODS = ("1d", "5d", "1mo", "3mo", "6mo", "1y", "2y", "5y", "10y", "ytd", "max")
VALID_INTERVALS = ("1m", "2m", "5m", "15m", "30m", "60m", "90m", "1h", "1d", "5d", "1wk", "1mo", "3mo")


def _cache_key(symbol: str, period: str, interval: str) -> str:
    return f"hist:{symbol}:{period}:{interval}"


class HistoryService:
    """Fetches price history through a cache."""

    def __init__(self, provider: HistoryProvider, cache: CacheRepository[PriceHistory]):
        self._provider = provider
        self._cache = cache

    def get_history(
        self,
        symbol: str,
        period: str = DEFAULT_PERIOD,
        interval: str = DEFAULT_INTERVAL,
    ) -> PriceHistory:
        """
        Return the close-price series for symbol.

        Raises ValidationError for a blank symbol or unknown period/interval,
        UpstreamError when the upstream fails or has no data.
        """
        symbol = (symbol or "").strip()
        if not symbol:
            raise ValidationError("symbol required, e.g. HDFCBANK.NS")
        if period not in VALID_PERIODS:
            raise ValidationError(f"Unsupported period: {period}")
        if interval not in VALID_INTERVALS:
            raise ValidationError(f"Unsupported interval: {interval}")

        key = _cache_key(symbol, period, interval)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        rows = self._provider.fetch_history(symbol, period, interval)
        timestamps: list[int] = []
        close: list[float] = []
        for ts, price in rows:
            if ts is None or price is None or math.isnan(price):
                continue
            timestamps.append(int(ts))
            close.append(float(price))

        if not timestamps:
            raise UpstreamError("Yahoo history", f"no data for {symbol}")

        history = PriceHistory(symbol=symbol, timestamps=timestamps, close=close)
        self._cache.set(key, history)
        return history
