"""
Quote service: live price, EPS and earnings timestamp per symbol.
Cache-first; misses are fetched from the quote provider in fixed-size batches.
Every requested symbol gets a Quote, fully null when the upstream failed.
"""

import logging
from typing import Any, Iterable, Mapping, Optional

from portfolio_dashboard.core.exceptions import UpstreamError
from portfolio_dashboard.core.util import to_number
from portfolio_dashboard.domain.views import Quote
from portfolio_dashboard.providers.market_data_provider import QuoteProvider
from portfolio_dashboard.repositories.protocols import CacheRepository

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10

PRICE_FIELDS = ("regularMarketPrice", "regularMarketPreviousClose")
EPS_FIELDS = ("epsTrailingTwelveMonths", "epsCurrentYear", "epsForward")
EARNINGS_TIMESTAMP_FIELD = "earningsTimestamp"


def _cache_key(symbol: str) -> str:
    return f"quote:{symbol}"


def _first_number(row: Mapping[str, Any], fields: Iterable[str]) -> Optional[float]:
    for name in fields:
        value = to_number(row.get(name))
        if value is not None:
            return value
    return None


def quote_from_row(row: Mapping[str, Any]) -> Quote:
    """Build a Quote from one upstream row; non-numeric fields become None."""
    return Quote(
        price=_first_number(row, PRICE_FIELDS),
        eps=_first_number(row, EPS_FIELDS),
        earnings_timestamp=to_number(row.get(EARNINGS_TIMESTAMP_FIELD)),
    )


class QuoteService:
    """Fetches quotes through a shared cache with a batch-by-batch upstream fallback."""

    def __init__(
        self,
        provider: QuoteProvider,
        cache: CacheRepository[Quote],
        batch_size: int = DEFAULT_BATCH_SIZE,
    ):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self._provider = provider
        self._cache = cache
        self._batch_size = batch_size

    def get_quotes(self, symbols: Iterable[str]) -> dict[str, Quote]:
        """
        Return symbol -> Quote for every requested symbol.

        Cached entries are returned as-is. Misses are fetched in batches; a
        failed batch yields Quote.empty() for each of its symbols and does not
        stop the remaining batches. Never raises on upstream failure.
        """
        result: dict[str, Quote] = {}
        to_fetch: list[str] = []
        for symbol in dict.fromkeys(symbols):
            cached = self._cache.get(_cache_key(symbol))
            if cached is not None:
                result[symbol] = cached
            else:
                to_fetch.append(symbol)

        if not to_fetch:
            return result

        for start in range(0, len(to_fetch), self._batch_size):
            batch = to_fetch[start:start + self._batch_size]
            result.update(self._fetch_batch(batch))

        return result

    def _fetch_batch(self, batch: list[str]) -> dict[str, Quote]:
        try:
            rows = self._provider.fetch_batch(batch)
        except UpstreamError as exc:
            logger.warning("Quote batch failed (%s): %s", ",".join(batch), exc.message)
            return {symbol: Quote.empty() for symbol in batch}

        requested = set(batch)
        fetched: dict[str, Quote] = {}
        for row in rows:
            symbol = row.get("symbol") if isinstance(row, dict) else None
            if not isinstance(symbol, str) or symbol not in requested or symbol in fetched:
                continue
            quote = quote_from_row(row)
            self._cache.set(_cache_key(symbol), quote)
            fetched[symbol] = quote

        missing = [s for s in batch if s not in fetched]
        if missing:
            logger.info("Quote upstream returned no data for %s", ",".join(missing))
        for symbol in missing:
            fetched[symbol] = Quote.empty()
        return fetched
