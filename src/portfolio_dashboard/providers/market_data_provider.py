"""Market data provider protocols."""

from typing import Any, Protocol


class QuoteProvider(Protocol):
    """
    Protocol for the primary (structured) quote source.

    Implementations issue one upstream request per call and raise
    UpstreamError on transport failure, non-success status or an
    undecodable body.
    """

    def fetch_batch(self, symbols: list[str]) -> list[dict[str, Any]]:
        """
        Fetch raw quote rows for a batch of symbols.

        Each row is the upstream mapping for one symbol and carries at least
        a "symbol" key. Symbols the upstream does not know are simply absent.
        """
        ...


class MetricsPageProvider(Protocol):
    """Protocol for the secondary (unstructured) source: one page per symbol."""

    def fetch_page(self, symbol: str) -> str:
        """Return the page text for a secondary-form symbol (e.g. "TCS:NSE")."""
        ...


class HistoryProvider(Protocol):
    """Protocol for the price-history source."""

    def fetch_history(self, symbol: str, period: str, interval: str) -> list[tuple[Any, Any]]:
        """Return (timestamp, close) pairs; either element may be missing."""
        ...
