"""Yahoo Finance quote API client (batched, comma-joined symbols)."""

import logging
from typing import Any, Optional

import requests

from portfolio_dashboard.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_QUOTE_URL = "https://query1.finance.yahoo.com/v7/finance/quote"
SOURCE = "Yahoo quote"


class YahooQuoteProvider:
    """Fetches raw quote rows from the Yahoo v7 quote endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_QUOTE_URL,
        timeout_seconds: Optional[float] = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", "Mozilla/5.0 (compatible; portfolio-dashboard)")

    def fetch_batch(self, symbols: list[str]) -> list[dict[str, Any]]:
        if not symbols:
            return []
        try:
            response = self._session.get(
                self._base_url,
                params={"symbols": ",".join(symbols)},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise UpstreamError(SOURCE, str(exc)) from exc

        if not response.ok:
            raise UpstreamError(SOURCE, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(SOURCE, f"invalid JSON body: {exc}") from exc

        if not isinstance(payload, dict):
            raise UpstreamError(SOURCE, f"unexpected body type {type(payload).__name__}")
        envelope = payload.get("quoteResponse") or {}
        if not isinstance(envelope, dict):
            raise UpstreamError(SOURCE, "quoteResponse is not an object")
        rows = envelope.get("result") or []
        if not isinstance(rows, list):
            raise UpstreamError(SOURCE, "quoteResponse.result is not a list")
        return [row for row in rows if isinstance(row, dict) and isinstance(row.get("symbol"), str)]
