"""Google Finance quote page fetcher (HTML, scraped downstream)."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from portfolio_dashboard.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_URL = "https://www.google.com/finance/quote"
SOURCE = "Google Finance"

# The page is only served in full to browser-like clients
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}


class GoogleFinanceProvider:
    """Fetches one quote page per secondary-form symbol (e.g. "TCS:NSE")."""

    def __init__(
        self,
        base_url: str = DEFAULT_PAGE_URL,
        timeout_seconds: Optional[float] = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def page_url(self, symbol: str) -> str:
        return f"{self._base_url}/{quote(symbol, safe='')}"

    def fetch_page(self, symbol: str) -> str:
        url = self.page_url(symbol)
        try:
            response = self._session.get(url, headers=BROWSER_HEADERS, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise UpstreamError(SOURCE, str(exc)) from exc
        return response.text
