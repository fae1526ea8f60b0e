"""Price history from Yahoo Finance via yfinance."""

import logging
from typing import Optional

import pandas as pd

from portfolio_dashboard.core.exceptions import UpstreamError
from portfolio_dashboard.core.timezone import to_unix_seconds

logger = logging.getLogger(__name__)

SOURCE = "Yahoo history"


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


class YahooHistoryProvider:
    """Fetches (unix seconds, close) rows for a symbol; missing values come back as None."""

    def fetch_history(
        self, symbol: str, period: str, interval: str
    ) -> list[tuple[Optional[int], Optional[float]]]:
        try:
            yf = _get_yf()
            frame = yf.Ticker(symbol).history(period=period, interval=interval)
        except Exception as exc:
            raise UpstreamError(SOURCE, str(exc)) from exc

        if frame is None or frame.empty or "Close" not in frame.columns:
            return []

        rows: list[tuple[Optional[int], Optional[float]]] = []
        for ts, close in frame["Close"].items():
            timestamp = None if pd.isna(ts) else to_unix_seconds(pd.Timestamp(ts).to_pydatetime())
            value = None if pd.isna(close) else float(close)
            rows.append((timestamp, value))
        return rows
