"""Pydantic schemas for the price history API."""

from pydantic import BaseModel

from portfolio_dashboard.domain.views import PriceHistory


class HistoryResponse(BaseModel):
    """Aligned series: timestamps (unix seconds) and close have equal length."""

    symbol: str
    timestamps: list[int]
    close: list[float]

    @classmethod
    def from_view(cls, history: PriceHistory) -> "HistoryResponse":
        return cls(symbol=history.symbol, timestamps=history.timestamps, close=history.close)
