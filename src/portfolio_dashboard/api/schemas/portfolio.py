"""Pydantic schemas for the portfolio API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from portfolio_dashboard.domain.views import PortfolioSnapshot, PortfolioTotals


class CamelModel(BaseModel):
    """Serializes snake_case fields as camelCase for the browser UI."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PortfolioTotalsOut(CamelModel):
    """Sums across all holdings."""

    total_investment: float
    total_present_value: float
    total_gain_loss: float

    @classmethod
    def from_view(cls, totals: PortfolioTotals) -> "PortfolioTotalsOut":
        return cls(
            total_investment=totals.total_investment,
            total_present_value=totals.total_present_value,
            total_gain_loss=totals.total_gain_loss,
        )


class PortfolioResponse(CamelModel):
    """
    Response for GET /api/portfolio.

    Holdings are open records: every field from the holdings file plus
    symbol, qty, purchasePrice, investment, cmp, presentValue, gainLoss,
    gainLossPct, pe, latestEarnings, sector.
    """

    last_updated: datetime
    totals: PortfolioTotalsOut
    holdings: list[dict[str, Any]]

    @classmethod
    def from_snapshot(cls, snapshot: PortfolioSnapshot) -> "PortfolioResponse":
        return cls(
            last_updated=snapshot.last_updated,
            totals=PortfolioTotalsOut.from_view(snapshot.totals),
            holdings=[h.to_dict() for h in snapshot.holdings],
        )


class CacheClearedResponse(BaseModel):
    """Response for DELETE /api/cache."""

    status: str
