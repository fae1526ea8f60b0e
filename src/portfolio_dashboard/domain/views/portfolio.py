"""View models for quotes, valuation metrics and portfolio outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Quote:
    """Live market data for a symbol. Any field may be None when the upstream had nothing usable."""

    price: Optional[float] = None
    eps: Optional[float] = None
    earnings_timestamp: Optional[float] = None

    @classmethod
    def empty(cls) -> "Quote":
        """Fully-null quote used when the upstream failed or omitted the symbol."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.price is None and self.eps is None and self.earnings_timestamp is None

    def to_dict(self) -> dict[str, Optional[float]]:
        return {
            "price": self.price,
            "eps": self.eps,
            "earningsTimestamp": self.earnings_timestamp,
        }


@dataclass(frozen=True)
class SecondaryMetric:
    """P/E ratio and latest earnings figure scraped from the secondary source."""

    pe: Optional[float] = None
    earnings: Optional[float] = None

    @classmethod
    def empty(cls) -> "SecondaryMetric":
        """Null result; still cached so a failed scrape is not retried within the TTL."""
        return cls()

    def to_dict(self) -> dict[str, Optional[float]]:
        return {"pe": self.pe, "earnings": self.earnings}


@dataclass
class EnrichedHolding:
    """A raw holding plus resolved symbol, live price and computed valuation fields."""

    raw: dict[str, Any]
    symbol: Optional[str]
    qty: float
    purchase_price: float
    investment: float
    cmp: float
    present_value: float
    gain_loss: float
    gain_loss_pct: float
    pe: Optional[float] = None
    latest_earnings: Optional[float] = None
    sector: str = "Unknown"

    def to_dict(self) -> dict[str, Any]:
        """Raw fields first, then computed fields (computed keys win on collision)."""
        return {
            **self.raw,
            "symbol": self.symbol,
            "qty": self.qty,
            "purchasePrice": self.purchase_price,
            "investment": self.investment,
            "cmp": self.cmp,
            "presentValue": self.present_value,
            "gainLoss": self.gain_loss,
            "gainLossPct": self.gain_loss_pct,
            "pe": self.pe,
            "latestEarnings": self.latest_earnings,
            "sector": self.sector,
        }


@dataclass
class PortfolioTotals:
    """Sums across all enriched holdings."""

    total_investment: float = 0.0
    total_present_value: float = 0.0
    total_gain_loss: float = 0.0


@dataclass
class PortfolioSnapshot:
    """Everything served by the portfolio endpoint for one request."""

    last_updated: datetime
    totals: PortfolioTotals
    holdings: list[EnrichedHolding] = field(default_factory=list)


@dataclass(frozen=True)
class PriceHistory:
    """Aligned close-price series for a symbol."""

    symbol: str
    timestamps: list[int] = field(default_factory=list)
    close: list[float] = field(default_factory=list)
