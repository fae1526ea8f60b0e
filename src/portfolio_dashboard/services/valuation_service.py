"""
Valuation: combine raw holdings with live quotes and secondary metrics.

Live data wins over values supplied in the holdings file; file values are
the fallback when the symbol is unresolved or the upstreams had nothing.
"""

from typing import Any, Mapping, Optional, Sequence

from portfolio_dashboard.core.util import lookup_field, number_field, round2, round4, text_field, to_number
from portfolio_dashboard.domain.reference_data import DEFAULT_SECTOR, SECTOR_MAP
from portfolio_dashboard.domain.views import EnrichedHolding, PortfolioTotals, Quote, SecondaryMetric
from portfolio_dashboard.services.symbol_resolver import display_name

QTY_FIELDS = ("Qty", "Quantity")
PURCHASE_PRICE_FIELDS = ("Purchase Price", "PurchasePrice", "purchasePrice")
INVESTMENT_FIELDS = ("Investment",)
CMP_FIELDS = ("CMP", "cmp")
SECTOR_FIELDS = ("Sector",)
INDUSTRY_FIELDS = ("Industry",)


def compute_pe(
    metric: Optional[SecondaryMetric], cmp: float, eps: Optional[float]
) -> Optional[float]:
    """Scraped P/E, else cmp / EPS when EPS is positive, else None."""
    if metric is not None and metric.pe is not None:
        return metric.pe
    if eps is not None and eps > 0:
        return round2(cmp / eps)
    return None


def resolve_sector(holding: Mapping[str, Any], sector_map: Mapping[str, str] = SECTOR_MAP) -> str:
    sector = text_field(holding, *SECTOR_FIELDS) or text_field(holding, *INDUSTRY_FIELDS)
    if sector:
        return sector
    return sector_map.get(display_name(holding), DEFAULT_SECTOR)


class ValuationService:
    """Builds enriched holdings and portfolio totals."""

    def __init__(self, sector_map: Optional[Mapping[str, str]] = None):
        self._sector_map = SECTOR_MAP if sector_map is None else sector_map

    def enrich(
        self,
        holding: Mapping[str, Any],
        symbol: Optional[str],
        quote: Optional[Quote],
        metric: Optional[SecondaryMetric],
    ) -> EnrichedHolding:
        qty = number_field(holding, *QTY_FIELDS)
        purchase_price = number_field(holding, *PURCHASE_PRICE_FIELDS)

        explicit_investment = to_number(lookup_field(holding, *INVESTMENT_FIELDS))
        investment = explicit_investment if explicit_investment else purchase_price * qty

        live_price = quote.price if quote is not None else None
        cmp = live_price if live_price is not None else number_field(holding, *CMP_FIELDS)

        present_value = round2(qty * cmp)
        gain_loss = round2(present_value - investment)
        gain_loss_pct = round4(gain_loss / investment) if investment else 0.0

        eps = quote.eps if quote is not None else None
        earnings = metric.earnings if metric is not None else None

        return EnrichedHolding(
            raw=dict(holding),
            symbol=symbol,
            qty=qty,
            purchase_price=purchase_price,
            investment=investment,
            cmp=cmp,
            present_value=present_value,
            gain_loss=gain_loss,
            gain_loss_pct=gain_loss_pct,
            pe=compute_pe(metric, cmp, eps),
            latest_earnings=earnings if earnings is not None else eps,
            sector=resolve_sector(holding, self._sector_map),
        )

    def reconcile(
        self,
        raw_holdings: Sequence[Mapping[str, Any]],
        symbols: Sequence[Optional[str]],
        quotes: Mapping[str, Quote],
        metrics: Mapping[str, SecondaryMetric],
    ) -> tuple[list[EnrichedHolding], PortfolioTotals]:
        """
        Enrich every holding, in input order, and total them.

        symbols is index-aligned with raw_holdings. Holdings sharing a symbol
        share the same quote and metric.
        """
        if len(symbols) != len(raw_holdings):
            raise ValueError(
                f"symbols ({len(symbols)}) must align with holdings ({len(raw_holdings)})"
            )

        holdings = []
        for holding, symbol in zip(raw_holdings, symbols):
            quote = quotes.get(symbol) if symbol else None
            metric = metrics.get(symbol) if symbol else None
            holdings.append(self.enrich(holding, symbol, quote, metric))

        return holdings, self.totals(holdings)

    @staticmethod
    def totals(holdings: Sequence[EnrichedHolding]) -> PortfolioTotals:
        return PortfolioTotals(
            total_investment=sum((h.investment for h in holdings), 0.0),
            total_present_value=sum((h.present_value for h in holdings), 0.0),
            total_gain_loss=sum((h.gain_loss for h in holdings), 0.0),
        )
