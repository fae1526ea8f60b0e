"""Price history API: GET /api/history for the chart view."""

from fastapi import APIRouter, Depends, Query

from portfolio_dashboard.api.deps import get_history_service
from portfolio_dashboard.api.schemas import HistoryResponse
from portfolio_dashboard.services import HistoryService
from portfolio_dashboard.services.history_service import DEFAULT_INTERVAL, DEFAULT_PERIOD

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("", response_model=HistoryResponse)
def get_history(
    symbol: str = Query("", description="Exchange symbol, e.g. HDFCBANK.NS"),
    period: str = Query(DEFAULT_PERIOD, description="1d, 5d, 1mo, 3mo, 6mo, 1y, ..."),
    interval: str = Query(DEFAULT_INTERVAL, description="1m, 5m, 15m, 60m, 1d, ..."),
    service: HistoryService = Depends(get_history_service),
):
    """
    Return aligned timestamp (unix seconds) and close arrays.

    - 400 when symbol is missing or period/interval is unsupported.
    - 502 when the upstream fails or has no data.
    """
    return HistoryResponse.from_view(service.get_history(symbol, period, interval))
