"""Portfolio API: GET /api/portfolio, holdings enriched with live data."""

import logging

from fastapi import APIRouter, Depends

from portfolio_dashboard.api.deps import get_portfolio_service
from portfolio_dashboard.api.schemas import PortfolioResponse
from portfolio_dashboard.core.exceptions import AppError, ServerError
from portfolio_dashboard.services import PortfolioService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(service: PortfolioService = Depends(get_portfolio_service)):
    """
    Return every holding enriched with live price, valuation and sector,
    plus portfolio totals.

    Partial upstream failure still returns 200 with some fields null. A
    holdings file that cannot be parsed, or any unexpected failure, returns
    500 with a diagnostic.
    """
    try:
        snapshot = service.get_portfolio()
    except AppError:
        raise
    except Exception as exc:
        logger.exception("Portfolio request failed")
        raise ServerError(f"Unexpected error building portfolio: {exc}") from exc
    return PortfolioResponse.from_snapshot(snapshot)
