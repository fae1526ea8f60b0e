"""Cache admin API: DELETE /api/cache flushes every upstream cache."""

import logging

from fastapi import APIRouter, Depends

from portfolio_dashboard.api.deps import get_app_context
from portfolio_dashboard.api.schemas import CacheClearedResponse
from portfolio_dashboard.app_context import AppContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cache", tags=["cache"])


@router.delete("", response_model=CacheClearedResponse)
def clear_caches(context: AppContext = Depends(get_app_context)):
    """Flush quote, metrics and history caches."""
    context.clear_caches()
    logger.info("All caches cleared via API")
    return CacheClearedResponse(status="cleared")
