"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from portfolio_dashboard.app_context import AppContext
from portfolio_dashboard.services import HistoryService, PortfolioService


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext owned by the running app."""
    return request.app.state.context


def get_portfolio_service(context: AppContext = Depends(get_app_context)) -> PortfolioService:
    """Provide PortfolioService instance."""
    return context.portfolio


def get_history_service(context: AppContext = Depends(get_app_context)) -> HistoryService:
    """Provide HistoryService instance."""
    return context.history
