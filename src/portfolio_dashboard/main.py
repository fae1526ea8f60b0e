"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from portfolio_dashboard.api.routers import cache_router, history_router, portfolio_router
from portfolio_dashboard.app_context import AppContext
from portfolio_dashboard.config.logging_config import setup_logging
from portfolio_dashboard.config.settings import get_settings
from portfolio_dashboard.core.exceptions import AppError
from portfolio_dashboard.services.cache_sweeper import start_sweepers, stop_sweepers


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Build the app; tests pass a context wired to fake providers."""
    settings = context.settings if context is not None else get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging(settings)
        if getattr(app.state, "context", None) is None:
            app.state.context = AppContext(settings=settings)
        sweepers = start_sweepers(app.state.context.caches)
        yield
        # Shutdown
        await stop_sweepers(sweepers)

    app = FastAPI(
        title=settings.app_name,
        description="Portfolio holdings enriched with live quotes and valuation metrics",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.context = context

    # Include routers
    app.include_router(portfolio_router)
    app.include_router(history_router)
    app.include_router(cache_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
