"""
Pytest configuration and fixtures for the portfolio dashboard tests.

This module provides:
- A controllable clock for cache expiry
- Fake quote / metrics page / history providers that record their calls
- Caches and services wired to those fakes
- A holdings file factory and a FastAPI test client
"""

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from portfolio_dashboard.app_context import AppContext
from portfolio_dashboard.config.settings import Settings, reset_settings
from portfolio_dashboard.core.exceptions import UpstreamError
from portfolio_dashboard.main import create_app
from portfolio_dashboard.repositories.memory import ExpiringCache
from portfolio_dashboard.services import (
    MetricsService,
    PortfolioService,
    QuoteService,
    SymbolResolver,
    ValuationService,
)


# =============================================================================
# CLOCK
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# FAKE PROVIDERS
# =============================================================================


class FakeQuoteProvider:
    """
    Quote provider serving rows from a dict.

    failing_symbols: any batch containing one of these raises UpstreamError,
    as a non-success HTTP status would.
    """

    def __init__(
        self,
        rows: Optional[dict[str, dict[str, Any]]] = None,
        failing_symbols: Optional[set[str]] = None,
    ):
        self.rows = rows or {}
        self.failing_symbols = failing_symbols or set()
        self.calls: list[list[str]] = []

    def fetch_batch(self, symbols: list[str]) -> list[dict[str, Any]]:
        self.calls.append(list(symbols))
        if self.failing_symbols & set(symbols):
            raise UpstreamError("Yahoo quote", "HTTP 503")
        return [{"symbol": s, **self.rows[s]} for s in symbols if s in self.rows]


class FakeMetricsProvider:
    """Metrics page provider serving pages by secondary symbol; unknown symbols fail."""

    def __init__(self, pages: Optional[dict[str, str]] = None):
        self.pages = pages or {}
        self.calls: list[str] = []

    def fetch_page(self, symbol: str) -> str:
        self.calls.append(symbol)
        if symbol not in self.pages:
            raise UpstreamError("Google Finance", "404 Client Error: Not Found")
        return self.pages[symbol]


class FakeHistoryProvider:
    """History provider returning fixed rows, or raising when rows is None."""

    def __init__(self, rows: Optional[list[tuple]] = None):
        self.rows = rows
        self.calls: list[tuple[str, str, str]] = []

    def fetch_history(self, symbol: str, period: str, interval: str) -> list[tuple]:
        self.calls.append((symbol, period, interval))
        if self.rows is None:
            raise UpstreamError("Yahoo history", "connection reset")
        return list(self.rows)


@pytest.fixture
def quote_provider() -> FakeQuoteProvider:
    return FakeQuoteProvider()


@pytest.fixture
def metrics_provider() -> FakeMetricsProvider:
    return FakeMetricsProvider()


@pytest.fixture
def history_provider() -> FakeHistoryProvider:
    return FakeHistoryProvider(rows=[(1700000000, 100.0), (1700086400, 101.5)])


# =============================================================================
# CACHE AND SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def quote_cache(clock) -> ExpiringCache:
    return ExpiringCache(ttl_seconds=20, check_period_seconds=4, name="quote cache", clock=clock)


@pytest.fixture
def metrics_cache(clock) -> ExpiringCache:
    return ExpiringCache(ttl_seconds=3600, check_period_seconds=600, name="metrics cache", clock=clock)


@pytest.fixture
def quote_service(quote_provider, quote_cache) -> QuoteService:
    return QuoteService(provider=quote_provider, cache=quote_cache, batch_size=10)


@pytest.fixture
def metrics_service(metrics_provider, metrics_cache) -> MetricsService:
    return MetricsService(provider=metrics_provider, cache=metrics_cache)


@pytest.fixture
def valuation_service() -> ValuationService:
    return ValuationService()


@pytest.fixture
def resolver() -> SymbolResolver:
    return SymbolResolver()


# =============================================================================
# HOLDINGS FILE FIXTURES
# =============================================================================


@pytest.fixture
def write_holdings(tmp_path) -> Callable[..., Path]:
    """Factory: write holdings (list of dicts, or raw text) to a temp file and return its path."""

    def _write(content, name: str = "holdings.json") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def portfolio_service_factory(
    resolver, quote_service, metrics_service, valuation_service
) -> Callable[[Path], PortfolioService]:
    def _create(holdings_file: Path) -> PortfolioService:
        return PortfolioService(
            holdings_file=holdings_file,
            resolver=resolver,
            quote_service=quote_service,
            metrics_service=metrics_service,
            valuation_service=valuation_service,
        )

    return _create


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def app_context_factory(
    tmp_path, quote_provider, metrics_provider, history_provider
) -> Callable[..., AppContext]:
    """Factory for an AppContext wired to the fake providers and a temp holdings file."""

    def _create(holdings_file: Optional[Path] = None) -> AppContext:
        reset_settings()
        settings = Settings(
            holdings_file=holdings_file or tmp_path / "missing.json",
            _env_file=None,
        )
        return AppContext(
            settings=settings,
            quote_provider=quote_provider,
            metrics_provider=metrics_provider,
            history_provider=history_provider,
        )

    return _create


@pytest.fixture
def client_factory(app_context_factory):
    """Factory for a TestClient; the client is closed at teardown."""
    clients = []

    def _create(holdings_file: Optional[Path] = None) -> TestClient:
        context = app_context_factory(holdings_file)
        client = TestClient(create_app(context))
        client.__enter__()
        clients.append(client)
        return client

    yield _create
    for client in clients:
        client.__exit__(None, None, None)
