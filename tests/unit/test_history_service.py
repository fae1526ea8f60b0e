"""Unit tests for HistoryService: validation, alignment and caching."""

import math

import pytest

from portfolio_dashboard.core.exceptions import UpstreamError, ValidationError
from portfolio_dashboard.repositories.memory import ExpiringCache
from portfolio_dashboard.services import HistoryService

from tests.conftest import FakeHistoryProvider


@pytest.fixture
def history_cache(clock):
    return ExpiringCache(ttl_seconds=300, check_period_seconds=60, name="history cache", clock=clock)


def test_drops_rows_with_missing_values(history_cache):
    """
    GIVEN upstream rows where some timestamps or closes are missing or NaN
    WHEN history is requested
    THEN only complete rows are kept and both arrays stay aligned
    """
    provider = FakeHistoryProvider(rows=[
        (1, 10.0),
        (None, 11.0),
        (3, None),
        (4, math.nan),
        (5, 12.5),
    ])
    service = HistoryService(provider=provider, cache=history_cache)

    history = service.get_history("TCS.NS")

    assert history.timestamps == [1, 5]
    assert history.close == [10.0, 12.5]
    assert provider.calls == [("TCS.NS", "1mo", "1d")]


def test_cached_for_same_arguments(history_cache, clock):
    """
    GIVEN a series fetched once for (symbol, period, interval)
    WHEN the same arguments are requested again, then different ones, then after the TTL
    THEN only the new arguments and the expired entry reach the upstream
    """
    provider = FakeHistoryProvider(rows=[(1, 10.0)])
    service = HistoryService(provider=provider, cache=history_cache)

    service.get_history("TCS.NS", "5d", "1h")
    service.get_history("TCS.NS", "5d", "1h")
    service.get_history("TCS.NS", "1mo", "1d")
    clock.advance(301)
    service.get_history("TCS.NS", "5d", "1h")

    assert len(provider.calls) == 3


def test_blank_symbol_rejected(history_cache):
    """
    GIVEN a blank symbol
    WHEN history is requested
    THEN ValidationError is raised
    """
    service = HistoryService(provider=FakeHistoryProvider(rows=[]), cache=history_cache)
    with pytest.raises(ValidationError):
        service.get_history("  ")


@pytest.mark.parametrize("period, interval", [("2w", "1d"), ("1mo", "2d")])
def test_unsupported_period_or_interval(history_cache, period, interval):
    """
    GIVEN a period or interval yfinance does not accept
    WHEN history is requested
    THEN ValidationError is raised
    """
    service = HistoryService(provider=FakeHistoryProvider(rows=[]), cache=history_cache)
    with pytest.raises(ValidationError):
        service.get_history("TCS.NS", period, interval)


def test_no_data_is_upstream_error(history_cache):
    """
    GIVEN the upstream returns no complete rows
    WHEN history is requested
    THEN UpstreamError is raised and nothing is cached
    """
    service = HistoryService(provider=FakeHistoryProvider(rows=[(None, None)]), cache=history_cache)
    with pytest.raises(UpstreamError):
        service.get_history("TCS.NS")
    assert len(history_cache) == 0


def test_provider_failure_propagates(history_cache):
    """
    GIVEN the upstream fails
    WHEN history is requested
    THEN the UpstreamError propagates to the caller
    """
    service = HistoryService(provider=FakeHistoryProvider(rows=None), cache=history_cache)
    with pytest.raises(UpstreamError):
        service.get_history("TCS.NS")
