"""
API tests for GET /api/history.

Tests cover:
- Aligned timestamp/close series
- Missing symbol and unsupported period (400)
- Upstream failure or no data (502)
"""

from fastapi.testclient import TestClient


class TestGetHistoryAPI:
    """Tests for GET /api/history."""

    def test_history_success(self, client_factory, history_provider):
        """
        GIVEN the history upstream returns two rows
        WHEN I GET /api/history?symbol=TCS.NS
        THEN response is 200 with equal-length timestamps and close
        """
        client: TestClient = client_factory()

        response = client.get("/api/history", params={"symbol": "TCS.NS", "period": "5d"})

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "symbol": "TCS.NS",
            "timestamps": [1700000000, 1700086400],
            "close": [100.0, 101.5],
        }
        assert history_provider.calls == [("TCS.NS", "5d", "1d")]

    def test_missing_symbol(self, client_factory, history_provider):
        response = client_factory().get("/api/history")

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert history_provider.calls == []

    def test_unsupported_period(self, client_factory):
        response = client_factory().get("/api/history", params={"symbol": "TCS.NS", "period": "7w"})

        assert response.status_code == 400

    def test_upstream_failure(self, client_factory, history_provider):
        """
        GIVEN the history upstream is failing
        WHEN I GET /api/history
        THEN response is 502
        """
        history_provider.rows = None

        response = client_factory().get("/api/history", params={"symbol": "TCS.NS"})

        assert response.status_code == 502
        assert response.json()["error"] == "UPSTREAM_ERROR"

    def test_no_data(self, client_factory, history_provider):
        history_provider.rows = []

        response = client_factory().get("/api/history", params={"symbol": "ZZZZ.NS"})

        assert response.status_code == 502
