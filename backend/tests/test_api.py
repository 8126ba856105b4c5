"""Tests for the HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from candlechart.main import app
from candlechart.schemas.market import DataRequest, PriceSeries
from candlechart.services.base import ExternalAPIError, RateLimitError
from candlechart.services.data_ingestion import get_data_ingestion_service


class FakeDataService:
    def __init__(self, bars=None, error=None):
        self.bars = bars or []
        self.error = error
        self.requests: list[DataRequest] = []

    async def execute(self, input_data: DataRequest) -> PriceSeries:
        self.requests.append(input_data)
        if self.error:
            raise self.error
        return PriceSeries(symbol=input_data.symbol.upper(), bars=self.bars)


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(service: FakeDataService) -> FakeDataService:
    app.dependency_overrides[get_data_ingestion_service] = lambda: service
    return service


def test_health(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["time"].endswith("+00:00")


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["health"] == "/api/v1/health"


def test_chart(client, rising_bars):
    service = _use(FakeDataService(rising_bars))

    resp = client.get("/api/v1/chart/aapl")

    assert resp.status_code == 200
    body = resp.json()
    assert body["symbol"] == "AAPL"
    assert len(body["data"]) == 30
    assert service.requests[0].lookback == 100

    first = body["data"][0]
    assert first["bar"]["close"] == 1.0
    assert first["bar"]["volume"] == 1000
    # Nothing is computable yet, so every indicator is omitted
    assert first["indicators"] == {}

    twentieth = body["data"][19]["indicators"]
    assert twentieth["sma_20"] == 10.5
    assert set(twentieth) == {"sma_20", "ema_20", "bollinger_bands", "rsi"}

    last = body["data"][29]["indicators"]
    assert last["rsi"] == 100.0
    assert set(last["macd"]) == {"macd", "histogram"}
    assert last["macd"]["histogram"] == last["macd"]["macd"]


def test_chart_lookback(client, rising_bars):
    service = _use(FakeDataService(rising_bars))

    resp = client.get("/api/v1/chart/AAPL", params={"lookback": 30})

    assert resp.status_code == 200
    assert service.requests[0].lookback == 30


@pytest.mark.parametrize("lookback", [0, 1001])
def test_chart_lookback_bounds(client, lookback):
    _use(FakeDataService())
    resp = client.get("/api/v1/chart/AAPL", params={"lookback": lookback})
    assert resp.status_code == 422


def test_chart_empty(client):
    _use(FakeDataService([]))
    resp = client.get("/api/v1/chart/AAPL")
    assert resp.status_code == 200
    assert resp.json() == {"symbol": "AAPL", "data": []}


def test_chart_blank_symbol(client):
    _use(FakeDataService())
    resp = client.get("/api/v1/chart/%20")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Symbol is required"


@pytest.mark.parametrize(
    "error",
    [
        ExternalAPIError("Alpaca", "API request failed with status: 500"),
        RateLimitError("Alpaca", "Rate limit exceeded"),
    ],
)
def test_chart_data_unavailable(client, error):
    _use(FakeDataService(error=error))
    resp = client.get("/api/v1/chart/AAPL")
    assert resp.status_code == 500
    assert resp.json()["detail"] == f"Error fetching data: {error.message}"


def test_cors_preflight(client):
    resp = client.options(
        "/api/v1/chart/AAPL",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
