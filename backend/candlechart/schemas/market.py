"""
CONTRACT 1: Data Ingestion Layer

Input: DataRequest
Output: PriceSeries

This module defines the bars fetched from the market data provider (Alpaca)
and the normalized, provider-independent form handed to the indicator engine.
"""

from datetime import timezone
from typing import Any, Optional
from pydantic import AwareDatetime, BaseModel, Field, field_validator


# =============================================================================
# INPUT: DataRequest
# =============================================================================


class DataRequest(BaseModel):
    """
    Request for daily bars of one symbol.
    Sent by: Chart endpoint
    Received by: Data Ingestion Service
    """

    symbol: str = Field(..., min_length=1, description="Ticker symbol (e.g., 'AAPL')")
    lookback: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Number of calendar days (and max bars) to fetch",
    )


# =============================================================================
# OUTPUT: PriceSeries Components
# =============================================================================


class Bar(BaseModel):
    """Single daily candlestick (OHLCV)."""

    timestamp: AwareDatetime
    open: float
    high: float
    low: float
    close: float
    volume: int

    class Config:
        frozen = True

    @field_validator("timestamp")
    @classmethod
    def _to_utc(cls, value):
        # Offset-naive timestamps are rejected; all bars compare in UTC
        return value.astimezone(timezone.utc)


class PriceSeries(BaseModel):
    """
    Bars for one symbol, oldest first.
    Returned by: Data Ingestion Service
    Consumed by: Indicator Engine
    """

    symbol: str
    bars: list[Bar] = Field(default_factory=list)


# =============================================================================
# UPSTREAM: Alpaca market data v2 payloads
# =============================================================================


class AlpacaBar(BaseModel):
    """Raw bar as returned by Alpaca (single-letter keys)."""

    t: Optional[Any] = None  # RFC 3339 timestamp, checked per record
    o: float
    h: float
    l: float  # noqa: E741
    c: float
    v: int


class AlpacaBarsResponse(BaseModel):
    """Body of GET /v2/stocks/{symbol}/bars."""

    bars: Optional[list[AlpacaBar]] = None
    symbol: Optional[str] = None
    next_page_token: Optional[str] = None
