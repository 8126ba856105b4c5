"""
CONTRACT 2: Indicator Engine

Input: PriceSeries
Output: ChartResponse

One indicator snapshot per bar, computed as of that bar.
Fields that cannot be computed yet are None and are left out of the JSON.
"""

from typing import Optional
from pydantic import BaseModel

from candlechart.schemas.market import Bar


# =============================================================================
# OUTPUT: Indicator Components
# =============================================================================


class BollingerBandsData(BaseModel):
    """Bollinger Bands (SMA +/- k standard deviations)."""

    upper: float
    middle: float
    lower: float


class MACDData(BaseModel):
    """
    MACD indicator values.

    The signal line is an EMA over the current MACD value alone, so it is
    never computed: `signal` stays None (omitted from JSON) and
    `histogram` equals `macd`.
    """

    macd: float
    signal: Optional[float] = None
    histogram: float


class TechnicalIndicators(BaseModel):
    """Indicator snapshot for a single bar."""

    bollinger_bands: Optional[BollingerBandsData] = None
    macd: Optional[MACDData] = None
    rsi: Optional[float] = None
    sma_20: Optional[float] = None
    ema_20: Optional[float] = None


# =============================================================================
# OUTPUT: ChartResponse (Complete Response)
# =============================================================================


class CandlestickData(BaseModel):
    """A bar paired with the indicators known at its close."""

    bar: Bar
    indicators: TechnicalIndicators


class ChartResponse(BaseModel):
    """
    Annotated candlestick series for one symbol.
    Returned by: Indicator Service
    Consumed by: Chart endpoint / frontend
    """

    symbol: str
    data: list[CandlestickData]

    class Config:
        json_schema_extra = {
            "example": {
                "symbol": "AAPL",
                "data": [
                    {
                        "bar": {
                            "timestamp": "2024-02-01T05:00:00Z",
                            "open": 183.99,
                            "high": 186.95,
                            "low": 183.82,
                            "close": 186.86,
                            "volume": 1016537,
                        },
                        "indicators": {
                            "sma_20": 188.12,
                            "ema_20": 187.55,
                            "bollinger_bands": {
                                "upper": 195.31,
                                "middle": 188.12,
                                "lower": 180.93,
                            },
                            "rsi": 48.7,
                        },
                    }
                ],
            }
        }
