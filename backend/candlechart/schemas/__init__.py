"""
Candlechart Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from candlechart.schemas.market import (
    DataRequest,
    Bar,
    PriceSeries,
    AlpacaBar,
    AlpacaBarsResponse,
)
from candlechart.schemas.indicators import (
    BollingerBandsData,
    MACDData,
    TechnicalIndicators,
    CandlestickData,
    ChartResponse,
)

__all__ = [
    # Market
    "DataRequest",
    "Bar",
    "PriceSeries",
    "AlpacaBar",
    "AlpacaBarsResponse",
    # Indicators
    "BollingerBandsData",
    "MACDData",
    "TechnicalIndicators",
    "CandlestickData",
    "ChartResponse",
]
