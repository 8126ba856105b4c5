"""
Indicator Engine Service

CONTRACT:
    Input:  PriceSeries (daily OHLCV bars for one symbol)
    Output: ChartResponse

RESPONSIBILITIES:
    - Order bars chronologically
    - Calculate SMA 20, EMA 20, Bollinger Bands (20, 2), MACD (12/26/9), RSI 14
    - Evaluate every bar as of its own close (no look-ahead)

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from candlechart.services.indicators.interface import IndicatorServiceInterface
from candlechart.services.indicators.service import (
    IndicatorService,
    build_snapshot,
    evaluate,
    get_indicator_service,
)

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "build_snapshot",
    "evaluate",
    "get_indicator_service",
]
