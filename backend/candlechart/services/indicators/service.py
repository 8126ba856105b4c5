"""
Indicator Engine Service Implementation

Walks a price series bar by bar and computes each bar's indicators from the
closes up to and including that bar. Nothing after the bar is ever visible
to its snapshot. Pure Python/NumPy, no state kept between calls.
"""

from typing import Optional, Sequence

from candlechart.schemas.market import Bar, PriceSeries
from candlechart.schemas.indicators import (
    BollingerBandsData,
    CandlestickData,
    ChartResponse,
    MACDData,
    TechnicalIndicators,
)
from candlechart.services.indicators.interface import IndicatorServiceInterface
from candlechart.services.indicators.calculations import (
    sma,
    ema,
    bollinger_bands,
    macd,
    rsi,
)

MA_PERIOD = 20
BOLLINGER_STD_DEV = 2.0
MACD_MIN_BARS = 26
RSI_PERIOD = 14


def build_snapshot(closes: Sequence[float]) -> TechnicalIndicators:
    """Indicators for the last close of `closes`, gated per indicator."""
    indicators = TechnicalIndicators()
    count = len(closes)

    if count >= MA_PERIOD:
        indicators.sma_20 = sma(closes, MA_PERIOD)
        indicators.ema_20 = ema(closes, MA_PERIOD)
        bands = bollinger_bands(closes, MA_PERIOD, BOLLINGER_STD_DEV)
        if bands is not None:
            upper, middle, lower = bands
            indicators.bollinger_bands = BollingerBandsData(
                upper=upper, middle=middle, lower=lower
            )

    if count >= MACD_MIN_BARS:
        result = macd(closes)
        if result is not None:
            macd_line, signal_line, histogram = result
            indicators.macd = MACDData(
                macd=macd_line, signal=signal_line, histogram=histogram
            )

    if count >= RSI_PERIOD:
        indicators.rsi = rsi(closes, RSI_PERIOD)

    return indicators


def evaluate(symbol: str, bars: Sequence[Bar]) -> ChartResponse:
    """
    Annotate every bar with the indicators known as of its close.

    Bars are sorted oldest first before evaluation; the output follows that
    sorted order. An empty series gives an empty chart.
    """
    ordered = sorted(bars, key=lambda bar: bar.timestamp)
    closes = [bar.close for bar in ordered]

    data = []
    for i, bar in enumerate(ordered):
        data.append(
            CandlestickData(bar=bar, indicators=build_snapshot(closes[: i + 1]))
        )

    return ChartResponse(symbol=symbol, data=data)


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Produces the annotated candlestick series for a chart.
    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: PriceSeries) -> ChartResponse:
        """Annotate every bar of the series with its as-of indicators."""
        return evaluate(input_data.symbol, input_data.bars)

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
