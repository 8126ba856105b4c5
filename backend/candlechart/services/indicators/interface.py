"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from candlechart.services.base import BaseService
from candlechart.schemas.market import PriceSeries
from candlechart.schemas.indicators import ChartResponse


class IndicatorServiceInterface(BaseService[PriceSeries, ChartResponse]):
    """
    Indicator Engine Service Contract.

    INPUT: PriceSeries
        - symbol: Ticker symbol
        - bars: Daily OHLCV bars (any order)

    OUTPUT: ChartResponse
        - symbol: Same symbol
        - data: One CandlestickData per bar, oldest first, each with the
          indicators computed from that bar and the bars before it only
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: PriceSeries) -> ChartResponse:
        """Annotate every bar of the series with its as-of indicators."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
