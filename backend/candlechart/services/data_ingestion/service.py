"""
Data Ingestion Service Implementation

Fetches and normalizes daily bars from Alpaca.
"""

import logging
from typing import Optional

from candlechart.core.config import get_settings
from candlechart.schemas.market import DataRequest, PriceSeries
from candlechart.services.data_ingestion.interface import DataIngestionServiceInterface
from candlechart.services.data_ingestion.alpaca_adapter import AlpacaClient, AlpacaConfig

logger = logging.getLogger(__name__)


class DataIngestionService(DataIngestionServiceInterface):
    """
    Data Ingestion Service.

    Thin wrapper over the Alpaca client: normalizes the symbol and packs the
    bars into a PriceSeries. Upstream errors propagate unchanged.
    """

    def __init__(self, client: AlpacaClient):
        self._client = client

    @property
    def name(self) -> str:
        return "DataIngestionService"

    async def execute(self, input_data: DataRequest) -> PriceSeries:
        """Fetch daily bars for the requested symbol."""
        symbol = input_data.symbol.upper().strip()
        bars = await self._client.fetch_bars(symbol, input_data.lookback)
        return PriceSeries(symbol=symbol, bars=bars)

    async def health_check(self) -> bool:
        """Healthy when Alpaca credentials are configured."""
        return self._client.config.is_configured

    async def close(self) -> None:
        await self._client.close()


# Singleton instance
_service_instance: Optional[DataIngestionService] = None


def get_data_ingestion_service() -> DataIngestionService:
    """Get or create data ingestion service instance."""
    global _service_instance
    if _service_instance is None:
        config = AlpacaConfig.from_settings(get_settings())
        _service_instance = DataIngestionService(AlpacaClient(config))
    return _service_instance


async def close_data_ingestion_service() -> None:
    """Release the HTTP session of the singleton, if any."""
    global _service_instance
    if _service_instance is not None:
        await _service_instance.close()
        _service_instance = None
        logger.info("Data ingestion service closed")
