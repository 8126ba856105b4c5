"""
Data Ingestion Service

CONTRACT:
    Input:  DataRequest
    Output: PriceSeries

RESPONSIBILITIES:
    - Fetch daily OHLCV bars from Alpaca
    - Drop records with malformed timestamps
    - Normalize bars to the Bar schema (UTC timestamps)
    - Report every upstream failure as DataUnavailableError

NO INDICATOR MATH - Pure data fetching and transformation.
"""

from candlechart.services.data_ingestion.interface import DataIngestionServiceInterface
from candlechart.services.data_ingestion.alpaca_adapter import AlpacaClient, AlpacaConfig
from candlechart.services.data_ingestion.service import (
    DataIngestionService,
    get_data_ingestion_service,
    close_data_ingestion_service,
)

__all__ = [
    "DataIngestionServiceInterface",
    "AlpacaClient",
    "AlpacaConfig",
    "DataIngestionService",
    "get_data_ingestion_service",
    "close_data_ingestion_service",
]
