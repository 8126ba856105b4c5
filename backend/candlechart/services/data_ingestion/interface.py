"""
Data Ingestion Service Interface

Defines the contract for the data ingestion layer.
"""

from abc import abstractmethod

from candlechart.services.base import BaseService
from candlechart.schemas.market import DataRequest, PriceSeries


class DataIngestionServiceInterface(BaseService[DataRequest, PriceSeries]):
    """
    Data Ingestion Service Contract.

    INPUT: DataRequest
        - symbol: Symbol to fetch
        - lookback: Number of days

    OUTPUT: PriceSeries
        - symbol: Normalized (upper-case) symbol
        - bars: Daily bars with well-formed UTC timestamps

    RAISES: DataUnavailableError (or a subclass) when data cannot be fetched
    """

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @abstractmethod
    async def execute(self, input_data: DataRequest) -> PriceSeries:
        """Fetch and normalize daily bars."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check that the data source can be used."""
        pass
