"""
Chart API Endpoints

Candlestick series annotated with as-of technical indicators.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from candlechart.core.config import settings
from candlechart.schemas.market import DataRequest
from candlechart.schemas.indicators import ChartResponse
from candlechart.services.base import DataUnavailableError
from candlechart.services.data_ingestion import (
    DataIngestionService,
    get_data_ingestion_service,
)
from candlechart.services.indicators import IndicatorService, get_indicator_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{symbol}",
    response_model=ChartResponse,
    response_model_exclude_none=True,
)
async def get_chart(
    symbol: str,
    lookback: int = Query(default=settings.default_lookback, ge=1, le=1000),
    data_service: DataIngestionService = Depends(get_data_ingestion_service),
    indicator_service: IndicatorService = Depends(get_indicator_service),
):
    """
    Get daily candles for a symbol with indicators.

    Each candle carries the values known at its close:
        - SMA 20 / EMA 20 / Bollinger Bands (from the 20th candle)
        - MACD 12/26/9 (from the 26th candle)
        - RSI 14 (from the 15th candle)

    Indicators that are not available yet are omitted.
    """
    symbol = symbol.strip()
    if not symbol:
        raise HTTPException(status_code=400, detail="Symbol is required")

    try:
        series = await data_service.execute(
            DataRequest(symbol=symbol, lookback=lookback)
        )
    except DataUnavailableError as e:
        logger.error(f"Error fetching data for {symbol}: {e}")
        raise HTTPException(status_code=500, detail=f"Error fetching data: {e.message}")

    return await indicator_service.execute(series)
