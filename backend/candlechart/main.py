"""
Candlechart Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from candlechart.core.config import settings
from candlechart.api.v1 import router as api_v1_router
from candlechart.services.data_ingestion import (
    get_data_ingestion_service,
    close_data_ingestion_service,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    data_service = get_data_ingestion_service()
    if await data_service.health_check():
        logger.info(f"Using Alpaca market data ({settings.alpaca_feed} feed)")
    else:
        logger.warning(
            "APCA_API_KEY_ID and APCA_API_SECRET_KEY are not set - "
            "chart requests will fail until they are configured"
        )

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_data_ingestion_service()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Candlestick chart API

    ## Architecture
    - **Data Ingestion**: Fetches daily bars from Alpaca market data
    - **Indicator Engine**: SMA, EMA, Bollinger Bands, MACD, RSI (pure Python/NumPy)

    ## Core Principles
    - Every candle only sees data up to its own close (no look-ahead)
    - Indicators without enough history are omitted, never zero-filled
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Candlechart Backend API",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
