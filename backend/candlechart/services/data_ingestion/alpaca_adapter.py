"""
Alpaca Market Data Adapter

Fetches daily bars from the Alpaca market data API (v2).
Free accounts are limited to the IEX feed.

Alpaca API Documentation: https://docs.alpaca.markets/reference/stockbars
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from candlechart.core.config import Settings
from candlechart.schemas.market import Bar, AlpacaBarsResponse
from candlechart.services.base import (
    AuthenticationError,
    ExternalAPIError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "Alpaca"
DAILY_TIMEFRAME = "1Day"


@dataclass(frozen=True)
class AlpacaConfig:
    """Connection settings for the Alpaca data API."""

    api_key_id: Optional[str]
    api_secret_key: Optional[str]
    data_url: str = "https://data.alpaca.markets/v2"
    feed: str = "iex"
    timeout_seconds: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key_id and self.api_secret_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AlpacaConfig":
        return cls(
            api_key_id=settings.alpaca_api_key_id,
            api_secret_key=settings.alpaca_api_secret_key,
            data_url=settings.alpaca_data_url,
            feed=settings.alpaca_feed,
            timeout_seconds=settings.alpaca_timeout_seconds,
        )


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp into UTC. Returns None if malformed."""
    if not isinstance(value, str):
        return None

    # Fractions of any precision need Python 3.11+ fromisoformat
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    # RFC 3339 requires an offset
    if ts.tzinfo is None:
        return None

    return ts.astimezone(timezone.utc)


def parse_bars_response(payload: Any) -> list[Bar]:
    """
    Convert an Alpaca bars body into Bars.

    Records with a malformed timestamp are dropped and logged.
    Raises ExternalAPIError if the body itself is not a bars response.
    """
    try:
        response = AlpacaBarsResponse.model_validate(payload)
    except ValidationError as e:
        raise ExternalAPIError(SERVICE_NAME, f"Unexpected response body: {e}")

    bars: list[Bar] = []
    for raw in response.bars or []:
        ts = parse_timestamp(raw.t)
        if ts is None:
            logger.warning(f"Error parsing timestamp {raw.t!r}, skipping bar")
            continue

        bars.append(
            Bar(
                timestamp=ts,
                open=raw.o,
                high=raw.h,
                low=raw.l,
                close=raw.c,
                volume=raw.v,
            )
        )

    return bars


def raise_for_status(status: int, body: str) -> None:
    """Map a non-200 Alpaca status to the matching data-unavailable error."""
    if status == 200:
        return

    details = {"status": status, "body": body[:500]}
    if status in (401, 403):
        raise AuthenticationError(
            SERVICE_NAME, f"Credentials rejected (status {status})", details
        )
    if status == 429:
        raise RateLimitError(SERVICE_NAME, "Rate limit exceeded", details)
    raise ExternalAPIError(
        SERVICE_NAME, f"API request failed with status: {status}", details
    )


class AlpacaClient:
    """
    Alpaca market data client.

    One aiohttp session per client, created lazily and reused.
    """

    def __init__(self, config: AlpacaConfig):
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def config(self) -> AlpacaConfig:
        return self._config

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={
                    "APCA-API-KEY-ID": self._config.api_key_id or "",
                    "APCA-API-SECRET-KEY": self._config.api_secret_key or "",
                    "Accept": "application/json",
                },
                timeout=aiohttp.ClientTimeout(total=self._config.timeout_seconds),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_bars_request(
        self, symbol: str, limit: int, now: Optional[datetime] = None
    ) -> tuple[str, dict[str, Any]]:
        """URL and query parameters for the last `limit` days of daily bars."""
        now = now or datetime.now(timezone.utc)
        start = now - timedelta(days=limit)

        url = f"{self._config.data_url}/stocks/{quote(symbol, safe='')}/bars"
        params = {
            "start": start.strftime("%Y-%m-%d"),
            "end": now.strftime("%Y-%m-%d"),
            "timeframe": DAILY_TIMEFRAME,
            "limit": limit,
            "feed": self._config.feed,
        }
        return url, params

    async def fetch_bars(self, symbol: str, limit: int = 100) -> list[Bar]:
        """
        Fetch daily bars for a symbol.

        Raises:
            AuthenticationError: Credentials missing or rejected
            RateLimitError: Alpaca answered 429
            ExternalAPIError: Network failure, timeout or bad response
        """
        if not self._config.is_configured:
            raise AuthenticationError(
                SERVICE_NAME,
                "APCA_API_KEY_ID and APCA_API_SECRET_KEY must be set",
            )

        url, params = self.build_bars_request(symbol, limit)
        logger.info(f"Fetching {limit} days of {symbol} bars from Alpaca ({self._config.feed} feed)")

        try:
            session = await self._ensure_session()
            async with session.get(url, params=params) as resp:
                if resp.status != 200:
                    body = await resp.text()
                    logger.error(f"Alpaca bars error for {symbol}: {resp.status} {body[:200]}")
                    raise_for_status(resp.status, body)
                payload = await resp.json(content_type=None)
        except asyncio.TimeoutError:
            raise ExternalAPIError(
                SERVICE_NAME,
                f"Request timed out after {self._config.timeout_seconds}s",
            )
        except aiohttp.ClientError as e:
            raise ExternalAPIError(SERVICE_NAME, f"Request failed: {e}")
        except ValueError as e:
            raise ExternalAPIError(SERVICE_NAME, f"Invalid JSON response: {e}")

        bars = parse_bars_response(payload)
        logger.info(f"Got {len(bars)} bars for {symbol}")
        return bars
