"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "Candlechart Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS (Frontend URLs)
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Alpaca market data (keeps the variable names the Alpaca SDKs use)
    alpaca_api_key_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("APCA_API_KEY_ID", "alpaca_api_key_id"),
    )
    alpaca_api_secret_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("APCA_API_SECRET_KEY", "alpaca_api_secret_key"),
    )
    alpaca_data_url: str = "https://data.alpaca.markets/v2"
    alpaca_feed: str = "iex"  # free accounts only get the IEX feed
    alpaca_timeout_seconds: float = 10.0

    # Chart
    default_lookback: int = 100

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
