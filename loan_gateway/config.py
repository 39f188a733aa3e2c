"""Configuration management using Pydantic Settings"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"
    request_log_enabled: bool = True

    # Eligibility strategies
    document_verifier: Literal["presence", "image"] = "presence"
    price_oracle: Literal["fixed", "market"] = "fixed"
    stock_unit_price: float = 18.0

    # Market data (Alpha Vantage compatible)
    market_api_base: str = "https://www.alphavantage.co"
    market_api_key: str = ""

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Submitted applications kept in memory
    application_store_max_records: int = 1000


settings = Settings()
