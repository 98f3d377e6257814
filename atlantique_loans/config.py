"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="ATLANTIQUE_", extra="ignore"
    )

    # Service
    service_name: str = "atlantique-loans"
    environment: str = "production"
    log_level: str = "INFO"

    # Schedule cache
    cache_ttl_seconds: float = 300.0  # 5 minutes
    cache_max_entries: int = 512

    # Pricing
    internal_transfer_fee_rate: Decimal = Decimal("0.01")
    external_transfer_fee_rate: Decimal = Decimal("0.03")
    default_currency: str = "EUR"


settings = Settings()
