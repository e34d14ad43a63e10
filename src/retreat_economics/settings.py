"""Process settings, read from ``RETREAT_ECON_*`` environment variables."""

from __future__ import annotations

from decimal import Decimal

from pydantic_settings import BaseSettings

from retreat_economics.config.platform import PlatformConfig


class Settings(BaseSettings):
    # Platform economics defaults applied by the API
    platform_fee_rate: Decimal = Decimal("0.30")
    deposit_pct: Decimal = Decimal("0.50")
    final_payout_days_before_start: int = 7
    strict_fee_types: bool = False

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # CORS
    allowed_origins: str = "*"

    model_config = {"env_prefix": "RETREAT_ECON_"}

    def platform_config(self) -> PlatformConfig:
        """Default ``PlatformConfig`` built from these settings."""
        return PlatformConfig(
            platform_fee_rate=self.platform_fee_rate,
            deposit_pct=self.deposit_pct,
            final_payout_days_before_start=self.final_payout_days_before_start,
            strict_fee_types=self.strict_fee_types,
        )

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


settings = Settings()
