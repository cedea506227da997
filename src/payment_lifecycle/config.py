from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Settlement
    settlement_threshold: int = Field(default=100_000, ge=0)

    # Discount rates
    vip_discount_rate: Decimal = Field(default=Decimal("0.85"), ge=0, le=1)
    regular_discount_rate: Decimal = Field(default=Decimal("0.90"), ge=0, le=1)

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any casing; reject names the logging module does not know."""
        level = str(v).strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
