"""Configuration management"""

import logging
from functools import lru_cache
from typing import Literal, Optional, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

RemainderOrder = Literal["selection", "member_id"]
REMAINDER_ORDERS = get_args(RemainderOrder)


class Settings(BaseSettings):
    """Engine settings"""

    # Application
    app_name: str = "Trip Split"
    log_level: str = "INFO"

    # Money
    currency_symbol: str = "₹"
    minor_units_per_major: int = 100

    # Equal split remainder placement: caller selection order or sorted member ids
    remainder_order: RemainderOrder = "selection"

    model_config = SettingsConfigDict(
        env_prefix="TRIPSPLIT_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v}")
        return level

    @field_validator("minor_units_per_major")
    @classmethod
    def validate_minor_units(cls, v: int) -> int:
        """Validate the minor unit scale is positive"""
        if v < 1:
            raise ValueError("MINOR_UNITS_PER_MAJOR must be at least 1")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure the package logger from settings"""
    settings = settings or get_settings()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("tripsplit").setLevel(settings.log_level)
