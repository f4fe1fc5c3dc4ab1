"""Form defaults and log level, read from CAPPUCCINO_* environment variables or .env."""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.engine import (
    MIN_BEAN_WEIGHT,
    parse_ratio,
    parse_roast_level,
    parse_unit,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CAPPUCCINO_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Form defaults
    default_bean_weight: float = Field(default=18.0, ge=MIN_BEAN_WEIGHT)
    default_roast_level: str = Field(default="Medium")
    default_ratio: float = Field(default=2.0)
    default_unit: str = Field(default="ml")

    # Application settings
    log_level: str = Field(default="INFO")

    @field_validator("default_roast_level")
    @classmethod
    def _check_roast_level(cls, value: str) -> str:
        return parse_roast_level(value)

    @field_validator("default_ratio")
    @classmethod
    def _check_ratio(cls, value: float) -> float:
        return parse_ratio(value)

    @field_validator("default_unit")
    @classmethod
    def _check_unit(cls, value: str) -> str:
        return parse_unit(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper().strip()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be: DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
