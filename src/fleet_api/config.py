"""Fleet analytics API configuration."""

import os
from datetime import date
from functools import lru_cache
from typing import Annotated, Any, Literal

from dotenv import load_dotenv
from pydantic import (
    AnyUrl,
    BeforeValidator,
    ValidationInfo,
    computed_field,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.fleet_api.metrics.enums import FuelCategory
from src.fleet_api.metrics.schemas import AnalysisConfig, PriceTable


def get_env_file() -> str:
    """
    Determine the .env file to use based on the ENVIRONMENT value.
    """
    env_file = {
        "production": ".env",
        "development": ".env.dev",
    }
    load_dotenv(env_file.get(os.getenv("ENVIRONMENT", "development")), override=True)
    return env_file.get(os.getenv("ENVIRONMENT", "development"), ".env.dev")


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    """Server config settings."""

    model_config = SettingsConfigDict(
        env_file=get_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,  # Ensures exact variable name matching
        env_ignore_empty=True,
        extra="ignore",
    )
    ENVIRONMENT: Literal["development", "production"] = "development"
    PROJECT_NAME: str = "Fleet Fuel Efficiency API"

    # API settings
    DEBUG_MODE: bool = False
    FASTAPI_API_KEY_HEADER: str = "X-API-Key"
    FASTAPI_API_KEY: str = "default_key"
    FASTAPI_CORS_ORIGINS: Annotated[list[AnyUrl] | str, BeforeValidator(parse_cors)] = (
        []
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.FASTAPI_CORS_ORIGINS]

    # Roster data source
    ROSTER_FILE_PATH: str = "data/roster.json"

    # Analysis window, both ends inclusive
    ANALYSIS_PERIOD_START: date = date(2025, 10, 1)
    ANALYSIS_PERIOD_END: date = date(2025, 12, 31)

    # Fuel prices per liter
    FUEL_PRICE_DIESEL: float = 6.225
    FUEL_PRICE_GASOLINE: float = 6.34
    FUEL_PRICE_ETHANOL: float = 4.45
    FUEL_PRICE_FLEX: float = 6.34

    LOG_DIR: str = "logs"

    @field_validator("ANALYSIS_PERIOD_END")
    @classmethod
    def validate_analysis_period(cls, end: date, info: ValidationInfo):
        start = info.data.get("ANALYSIS_PERIOD_START")
        if start and end < start:
            raise ValueError(
                "ANALYSIS_PERIOD_END must be after or equal to ANALYSIS_PERIOD_START"
            )
        return end

    @computed_field  # type: ignore[prop-decorator]
    @property
    def window_days(self) -> int:
        return (self.ANALYSIS_PERIOD_END - self.ANALYSIS_PERIOD_START).days + 1


# Global settings instance with caching.
@lru_cache()
def get_settings() -> Settings:
    settings = Settings()

    return settings


def build_analysis_config(settings: Settings) -> AnalysisConfig:
    price_table = PriceTable(
        prices={
            FuelCategory.FLEX: settings.FUEL_PRICE_FLEX,
            FuelCategory.GASOLINE: settings.FUEL_PRICE_GASOLINE,
            FuelCategory.ETHANOL: settings.FUEL_PRICE_ETHANOL,
            FuelCategory.DIESEL: settings.FUEL_PRICE_DIESEL,
        }
    )
    return AnalysisConfig(window_days=settings.window_days, price_table=price_table)
