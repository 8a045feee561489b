from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from src.fleet_api.metrics.enums import FuelCategory
from src.fleet_api.roster.schemas import RawVehicleRecord

DEFAULT_FUEL_PRICES: Dict[FuelCategory, float] = {
    FuelCategory.FLEX: 6.34,
    FuelCategory.GASOLINE: 6.34,
    FuelCategory.ETHANOL: 4.45,
    FuelCategory.DIESEL: 6.225,
}


class PriceTable(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    prices: Dict[FuelCategory, float] = Field(
        default_factory=lambda: dict(DEFAULT_FUEL_PRICES)
    )
    # Checked in order, first substring match wins
    match_order: Tuple[FuelCategory, ...] = (
        FuelCategory.FLEX,
        FuelCategory.GASOLINE,
        FuelCategory.ETHANOL,
    )
    default_category: FuelCategory = FuelCategory.DIESEL

    @model_validator(mode="after")
    def validate_prices(self) -> "PriceTable":
        missing = {*self.match_order, self.default_category} - set(self.prices)
        if missing:
            names = ", ".join(sorted(c.name for c in missing))
            raise ValueError(f"price table has no price for: {names}")
        return self


class AnalysisConfig(BaseModel):
    """Fixed constants of one analysis run."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    window_days: int = Field(..., gt=0)
    price_table: PriceTable = Field(default_factory=PriceTable)


class EnrichedVehicleRecord(RawVehicleRecord):
    daily_km: float
    daily_fuel: float
    estimated_fuel_liters: float
    has_fuel_data: bool
    fuel_waste_liters: float
    fuel_gap_percent: float
    fuel_category: FuelCategory
    fuel_price_used: float
    financial_impact: float
    is_valid_for_finance: bool
