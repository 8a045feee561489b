from typing import Iterable, List

from src.fleet_api.metrics.pricing import resolve_fuel_price
from src.fleet_api.metrics.schemas import AnalysisConfig, EnrichedVehicleRecord
from src.fleet_api.roster.schemas import RawVehicleRecord


def derive(raw: RawVehicleRecord, config: AnalysisConfig) -> EnrichedVehicleRecord:
    """
    Enrich one roster row with daily rates, fuel waste and financial impact.

    A row without fuel data (``fuel_used == 0``) keeps its daily distance but
    is left out of every fuel-delta and money figure. Ratios with a zero
    denominator come out as 0.
    """
    window_days = config.window_days

    estimated_fuel = raw.distance_km / raw.ideal_avg if raw.ideal_avg > 0 else 0.0
    has_fuel_data = raw.fuel_used > 0
    fuel_waste = raw.fuel_used - estimated_fuel if has_fuel_data else 0.0
    fuel_gap = (
        (raw.fuel_used - estimated_fuel) / estimated_fuel * 100
        if has_fuel_data and estimated_fuel > 0
        else 0.0
    )
    category, price = resolve_fuel_price(raw.fuel_type, config.price_table)

    return EnrichedVehicleRecord(
        **raw.model_dump(),
        daily_km=raw.distance_km / window_days,
        daily_fuel=raw.fuel_used / window_days,
        estimated_fuel_liters=estimated_fuel,
        has_fuel_data=has_fuel_data,
        fuel_waste_liters=fuel_waste,
        fuel_gap_percent=fuel_gap,
        fuel_category=category,
        fuel_price_used=price,
        financial_impact=fuel_waste * price,
        is_valid_for_finance=has_fuel_data,
    )


def derive_all(
    raws: Iterable[RawVehicleRecord], config: AnalysisConfig
) -> List[EnrichedVehicleRecord]:
    return [derive(raw, config) for raw in raws]
