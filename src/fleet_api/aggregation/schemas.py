from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GroupSummary(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    name: str
    member_count: int
    avg_daily_km: float
    avg_daily_fuel: float


class FleetStats(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    fleet_count: int
    total_distance: float
    total_fuel_used: float
    total_estimated_fuel: float
    fuel_waste_total: float
    fleet_daily_km: float
    fleet_daily_fuel: float
    total_waste_loss: float
    total_economy_gain: float
    net_financial_balance: float
    total_gap: float
