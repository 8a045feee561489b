from enum import Enum


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


class SortKey(str, Enum):
    vehicle = "vehicle"
    svc = "svc"
    distance_km = "distance_km"
    daily_km = "daily_km"
    daily_fuel = "daily_fuel"
    estimated_fuel_liters = "estimated_fuel_liters"
    fuel_used = "fuel_used"
    fuel_waste_liters = "fuel_waste_liters"
    fuel_gap_percent = "fuel_gap_percent"
    ideal_avg = "ideal_avg"
    actual_avg = "actual_avg"
    financial_impact = "financial_impact"


TEXT_SORT_KEYS = frozenset({SortKey.vehicle, SortKey.svc})
