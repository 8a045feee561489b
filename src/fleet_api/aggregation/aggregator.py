from collections import defaultdict
from typing import Callable, Dict, List, Sequence

from src.fleet_api.aggregation.schemas import FleetStats, GroupSummary
from src.fleet_api.metrics.schemas import EnrichedVehicleRecord


def aggregate_by_key(
    records: Sequence[EnrichedVehicleRecord],
    key_fn: Callable[[EnrichedVehicleRecord], str],
    window_days: int,
) -> List[GroupSummary]:
    """
    Group records and rank the groups by average daily km per vehicle.

    The full ranking is returned, largest first; groups with the same average
    keep the order in which their key first appeared.
    """
    groups: Dict[str, List[EnrichedVehicleRecord]] = defaultdict(list)
    for record in records:
        groups[key_fn(record)].append(record)

    results: List[GroupSummary] = []
    for name, members in groups.items():
        total_km = sum(r.distance_km for r in members)
        total_fuel = sum(r.fuel_used for r in members)
        vehicle_days = len(members) * window_days

        results.append(
            GroupSummary(
                name=name,
                member_count=len(members),
                avg_daily_km=total_km / vehicle_days if vehicle_days else 0.0,
                avg_daily_fuel=total_fuel / vehicle_days if vehicle_days else 0.0,
            )
        )

    return sorted(results, key=lambda g: g.avg_daily_km, reverse=True)


def compute_fleet_stats(
    records: Sequence[EnrichedVehicleRecord], window_days: int
) -> FleetStats:
    """
    Fleet-wide totals over the given view.

    Distance and per-vehicle rates count every record; money figures only
    count records with fuel data.
    """
    fleet_count = len(records)
    total_distance = sum(r.distance_km for r in records)
    total_fuel = sum(r.fuel_used for r in records)
    total_estimated = sum(r.estimated_fuel_liters for r in records)
    vehicle_days = fleet_count * window_days

    valid = [r for r in records if r.is_valid_for_finance]
    waste_loss = sum(r.financial_impact for r in valid if r.financial_impact > 0)
    economy_gain = sum(abs(r.financial_impact) for r in valid if r.financial_impact < 0)
    total_gap = (
        (total_fuel - total_estimated) / total_estimated * 100
        if total_estimated > 0
        else 0.0
    )

    return FleetStats(
        fleet_count=fleet_count,
        total_distance=total_distance,
        total_fuel_used=total_fuel,
        total_estimated_fuel=total_estimated,
        fuel_waste_total=total_fuel - total_estimated,
        fleet_daily_km=total_distance / vehicle_days if vehicle_days else 0.0,
        fleet_daily_fuel=total_fuel / vehicle_days if vehicle_days else 0.0,
        total_waste_loss=waste_loss,
        total_economy_gain=economy_gain,
        net_financial_balance=waste_loss - economy_gain,
        total_gap=total_gap,
    )
