from typing import Tuple

from src.fleet_api.metrics.enums import FuelCategory
from src.fleet_api.metrics.schemas import PriceTable


def resolve_fuel_category(fuel_type: str, price_table: PriceTable) -> FuelCategory:
    """
    Match a free-text fuel type against the price table.

    Categories are tried in ``price_table.match_order``; the first whose marker
    is contained in ``fuel_type`` (case-insensitive) wins. Anything else falls
    back to the table's default category.
    """
    fuel_type_upper = (fuel_type or "").upper()
    for category in price_table.match_order:
        if category.value.upper() in fuel_type_upper:
            return category
    return price_table.default_category


def resolve_fuel_price(
    fuel_type: str, price_table: PriceTable
) -> Tuple[FuelCategory, float]:
    category = resolve_fuel_category(fuel_type, price_table)
    return category, price_table.prices[category]
