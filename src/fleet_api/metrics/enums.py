from enum import Enum


class FuelCategory(str, Enum):
    """Price-table categories; the value is the marker searched for in fuelType."""

    FLEX = "FLEX"
    GASOLINE = "GASOLINA"
    ETHANOL = "ETANOL"
    DIESEL = "DIESEL"
