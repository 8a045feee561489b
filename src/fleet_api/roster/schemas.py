from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawVehicleRecord(BaseModel):
    """One roster row as delivered by the data source."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    vehicle: str = Field(..., min_length=1)
    svc: str
    model: str
    fuel_type: str = ""
    distance_km: float = Field(0.0, ge=0)
    ideal_avg: float = Field(0.0, ge=0, description="Target km per liter, 0 if none")
    actual_avg: float = Field(0.0, ge=0, description="Observed km per liter")
    fuel_used: float = Field(0.0, ge=0, description="Liters over the window")
