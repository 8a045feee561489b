from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.fleet_api.aggregation.enums import GroupBy
from src.fleet_api.metrics.enums import FuelCategory
from src.fleet_api.query.enums import SortKey, SortOrder
from src.fleet_api.query.schemas import ALL, SortConfig, VehicleFilter


class FleetFilterRequestDTO(BaseModel):
    search: str = Field("", description="Substring of plate or model")
    svc: str = Field(ALL, description=f"Service unit code or '{ALL}'")
    model: str = Field(ALL, description=f"Vehicle model or '{ALL}'")

    def to_filter(self) -> VehicleFilter:
        return VehicleFilter(search_text=self.search, svc=self.svc, model=self.model)


class VehicleListRequestDTO(FleetFilterRequestDTO):
    sort_by: SortKey = Field(SortKey.distance_km, description="Column to sort by")
    sort_order: SortOrder = Field(SortOrder.desc, description="asc or desc")
    page: int = Field(1, ge=1)
    page_size: int = Field(100, ge=1, le=1000)

    def to_sort(self) -> SortConfig:
        return SortConfig(key=self.sort_by, order=self.sort_order)


class FleetGroupsRequestDTO(BaseModel):
    group_by: GroupBy = Field(GroupBy.model, description="model or svc")
    limit: Optional[int] = Field(None, ge=1, description="Keep only the top N groups")


class AnalysisPeriodDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    period_start: date
    period_end: date
    window_days: int
    fuel_prices: Dict[FuelCategory, float]
    default_fuel_category: FuelCategory
