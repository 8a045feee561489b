from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.fleet_api.query.enums import SortKey, SortOrder

ALL = "all"


class VehicleFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    svc: str = ALL
    model: str = ALL


class SortConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: SortKey = SortKey.distance_km
    order: SortOrder = SortOrder.desc


class FilterOptions(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    svcs: List[str]
    models: List[str]
