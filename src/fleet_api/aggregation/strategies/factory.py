from src.fleet_api.aggregation.enums import GroupBy
from src.fleet_api.aggregation.strategies.interface import IGroupingStrategy
from src.fleet_api.aggregation.strategies.model import ModelGroupingStrategy
from src.fleet_api.aggregation.strategies.service_unit import (
    ServiceUnitGroupingStrategy,
)


class GroupingStrategyFactory:
    @staticmethod
    def create(group_by: GroupBy) -> IGroupingStrategy:
        if group_by == GroupBy.model:
            return ModelGroupingStrategy()
        elif group_by == GroupBy.svc:
            return ServiceUnitGroupingStrategy()
        else:
            raise ValueError(f"Unsupported group_by value: {group_by}")
