from src.fleet_api.aggregation.strategies.interface import IGroupingStrategy
from src.fleet_api.metrics.schemas import EnrichedVehicleRecord


class ModelGroupingStrategy(IGroupingStrategy):
    def key(self, record: EnrichedVehicleRecord) -> str:
        return record.model
