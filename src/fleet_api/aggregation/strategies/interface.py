from abc import ABC, abstractmethod

from src.fleet_api.metrics.schemas import EnrichedVehicleRecord


class IGroupingStrategy(ABC):
    @abstractmethod
    def key(self, record: EnrichedVehicleRecord) -> str:
        """
        Return the group a record belongs to.
        """
        ...
