from abc import ABC, abstractmethod
from typing import List

from src.fleet_api.roster.schemas import RawVehicleRecord


class IVehicleRosterRepository(ABC):
    @abstractmethod
    def fetch_all(self) -> List[RawVehicleRecord]:
        """
        Return the roster of the current analysis period, in source order.
        """
        ...
