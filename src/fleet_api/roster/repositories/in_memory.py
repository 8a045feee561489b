from typing import Any, Iterable, List, Mapping

from src.fleet_api.roster.repositories.interface import IVehicleRosterRepository
from src.fleet_api.roster.schemas import RawVehicleRecord


class InMemoryRosterRepository(IVehicleRosterRepository):
    def __init__(self, records: Iterable[RawVehicleRecord | Mapping[str, Any]]):
        self._records = [
            r if isinstance(r, RawVehicleRecord) else RawVehicleRecord.model_validate(r)
            for r in records
        ]

    def fetch_all(self) -> List[RawVehicleRecord]:
        return list(self._records)
