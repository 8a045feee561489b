import json
import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from src.fleet_api.roster.exceptions import RosterFormatError, RosterUnavailableError
from src.fleet_api.roster.repositories.interface import IVehicleRosterRepository
from src.fleet_api.roster.schemas import RawVehicleRecord

logger = logging.getLogger(__name__)

roster_adapter = TypeAdapter(List[RawVehicleRecord])


class JsonFileRosterRepository(IVehicleRosterRepository):
    """
    Reads the roster from a JSON file.

    The file holds either a list of records or an object with a ``vehicles``
    list. Record keys are camelCase (``distanceKm``, ``fuelUsed``...).
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def fetch_all(self) -> List[RawVehicleRecord]:
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error("Cannot read roster file %s: %s", self.path, e)
            raise RosterUnavailableError(str(self.path), str(e)) from e

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Roster file %s is not valid JSON: %s", self.path, e)
            raise RosterFormatError(str(self.path), str(e)) from e

        if isinstance(payload, dict):
            payload = payload.get("vehicles")
        if not isinstance(payload, list):
            raise RosterFormatError(
                str(self.path), "expected a list of vehicle records"
            )

        try:
            records = roster_adapter.validate_python(payload)
        except ValidationError as e:
            logger.error(
                "Roster file %s has %d invalid field(s)", self.path, e.error_count()
            )
            raise RosterFormatError(str(self.path), str(e)) from e

        logger.info("Loaded %d vehicle records from %s", len(records), self.path)
        return records
