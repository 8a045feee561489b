import json
from pathlib import Path

import pytest

from src.fleet_api.roster.exceptions import RosterFormatError, RosterUnavailableError
from src.fleet_api.roster.repositories.in_memory import InMemoryRosterRepository
from src.fleet_api.roster.repositories.json_file import JsonFileRosterRepository
from src.fleet_api.roster.schemas import RawVehicleRecord
from tests.mocks.roster_mocks import RAW_ROSTER


@pytest.fixture
def roster_file(tmp_path):
    def _roster_file(payload, raw=False):
        path = tmp_path / "roster.json"
        path.write_text(payload if raw else json.dumps(payload), encoding="utf-8")
        return path

    return _roster_file


def test_fetch_all_from_list(roster_file):
    repo = JsonFileRosterRepository(roster_file(RAW_ROSTER))

    records = repo.fetch_all()

    assert [r.vehicle for r in records] == ["ABC-1", "ABC-2", "XYZ-3", "XYZ-4"]
    assert records[0].distance_km == 9200
    assert records[1].fuel_type == "Flex/Gasolina"


def test_fetch_all_from_vehicles_object(roster_file):
    repo = JsonFileRosterRepository(roster_file({"vehicles": RAW_ROSTER[:2]}))

    assert len(repo.fetch_all()) == 2


def test_fetch_all_ignores_unknown_keys(roster_file):
    row = dict(RAW_ROSTER[0], dailyAvg90Days=100, group="A")
    repo = JsonFileRosterRepository(roster_file([row]))

    (record,) = repo.fetch_all()

    assert record == RawVehicleRecord.model_validate(RAW_ROSTER[0])


def test_fetch_all_missing_file(tmp_path):
    repo = JsonFileRosterRepository(tmp_path / "missing.json")

    with pytest.raises(RosterUnavailableError) as exc:
        repo.fetch_all()
    assert "missing.json" in str(exc.value)


def test_fetch_all_invalid_json(roster_file):
    repo = JsonFileRosterRepository(roster_file("[{not json", raw=True))

    with pytest.raises(RosterFormatError):
        repo.fetch_all()


@pytest.mark.parametrize("payload", [{"cars": []}, "roster", 42])
def test_fetch_all_not_a_list(roster_file, payload):
    repo = JsonFileRosterRepository(roster_file(payload))

    with pytest.raises(RosterFormatError) as exc:
        repo.fetch_all()
    assert "expected a list" in str(exc.value)


@pytest.mark.parametrize(
    "field, value",
    [
        ("distanceKm", -1),
        ("fuelUsed", -0.5),
        ("vehicle", ""),
        ("distanceKm", float("inf")),
        ("idealAvg", float("nan")),
    ],
)
def test_fetch_all_invalid_record(roster_file, field, value):
    row = dict(RAW_ROSTER[0], **{field: value})
    repo = JsonFileRosterRepository(roster_file([row]))

    with pytest.raises(RosterFormatError):
        repo.fetch_all()


@pytest.mark.parametrize("literal", ["Infinity", "NaN", "-Infinity"])
def test_fetch_all_rejects_non_finite_literals(roster_file, literal):
    text = (
        '[{"vehicle": "A", "svc": "X", "model": "M", '
        f'"distanceKm": {literal}, "idealAvg": 10, "fuelUsed": 5}}]'
    )
    repo = JsonFileRosterRepository(roster_file(text, raw=True))

    with pytest.raises(RosterFormatError):
        repo.fetch_all()


def test_fetch_all_shipped_sample_roster():
    sample = Path(__file__).resolve().parent.parent / "data" / "roster.json"
    records = JsonFileRosterRepository(sample).fetch_all()

    assert len(records) == 8
    assert all(r.vehicle for r in records)


def test_in_memory_repository_accepts_dicts_and_records():
    record = RawVehicleRecord.model_validate(RAW_ROSTER[0])
    repo = InMemoryRosterRepository([record, RAW_ROSTER[1]])

    records = repo.fetch_all()

    assert records[0] is record
    assert records[1].vehicle == "ABC-2"


def test_in_memory_repository_returns_copy():
    repo = InMemoryRosterRepository(RAW_ROSTER)

    repo.fetch_all().clear()

    assert len(repo.fetch_all()) == 4
