from typing import Any, Callable, List, Sequence

from src.fleet_api.metrics.schemas import EnrichedVehicleRecord
from src.fleet_api.query.enums import TEXT_SORT_KEYS, SortKey, SortOrder
from src.fleet_api.query.schemas import ALL, FilterOptions, SortConfig, VehicleFilter

Predicate = Callable[[EnrichedVehicleRecord], bool]


def search_predicate(search_text: str) -> Predicate:
    needle = search_text.lower()

    def matches(record: EnrichedVehicleRecord) -> bool:
        return needle in record.vehicle.lower() or needle in record.model.lower()

    return matches


def svc_predicate(svc: str) -> Predicate:
    return lambda record: svc == ALL or record.svc == svc


def model_predicate(model: str) -> Predicate:
    return lambda record: model == ALL or record.model == model


def build_predicates(vehicle_filter: VehicleFilter) -> List[Predicate]:
    return [
        search_predicate(vehicle_filter.search_text),
        svc_predicate(vehicle_filter.svc),
        model_predicate(vehicle_filter.model),
    ]


def filter_records(
    records: Sequence[EnrichedVehicleRecord], vehicle_filter: VehicleFilter
) -> List[EnrichedVehicleRecord]:
    predicates = build_predicates(vehicle_filter)
    return [r for r in records if all(p(r) for p in predicates)]


def sort_value(record: EnrichedVehicleRecord, key: SortKey) -> Any:
    value = getattr(record, key.value, None)
    if key in TEXT_SORT_KEYS:
        return value or ""
    return value or 0


def sort_records(
    records: Sequence[EnrichedVehicleRecord], sort: SortConfig
) -> List[EnrichedVehicleRecord]:
    # sorted() stays stable with reverse=True, so ties keep input order both ways
    return sorted(
        records,
        key=lambda r: sort_value(r, sort.key),
        reverse=sort.order == SortOrder.desc,
    )


def query(
    records: Sequence[EnrichedVehicleRecord],
    vehicle_filter: VehicleFilter,
    sort: SortConfig,
) -> List[EnrichedVehicleRecord]:
    return sort_records(filter_records(records, vehicle_filter), sort)


def toggle_sort(current: SortConfig, key: SortKey) -> SortConfig:
    """
    Next sort state after a column is picked.

    Picking the active column flips its order; any other column starts
    descending.
    """
    if current.key == key:
        order = SortOrder.asc if current.order == SortOrder.desc else SortOrder.desc
        return SortConfig(key=key, order=order)
    return SortConfig(key=key, order=SortOrder.desc)


def filter_options(records: Sequence[EnrichedVehicleRecord]) -> FilterOptions:
    return FilterOptions(
        svcs=[ALL, *sorted({r.svc for r in records})],
        models=[ALL, *sorted({r.model for r in records})],
    )
