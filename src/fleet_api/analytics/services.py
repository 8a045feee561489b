import logging
from typing import List, Optional

from src.fleet_api.aggregation.aggregator import aggregate_by_key, compute_fleet_stats
from src.fleet_api.aggregation.enums import GroupBy
from src.fleet_api.aggregation.schemas import FleetStats, GroupSummary
from src.fleet_api.aggregation.strategies.factory import GroupingStrategyFactory
from src.fleet_api.metrics.deriver import derive_all
from src.fleet_api.metrics.schemas import AnalysisConfig, EnrichedVehicleRecord
from src.fleet_api.query.engine import filter_options, filter_records, query
from src.fleet_api.query.schemas import FilterOptions, SortConfig, VehicleFilter
from src.fleet_api.roster.exceptions import RosterException
from src.fleet_api.roster.repositories.interface import IVehicleRosterRepository

logger = logging.getLogger(__name__)


class FleetAnalyticsService:
    def __init__(self, roster_repo: IVehicleRosterRepository, config: AnalysisConfig):
        self.roster_repo = roster_repo
        self.config = config

    def enriched_records(self) -> List[EnrichedVehicleRecord]:
        try:
            raws = self.roster_repo.fetch_all()
            records = derive_all(raws, self.config)
            logger.info(
                "Derived metrics for %d vehicles over %d days",
                len(records),
                self.config.window_days,
            )
            return records

        except RosterException as e:
            logger.error("Roster error during analysis: %s", str(e))
            raise

        except ValueError as e:
            logger.warning("Validation error during analysis: %s", str(e), exc_info=True)
            raise

        except Exception as e:
            logger.error(
                "Unexpected error while deriving vehicle metrics: %s",
                str(e),
                exc_info=True,
            )
            raise RuntimeError("Unexpected error while deriving vehicle metrics.") from e

    def list_vehicles(
        self, vehicle_filter: VehicleFilter, sort: SortConfig
    ) -> List[EnrichedVehicleRecord]:
        logger.info(
            "Vehicle query: search=%r svc=%s model=%s sort=%s %s",
            vehicle_filter.search_text,
            vehicle_filter.svc,
            vehicle_filter.model,
            sort.key.value,
            sort.order.value,
        )
        return query(self.enriched_records(), vehicle_filter, sort)

    def fleet_stats(self, vehicle_filter: VehicleFilter) -> FleetStats:
        view = filter_records(self.enriched_records(), vehicle_filter)
        return compute_fleet_stats(view, self.config.window_days)

    def group_summaries(
        self, group_by: GroupBy, limit: Optional[int] = None
    ) -> List[GroupSummary]:
        # Groups always rank the whole fleet, not the filtered view
        strategy = GroupingStrategyFactory.create(group_by)
        summaries = aggregate_by_key(
            self.enriched_records(), strategy.key, self.config.window_days
        )
        return summaries[:limit] if limit else summaries

    def filter_options(self) -> FilterOptions:
        return filter_options(self.enriched_records())
