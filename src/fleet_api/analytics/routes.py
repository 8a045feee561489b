import logging
from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, Response
from src.fleet_api.aggregation.schemas import FleetStats, GroupSummary
from src.fleet_api.analytics.dependencies import get_analytics_service
from src.fleet_api.analytics.exceptions import AnalyticsException
from src.fleet_api.analytics.schemas import (
    AnalysisPeriodDTO,
    FleetFilterRequestDTO,
    FleetGroupsRequestDTO,
    VehicleListRequestDTO,
)
from src.fleet_api.analytics.services import FleetAnalyticsService
from src.fleet_api.config import build_analysis_config, get_settings
from src.fleet_api.metrics.schemas import EnrichedVehicleRecord
from src.fleet_api.middleware.auth import validate_api_key
from src.fleet_api.query.schemas import FilterOptions

logger = logging.getLogger(__name__)

analytics_router = APIRouter(
    tags=["Fleet Fuel Efficiency"], dependencies=[Depends(validate_api_key)]
)


@analytics_router.get("/vehicles", response_model=List[EnrichedVehicleRecord])
async def get_vehicles(
    response: Response,
    params: VehicleListRequestDTO = Depends(),
    service: FleetAnalyticsService = Depends(get_analytics_service),
):
    try:
        records = service.list_vehicles(params.to_filter(), params.to_sort())
    except RuntimeError as e:
        raise AnalyticsException(HTTPStatus.INTERNAL_SERVER_ERROR, str(e))

    total = len(records)
    total_pages = (total + params.page_size - 1) // params.page_size
    offset = (params.page - 1) * params.page_size
    logger.info("Vehicle list page %d/%d (%d rows)", params.page, total_pages, total)

    # Set pagination headers
    response.headers["X-Total-Count"] = str(total)
    response.headers["X-Total-Pages"] = str(total_pages)
    response.headers["X-Current-Page"] = str(params.page)
    response.headers["X-Page-Size"] = str(params.page_size)

    return records[offset : offset + params.page_size]


@analytics_router.get("/fleet-stats", response_model=FleetStats)
async def get_fleet_stats(
    params: FleetFilterRequestDTO = Depends(),
    service: FleetAnalyticsService = Depends(get_analytics_service),
):
    try:
        return service.fleet_stats(params.to_filter())
    except RuntimeError as e:
        raise AnalyticsException(HTTPStatus.INTERNAL_SERVER_ERROR, str(e))


@analytics_router.get("/fleet-groups", response_model=List[GroupSummary])
async def get_fleet_groups(
    params: FleetGroupsRequestDTO = Depends(),
    service: FleetAnalyticsService = Depends(get_analytics_service),
):
    try:
        return service.group_summaries(params.group_by, params.limit)
    except RuntimeError as e:
        raise AnalyticsException(HTTPStatus.INTERNAL_SERVER_ERROR, str(e))


@analytics_router.get("/fleet-filters", response_model=FilterOptions)
async def get_fleet_filters(
    service: FleetAnalyticsService = Depends(get_analytics_service),
):
    try:
        return service.filter_options()
    except RuntimeError as e:
        raise AnalyticsException(HTTPStatus.INTERNAL_SERVER_ERROR, str(e))


@analytics_router.get("/analysis-period", response_model=AnalysisPeriodDTO)
async def get_analysis_period():
    settings = get_settings()
    config = build_analysis_config(settings)
    return AnalysisPeriodDTO(
        period_start=settings.ANALYSIS_PERIOD_START,
        period_end=settings.ANALYSIS_PERIOD_END,
        window_days=config.window_days,
        fuel_prices=config.price_table.prices,
        default_fuel_category=config.price_table.default_category,
    )
