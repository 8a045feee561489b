from src.fleet_api.analytics.services import FleetAnalyticsService
from src.fleet_api.config import build_analysis_config, get_settings
from src.fleet_api.roster.repositories.json_file import JsonFileRosterRepository


def get_analytics_service() -> FleetAnalyticsService:
    settings = get_settings()
    repo = JsonFileRosterRepository(settings.ROSTER_FILE_PATH)
    return FleetAnalyticsService(repo, build_analysis_config(settings))
