import pytest

VALID_SETTINGS_DATA = {
    "ENVIRONMENT": "production",
    "FASTAPI_API_KEY_HEADER": "test_key_header",
    "FASTAPI_API_KEY": "test_key",
    "FASTAPI_CORS_ORIGINS": ["http://localhost"],
    "ROSTER_FILE_PATH": "tests/data/does_not_exist.json",
    "ANALYSIS_PERIOD_START": "2025-10-01",
    "ANALYSIS_PERIOD_END": "2025-12-31",
    "FUEL_PRICE_DIESEL": 6.225,
    "FUEL_PRICE_GASOLINE": 6.34,
    "FUEL_PRICE_ETHANOL": 4.45,
    "FUEL_PRICE_FLEX": 6.34,
    "LOG_DIR": "logs",
}
HEADERS = {
    VALID_SETTINGS_DATA["FASTAPI_API_KEY_HEADER"]: VALID_SETTINGS_DATA[
        "FASTAPI_API_KEY"
    ]
}


@pytest.fixture(scope="function", autouse=True)
def mock_get_settings(monkeypatch):
    """
    Mock the get_settings function to return a test configuration.
    """
    from src.fleet_api.config import Settings, get_settings

    def _get_settings():
        return Settings(**VALID_SETTINGS_DATA)

    get_settings.cache_clear()
    monkeypatch.setattr("src.fleet_api.config.get_settings", _get_settings)
    monkeypatch.setattr("src.fleet_api.middleware.auth.get_settings", _get_settings)
    monkeypatch.setattr(
        "src.fleet_api.analytics.dependencies.get_settings", _get_settings
    )
    monkeypatch.setattr("src.fleet_api.analytics.routes.get_settings", _get_settings)
    monkeypatch.setattr(
        "src.fleet_api.health_check.routes.get_settings", _get_settings
    )

    return _get_settings
