from datetime import date

import pytest
from pydantic import ValidationError

from src.fleet_api.config import Settings, build_analysis_config, parse_cors
from src.fleet_api.metrics.enums import FuelCategory
from tests.mocks.config_mocks import VALID_SETTINGS_DATA


def test_parse_cors_from_comma_separated_string():
    assert parse_cors("http://a.com, http://b.com") == ["http://a.com", "http://b.com"]


def test_parse_cors_passthrough():
    assert parse_cors(["http://a.com"]) == ["http://a.com"]
    assert parse_cors('["http://a.com"]') == '["http://a.com"]'


def test_parse_cors_invalid():
    with pytest.raises(ValueError):
        parse_cors(42)


def test_window_days_covers_inclusive_period():
    settings = Settings(**VALID_SETTINGS_DATA)

    assert settings.ANALYSIS_PERIOD_START == date(2025, 10, 1)
    assert settings.window_days == 92


def test_period_end_before_start_is_rejected():
    data = dict(VALID_SETTINGS_DATA, ANALYSIS_PERIOD_END="2025-09-30")

    with pytest.raises(ValidationError):
        Settings(**data)


def test_all_cors_origins():
    settings = Settings(**VALID_SETTINGS_DATA)

    assert settings.all_cors_origins == ["http://localhost"]


def test_build_analysis_config():
    data = dict(
        VALID_SETTINGS_DATA, FUEL_PRICE_DIESEL=7.0, ANALYSIS_PERIOD_END="2025-10-30"
    )

    config = build_analysis_config(Settings(**data))

    assert config.window_days == 30
    assert config.price_table.prices[FuelCategory.DIESEL] == 7.0
    assert config.price_table.prices[FuelCategory.ETHANOL] == 4.45
    assert config.price_table.default_category == FuelCategory.DIESEL
