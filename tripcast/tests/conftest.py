"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from tripcast.config.schema import TripcastConfig
from tripcast.models.weather import DailyWeather

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def berlin_forecast() -> dict:
    with open(FIXTURE_DIR / "open_meteo_forecast_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def berlin_search() -> dict:
    with open(FIXTURE_DIR / "open_meteo_search_berlin.json") as f:
        return json.load(f)


@pytest.fixture
def test_config() -> TripcastConfig:
    """Config pointing at fake provider hosts."""
    return TripcastConfig(
        provider={
            "forecast_base_url": "https://test-forecast.example.com/v1",
            "geocoding_base_url": "https://test-geocoding.example.com/v1",
        }
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {
            "forecast_base_url": "https://test-forecast.example.com/v1",
            "geocoding_base_url": "https://test-geocoding.example.com/v1",
        },
        "search": {"min_query_length": 3},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def snowy_day() -> DailyWeather:
    return DailyWeather(
        date="2026-02-10",
        temp_max=2.0,
        temp_min=-3.0,
        precipitation=5.0,
        wind_speed=8.0,
        weather_code=73,
    )
