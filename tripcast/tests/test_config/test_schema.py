"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from tripcast.config.schema import (
    ForecastConfig,
    LoaderConfig,
    ProviderConfig,
    SearchConfig,
    TripcastConfig,
)


class TestTripcastConfig:
    def test_defaults(self):
        config = TripcastConfig()
        assert config.provider.forecast_base_url == "https://api.open-meteo.com/v1"
        assert config.provider.geocoding_base_url == (
            "https://geocoding-api.open-meteo.com/v1"
        )
        assert config.search.suggestion_count == 10
        assert config.forecast.default_days == 7
        assert config.forecast.default_timezone == "auto"
        assert config.loader.max_batch_size is None

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            TripcastConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            SearchConfig(suggestion_count=5, bogus=True)

    def test_immutable(self):
        config = TripcastConfig()
        with pytest.raises(ValidationError):
            config.provider.timeout_seconds = 1.0


class TestProviderConfig:
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ProviderConfig(timeout_seconds=0.0)


class TestSearchConfig:
    def test_count_bounds(self):
        SearchConfig(suggestion_count=1)
        SearchConfig(suggestion_count=100)
        with pytest.raises(ValidationError):
            SearchConfig(suggestion_count=0)
        with pytest.raises(ValidationError):
            SearchConfig(suggestion_count=101)


class TestForecastConfig:
    def test_days_bounds(self):
        with pytest.raises(ValidationError):
            ForecastConfig(default_days=0)
        with pytest.raises(ValidationError):
            ForecastConfig(max_days=17)

    def test_default_days_within_max(self):
        with pytest.raises(ValidationError, match="default_days must not exceed"):
            ForecastConfig(default_days=10, max_days=7)


class TestLoaderConfig:
    def test_batch_size_positive(self):
        assert LoaderConfig(max_batch_size=5).max_batch_size == 5
        with pytest.raises(ValidationError):
            LoaderConfig(max_batch_size=0)
