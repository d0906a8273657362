"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

from tripcast.ingest.open_meteo_client import (
    DEFAULT_USER_AGENT,
    FORECAST_BASE_URL,
    GEOCODING_BASE_URL,
)
from tripcast.models.common import AUTO_TIMEZONE


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    forecast_base_url: str = FORECAST_BASE_URL
    geocoding_base_url: str = GEOCODING_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class SearchConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    suggestion_count: int = Field(default=10, ge=1, le=100)
    language: str = "en"
    min_query_length: int = Field(default=2, ge=1)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    default_days: int = Field(default=7, ge=1, le=16)
    max_days: int = Field(default=16, ge=1, le=16)  # Open-Meteo limit
    default_timezone: str = AUTO_TIMEZONE
    activity_window_days: int = Field(default=7, ge=1, le=16)

    @model_validator(mode="after")
    def _within_max(self) -> "ForecastConfig":
        if self.default_days > self.max_days:
            raise ValueError("default_days must not exceed max_days")
        if self.activity_window_days > self.max_days:
            raise ValueError("activity_window_days must not exceed max_days")
        return self


class LoaderConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    max_batch_size: int | None = Field(default=None, ge=1)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    level: str = "INFO"
    file: str = ""


class TripcastConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    provider: ProviderConfig = ProviderConfig()
    search: SearchConfig = SearchConfig()
    forecast: ForecastConfig = ForecastConfig()
    loader: LoaderConfig = LoaderConfig()
    logging: LoggingConfig = LoggingConfig()
