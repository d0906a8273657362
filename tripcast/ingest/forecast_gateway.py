"""Forecast gateway: batched city search and forecast lookups for one request."""

import asyncio
import logging
from datetime import date, timedelta

from tripcast.errors import ProviderError, ValidationError
from tripcast.ingest.open_meteo_client import OpenMeteoClient
from tripcast.loader.batch_loader import KeyedBatchLoader
from tripcast.models.common import AUTO_TIMEZONE
from tripcast.models.weather import (
    City,
    DailyWeather,
    ForecastKey,
    ForecastResult,
    ForecastUnits,
)

logger = logging.getLogger(__name__)

MAX_FORECAST_DAYS = 16

# DailyWeather field -> provider column
COLUMNS: dict[str, str] = {
    "temp_max": "temperature_2m_max",
    "temp_min": "temperature_2m_min",
    "precipitation": "precipitation_sum",
    "wind_speed": "wind_speed_10m_max",
    "weather_code": "weather_code",
}


class ForecastGateway:
    """Fetches and normalizes provider data through per-request batch loaders.

    Create one gateway per incoming request; its loaders cache for the life
    of the gateway and must not be shared across requests.
    """

    def __init__(
        self,
        client: OpenMeteoClient,
        suggestion_count: int = 10,
        language: str = "en",
        max_days: int = MAX_FORECAST_DAYS,
        max_batch_size: int | None = None,
    ):
        self.client = client
        self.suggestion_count = suggestion_count
        self.language = language
        self.max_days = max_days
        self.city_loader: KeyedBatchLoader[str, list[City]] = KeyedBatchLoader(
            self._batch_get_cities, name="cities", max_batch_size=max_batch_size
        )
        self.forecast_loader: KeyedBatchLoader[ForecastKey, ForecastResult] = (
            KeyedBatchLoader(
                self._batch_get_forecasts,
                name="forecasts",
                max_batch_size=max_batch_size,
            )
        )

    async def city_suggestions(self, name: str) -> list[City]:
        if not name or not name.strip():
            raise ProviderError("City name must not be empty")
        return await self.city_loader.load(name.strip())

    async def forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str | None = AUTO_TIMEZONE,
        days: int = 7,
    ) -> ForecastResult:
        key = self._forecast_key(latitude, longitude, timezone, days)
        return await self.forecast_loader.load(key)

    def _forecast_key(
        self,
        latitude: float,
        longitude: float,
        timezone: str | None,
        days: int,
    ) -> ForecastKey:
        if isinstance(days, bool) or not isinstance(days, int):
            raise ValidationError(f"days must be an integer, got {days!r}")
        if not 1 <= days <= self.max_days:
            raise ValidationError(
                f"days must be between 1 and {self.max_days}, got {days}"
            )
        for name, value in (("latitude", latitude), ("longitude", longitude)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"{name} must be a number, got {value!r}")
        if not -90.0 <= latitude <= 90.0:
            raise ValidationError(f"latitude out of range: {latitude}")
        if not -180.0 <= longitude <= 180.0:
            raise ValidationError(f"longitude out of range: {longitude}")
        return ForecastKey(
            latitude=float(latitude),
            longitude=float(longitude),
            timezone=timezone or AUTO_TIMEZONE,
            days=days,
        )

    async def _batch_get_cities(self, names: list[str]) -> list[list[City]]:
        raw = await asyncio.gather(
            *(
                self.client.search_cities(
                    name, count=self.suggestion_count, language=self.language
                )
                for name in names
            )
        )
        return [[_parse_city(r) for r in results] for results in raw]

    async def _batch_get_forecasts(
        self, keys: list[ForecastKey]
    ) -> list[ForecastResult]:
        raw = await asyncio.gather(
            *(
                self.client.get_forecast(k.latitude, k.longitude, k.timezone, k.days)
                for k in keys
            )
        )
        return [normalize_forecast(data, key.days) for data, key in zip(raw, keys)]


def _parse_city(raw: dict) -> City:
    try:
        return City(
            id=int(raw["id"]),
            name=str(raw["name"]),
            latitude=float(raw["latitude"]),
            longitude=float(raw["longitude"]),
            country=str(raw.get("country") or ""),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError(f"Malformed geocoding result: {raw!r}") from e


def normalize_forecast(raw: dict, days: int) -> ForecastResult:
    """Transpose the provider's parallel daily arrays into per-day records.

    Index i of every column belongs to ``daily.time[i]``. The result must
    hold exactly ``days`` consecutive dates.
    """
    daily = raw.get("daily")
    units = raw.get("daily_units")
    if not isinstance(daily, dict) or not isinstance(units, dict):
        raise ProviderError("Forecast response is missing daily data or units")

    dates = daily.get("time")
    if not isinstance(dates, list):
        raise ProviderError("Forecast response is missing daily.time")
    if len(dates) != days:
        raise ProviderError(
            f"Forecast returned {len(dates)} days, expected {days}"
        )

    columns: dict[str, list] = {}
    for field, column in COLUMNS.items():
        values = daily.get(column)
        if not isinstance(values, list) or len(values) != len(dates):
            raise ProviderError(f"Forecast column {column} is missing or misaligned")
        if any(v is None for v in values):
            raise ProviderError(f"Forecast column {column} contains null values")
        columns[field] = values

    _check_consecutive(dates)

    try:
        rows = tuple(
            DailyWeather(
                date=day,
                temp_max=float(columns["temp_max"][i]),
                temp_min=float(columns["temp_min"][i]),
                precipitation=float(columns["precipitation"][i]),
                wind_speed=float(columns["wind_speed"][i]),
                weather_code=_weather_code(columns["weather_code"][i]),
            )
            for i, day in enumerate(dates)
        )
    except (TypeError, ValueError) as e:
        raise ProviderError(f"Forecast contains a non-numeric value: {e}") from e

    try:
        forecast_units = ForecastUnits(
            temp=units[COLUMNS["temp_max"]],
            precipitation=units[COLUMNS["precipitation"]],
            wind_speed=units[COLUMNS["wind_speed"]],
        )
    except KeyError as e:
        raise ProviderError(f"Forecast units missing {e.args[0]}") from e

    return ForecastResult(daily=rows, units=forecast_units)


def to_columns(result: ForecastResult) -> dict[str, list]:
    """Flatten a ForecastResult back into provider-style daily columns."""
    columns: dict[str, list] = {"time": [d.date for d in result.daily]}
    for field, column in COLUMNS.items():
        columns[column] = [getattr(d, field) for d in result.daily]
    return columns


def _weather_code(value) -> int:
    code = int(value)
    if code != value:
        raise ValueError(f"weather code {value!r} is not an integer")
    return code


def _check_consecutive(dates: list) -> None:
    try:
        parsed = [date.fromisoformat(d) for d in dates]
    except (TypeError, ValueError) as e:
        raise ProviderError(f"Forecast contains an invalid date: {e}") from e
    for prev, cur in zip(parsed, parsed[1:]):
        if cur - prev != timedelta(days=1):
            raise ProviderError(
                f"Forecast dates are not consecutive: {prev} -> {cur}"
            )
