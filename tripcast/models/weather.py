"""Geocoding and daily forecast value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class City:
    id: int
    name: str
    latitude: float
    longitude: float
    country: str


@dataclass(frozen=True)
class DailyWeather:
    date: str  # YYYY-MM-DD
    temp_max: float
    temp_min: float
    precipitation: float
    wind_speed: float
    weather_code: int


@dataclass(frozen=True)
class ForecastUnits:
    temp: str
    precipitation: str
    wind_speed: str


@dataclass(frozen=True)
class ForecastResult:
    daily: tuple[DailyWeather, ...]  # chronological, one entry per day
    units: ForecastUnits

    @property
    def dates(self) -> list[str]:
        return [d.date for d in self.daily]

    def find_day(self, date: str) -> DailyWeather | None:
        """Return the day whose date string equals ``date`` exactly."""
        for day in self.daily:
            if day.date == date:
                return day
        return None


@dataclass(frozen=True)
class ForecastKey:
    """Everything that determines one forecast fetch; compared by value."""

    latitude: float
    longitude: float
    timezone: str
    days: int
