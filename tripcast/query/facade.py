"""Query facade: the three read-only queries plus the combined report."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date as date_type

from tripcast.errors import DateNotFoundError, ValidationError
from tripcast.ingest.forecast_gateway import ForecastGateway
from tripcast.models.activity import ActivityRanking
from tripcast.models.common import AUTO_TIMEZONE, utc_tomorrow_iso
from tripcast.models.weather import City, ForecastResult
from tripcast.scoring import activity_scorer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherReport:
    forecast: ForecastResult
    rankings: list[ActivityRanking]


class QueryFacade:
    def __init__(
        self,
        gateway: ForecastGateway,
        min_query_length: int = 2,
        default_days: int = 7,
        default_timezone: str = AUTO_TIMEZONE,
        activity_window_days: int = 7,
        tomorrow: Callable[[], str] = utc_tomorrow_iso,
    ):
        self.gateway = gateway
        self.min_query_length = min_query_length
        self.default_days = default_days
        self.default_timezone = default_timezone
        self.activity_window_days = activity_window_days
        self._tomorrow = tomorrow

    async def city_suggestions(self, name: str) -> list[City]:
        """Cities matching ``name``; too-short names never reach the provider."""
        name = (name or "").strip()
        if len(name) < self.min_query_length:
            return []
        return await self.gateway.city_suggestions(name)

    async def forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str | None = None,
        days: int | None = None,
    ) -> ForecastResult:
        return await self.gateway.forecast(
            latitude,
            longitude,
            timezone or self.default_timezone,
            self.default_days if days is None else days,
        )

    async def activity_rankings(
        self,
        latitude: float,
        longitude: float,
        timezone: str | None = None,
        date: str | None = None,
    ) -> list[ActivityRanking]:
        """Rank activities for ``date`` (default: tomorrow on the server clock)."""
        target = _check_date(date) if date else self._tomorrow()
        result = await self.gateway.forecast(
            latitude,
            longitude,
            timezone or self.default_timezone,
            self.activity_window_days,
        )
        day = result.find_day(target)
        if day is None:
            logger.warning(
                "Date %s not in forecast window for (%s, %s)",
                target, latitude, longitude,
            )
            raise DateNotFoundError(target, result.dates)
        return activity_scorer.score(day)

    async def weather_and_activities(
        self,
        latitude: float,
        longitude: float,
        timezone: str | None = None,
        date: str | None = None,
    ) -> WeatherReport:
        """Run the forecast and ranking queries together.

        Both resolve through the same forecast loader, so when the window
        sizes match the provider is called once.
        """
        forecast, rankings = await asyncio.gather(
            self.forecast(latitude, longitude, timezone, self.activity_window_days),
            self.activity_rankings(latitude, longitude, timezone, date),
        )
        return WeatherReport(forecast=forecast, rankings=rankings)


def _check_date(value: str) -> str:
    """Require a canonical YYYY-MM-DD string; matching is by string equality."""
    try:
        parsed = date_type.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"date must be YYYY-MM-DD, got {value!r}") from e
    if parsed.isoformat() != value:
        raise ValidationError(f"date must be YYYY-MM-DD, got {value!r}")
    return value
