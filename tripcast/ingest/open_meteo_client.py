"""Open-Meteo geocoding and forecast API client."""

import logging

import httpx

from tripcast.errors import ProviderError

logger = logging.getLogger(__name__)

FORECAST_BASE_URL = "https://api.open-meteo.com/v1"
GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1"
DEFAULT_USER_AGENT = "tripcast/0.1.0"

DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "precipitation_sum",
    "wind_speed_10m_max",
)


class OpenMeteoClient:
    """Async wrapper around the two Open-Meteo endpoints we use.

    No retries: failures surface as ProviderError to the caller.
    """

    def __init__(
        self,
        forecast_base_url: str = FORECAST_BASE_URL,
        geocoding_base_url: str = GEOCODING_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        http: httpx.AsyncClient | None = None,
    ):
        self.forecast_base_url = forecast_base_url.rstrip("/")
        self.geocoding_base_url = geocoding_base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(
            timeout=timeout, headers={"User-Agent": user_agent}
        )

    async def search_cities(
        self, name: str, count: int = 10, language: str = "en"
    ) -> list[dict]:
        """Search cities by name. Returns [] when the provider finds nothing."""
        url = f"{self.geocoding_base_url}/search"
        params = {"name": name, "count": count, "language": language}
        data = await self._get_json(url, params)
        # Open-Meteo omits "results" entirely when nothing matches
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ProviderError(f"Unexpected geocoding results for name={name!r}")
        return results

    async def get_forecast(
        self, latitude: float, longitude: float, timezone: str, days: int
    ) -> dict:
        """Fetch the column-oriented daily forecast for a coordinate."""
        url = f"{self.forecast_base_url}/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "daily": ",".join(DAILY_FIELDS),
            "timezone": timezone,
            "forecast_days": days,
        }
        return await self._get_json(url, params)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _get_json(self, url: str, params: dict) -> dict:
        try:
            resp = await self._http.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("Open-Meteo request failed for %s: %s", url, e)
            raise ProviderError(f"Open-Meteo request failed: {e}") from e

        if resp.is_error:
            reason = _error_reason(resp)
            logger.error(
                "Open-Meteo %s returned %d: %s", url, resp.status_code, reason
            )
            raise ProviderError(
                f"Open-Meteo returned {resp.status_code}: {reason}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Open-Meteo %s returned invalid JSON", url)
            raise ProviderError("Open-Meteo returned invalid JSON") from e
        if not isinstance(data, dict):
            raise ProviderError("Open-Meteo returned a non-object payload")
        return data


def _error_reason(resp: httpx.Response) -> str:
    """Pull the provider's {"error": true, "reason": ...} message if present."""
    try:
        body = resp.json()
    except ValueError:
        return resp.reason_phrase or "unknown error"
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return resp.reason_phrase or "unknown error"
