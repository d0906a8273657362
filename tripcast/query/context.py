"""Per-request scope: one HTTP client, one gateway and one facade per query."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from tripcast.config.schema import TripcastConfig
from tripcast.ingest.forecast_gateway import ForecastGateway
from tripcast.ingest.open_meteo_client import OpenMeteoClient
from tripcast.query.facade import QueryFacade


def build_facade(config: TripcastConfig, client: OpenMeteoClient) -> QueryFacade:
    gateway = ForecastGateway(
        client,
        suggestion_count=config.search.suggestion_count,
        language=config.search.language,
        max_days=config.forecast.max_days,
        max_batch_size=config.loader.max_batch_size,
    )
    return QueryFacade(
        gateway,
        min_query_length=config.search.min_query_length,
        default_days=config.forecast.default_days,
        default_timezone=config.forecast.default_timezone,
        activity_window_days=config.forecast.activity_window_days,
    )


@asynccontextmanager
async def request_scope(config: TripcastConfig) -> AsyncIterator[QueryFacade]:
    """Yield a facade whose loaders live only as long as this request."""
    client = OpenMeteoClient(
        forecast_base_url=config.provider.forecast_base_url,
        geocoding_base_url=config.provider.geocoding_base_url,
        user_agent=config.provider.user_agent,
        timeout=config.provider.timeout_seconds,
    )
    try:
        yield build_facade(config, client)
    finally:
        await client.aclose()
