"""Output formatters for query results."""

import json
from dataclasses import asdict

from tripcast.models.activity import ActivityRanking
from tripcast.models.weather import City, ForecastResult
from tripcast.query.facade import WeatherReport
from tripcast.scoring.weather_codes import describe_weather_code


def format_cities_text(cities: list[City]) -> str:
    if not cities:
        return "No matching cities"
    return "\n".join(
        f"{c.name}, {c.country} ({c.latitude:.4f}, {c.longitude:.4f}) id={c.id}"
        for c in cities
    )


def format_forecast_text(result: ForecastResult) -> str:
    u = result.units
    lines = [f"=== {len(result.daily)}-Day Forecast ==="]
    for d in result.daily:
        lines.append(
            f"{d.date}: {d.temp_min}-{d.temp_max}{u.temp}, "
            f"Precip: {d.precipitation}{u.precipitation}, "
            f"Wind: {d.wind_speed}{u.wind_speed}, "
            f"{describe_weather_code(d.weather_code)}"
        )
    return "\n".join(lines)


def format_rankings_text(rankings: list[ActivityRanking]) -> str:
    lines = ["=== Activity Rankings ==="]
    for r in rankings:
        lines.append(f"{r.activity}: Score {r.score:.1f}/100 ({r.reason})")
    return "\n".join(lines)


def format_report_text(report: WeatherReport) -> str:
    return "\n".join(
        [format_forecast_text(report.forecast), format_rankings_text(report.rankings)]
    )


def cities_data(cities: list[City]) -> list[dict]:
    return [asdict(c) for c in cities]


def forecast_data(result: ForecastResult) -> dict:
    return {
        "daily": [
            {
                "date": d.date,
                "tempMax": d.temp_max,
                "tempMin": d.temp_min,
                "weatherCode": d.weather_code,
                "precipitation": d.precipitation,
                "windSpeed": d.wind_speed,
            }
            for d in result.daily
        ],
        "units": {
            "temp": result.units.temp,
            "precipitation": result.units.precipitation,
            "windSpeed": result.units.wind_speed,
        },
    }


def rankings_data(rankings: list[ActivityRanking]) -> list[dict]:
    return [
        {"activity": str(r.activity), "score": r.score, "reason": r.reason}
        for r in rankings
    ]


def to_json(data: object) -> str:
    """JSON for programmatic consumption, keyed like the query surface."""
    return json.dumps(data, indent=2)
