"""CLI entry point for trip weather and activity queries."""

import argparse
import asyncio
import logging

from tripcast.config.loader import get_config_value, load_config
from tripcast.config.schema import TripcastConfig
from tripcast.errors import TripcastError
from tripcast.query.context import request_scope
from tripcast.reporting import formatters

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tripcast",
        description="City weather forecasts and activity rankings",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    sub = parser.add_subparsers(dest="command")

    # suggest
    suggest_p = sub.add_parser("suggest", help="Suggest cities by name")
    suggest_p.add_argument("name", help="City name or prefix")

    # forecast
    forecast_p = sub.add_parser("forecast", help="Daily forecast for a location")
    _add_location_args(forecast_p)
    forecast_p.add_argument("--days", type=int, default=None, help="Days to fetch")

    # activities / report
    activities_p = sub.add_parser("activities", help="Rank activities for a date")
    _add_location_args(activities_p)
    activities_p.add_argument("--date", default=None, help="YYYY-MM-DD (default: tomorrow)")
    report_p = sub.add_parser("report", help="Forecast plus activity rankings")
    _add_location_args(report_p)
    report_p.add_argument("--date", default=None, help="YYYY-MM-DD (default: tomorrow)")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Show one config value")
    get_p.add_argument("key", help="Dotted key, e.g. search.min_query_length")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)
    _setup_logging(config)

    if args.command == "config":
        return _cmd_config(config, args)
    try:
        return asyncio.run(_run_query(config, args))
    except TripcastError as e:
        print(f"Error: {e}")
        return 1


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lat", type=float, required=True, help="Latitude")
    p.add_argument("--lon", type=float, required=True, help="Longitude")
    p.add_argument("--timezone", default=None, help="IANA timezone (default: auto)")


def _setup_logging(config: TripcastConfig) -> None:
    logging.basicConfig(level=config.logging.level.upper(), format=LOG_FORMAT)
    if config.logging.file:
        file_handler = logging.FileHandler(config.logging.file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(file_handler)


async def _run_query(config: TripcastConfig, args) -> int:
    async with request_scope(config) as facade:
        if args.command == "suggest":
            cities = await facade.city_suggestions(args.name)
            text = formatters.format_cities_text(cities)
            data = formatters.cities_data(cities)
        elif args.command == "forecast":
            result = await facade.forecast(args.lat, args.lon, args.timezone, args.days)
            text = formatters.format_forecast_text(result)
            data = formatters.forecast_data(result)
        elif args.command == "activities":
            rankings = await facade.activity_rankings(
                args.lat, args.lon, args.timezone, args.date
            )
            text = formatters.format_rankings_text(rankings)
            data = formatters.rankings_data(rankings)
        else:
            report = await facade.weather_and_activities(
                args.lat, args.lon, args.timezone, args.date
            )
            text = formatters.format_report_text(report)
            data = {
                "weatherForecast": formatters.forecast_data(report.forecast),
                "activityRankings": formatters.rankings_data(report.rankings),
            }
    print(formatters.to_json(data) if args.json else text)
    return 0


def _cmd_config(config: TripcastConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key.strip()))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get KEY")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
