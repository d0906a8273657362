"""Common types and helpers shared across models."""

from datetime import UTC, datetime, timedelta

# Open-Meteo resolves the timezone from the coordinates when given "auto".
AUTO_TIMEZONE = "auto"


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_tomorrow_iso() -> str:
    """Tomorrow's calendar date on the server clock, as YYYY-MM-DD."""
    return (utc_now() + timedelta(days=1)).date().isoformat()
