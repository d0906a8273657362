"""Error taxonomy shared by the gateway, loader and query layers."""


class TripcastError(Exception):
    """Base class for all errors raised by tripcast."""


class ProviderError(TripcastError):
    """Raised when the weather provider fails or returns malformed data."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(TripcastError, ValueError):
    """Raised for malformed or missing input, before any provider call."""


class DateNotFoundError(TripcastError, LookupError):
    """Raised when a requested date is outside the fetched forecast window."""

    def __init__(self, requested_date: str, available_dates: list[str]):
        window = (
            f"{available_dates[0]}..{available_dates[-1]}"
            if available_dates
            else "empty forecast"
        )
        super().__init__(
            f"Date {requested_date} not in forecast range ({window})"
        )
        self.requested_date = requested_date
        self.available_dates = available_dates


class BatchLoadError(TripcastError):
    """Raised when a batch function breaks the one-result-per-key contract."""
