# ABOUTME: Exceptions raised across the forecast client's call boundary.
# ABOUTME: Only input-shape problems are raised; per-request failures travel as Failure sentinels.


class ForecastError(Exception):
    """Base class for errors raised by forecasttools."""


class ForecastInputError(ForecastError, ValueError):
    """Caller supplied neither a valid single query nor a valid query collection."""
