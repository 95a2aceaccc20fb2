# ABOUTME: Public API of the forecasttools package.
# ABOUTME: Re-exports the Forecast client, query and result types, and the dispatcher.

from forecasttools.deps import HttpCapabilities, ResponseCache
from forecasttools.dispatcher import ConcurrentDispatcher, Strategy
from forecasttools.errors import ForecastError, ForecastInputError
from forecasttools.forecast import Forecast
from forecasttools.models import Failure, FailureKind, ForecastPayload, Query
from forecasttools.response import ForecastResponse

__all__ = [
    "ConcurrentDispatcher",
    "Failure",
    "FailureKind",
    "Forecast",
    "ForecastError",
    "ForecastInputError",
    "ForecastPayload",
    "ForecastResponse",
    "HttpCapabilities",
    "Query",
    "ResponseCache",
    "Strategy",
]
