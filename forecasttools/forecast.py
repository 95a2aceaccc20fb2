# ABOUTME: Facade that turns caller queries into forecast responses.
# ABOUTME: Normalizes single or batch input, builds URLs, dispatches once, decodes, and reshapes results.

import logging
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from pydantic import ValidationError

from forecasttools.config import ForecastSettings
from forecasttools.decoder import decode
from forecasttools.deps import HttpCapabilities
from forecasttools.dispatcher import DEFAULT_CONCURRENCY, ConcurrentDispatcher, RawOutcome
from forecasttools.errors import ForecastInputError
from forecasttools.models import Failure, Query
from forecasttools.query_builder import API_URL, build_urls
from forecasttools.response import ForecastResponse

logger = logging.getLogger(__name__)

Result = ForecastResponse | Failure

# Order of the optional positional arguments accepted after latitude and longitude.
_POSITIONAL_FIELDS = ("time", "units", "exclude", "extend", "callback")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _to_query(item: Any) -> Query:
    if isinstance(item, Query):
        return item
    if not isinstance(item, Mapping):
        raise ForecastInputError(f"Expected a Query or a mapping, got {type(item).__name__}")
    try:
        return Query.model_validate(dict(item))
    except ValidationError as e:
        raise ForecastInputError(f"Invalid query: {e}") from e


def _to_batch(queries: Any) -> list[Query]:
    if not isinstance(queries, (list, tuple)):
        raise ForecastInputError(f"Expected a list of queries, got {type(queries).__name__}")
    return [_to_query(item) for item in queries]


def normalize(args: tuple) -> tuple[list[Query], bool]:
    """Turn get_data arguments into a query list and whether a list should come back.

    Accepts a single sequence of queries, a single Query, or latitude and longitude
    followed by up to five optional values (time, units, exclude, extend, callback).
    """
    if len(args) == 1 and isinstance(args[0], Query):
        return [args[0]], False

    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return _to_batch(args[0]), True

    if 2 <= len(args) <= 2 + len(_POSITIONAL_FIELDS) and _is_number(args[0]) and _is_number(args[1]):
        fields = {"latitude": args[0], "longitude": args[1]}
        for name, value in zip(_POSITIONAL_FIELDS, args[2:]):
            if value is not None:
                fields[name] = value
        return [_to_query(fields)], False

    raise ForecastInputError("get_data called with invalid parameters")


class Forecast:
    """Client for the forecast API.

    Single queries return a ForecastResponse or a Failure; batches return a list of the
    same length and order as the input. Failures are falsy, so check each item.
    """

    def __init__(
        self,
        api_key: str,
        concurrency: int = DEFAULT_CONCURRENCY,
        base_url: str = API_URL,
        dispatcher: ConcurrentDispatcher | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.dispatcher = dispatcher or ConcurrentDispatcher(concurrency=concurrency)

    @classmethod
    def from_env(cls, capabilities: HttpCapabilities | None = None) -> "Forecast":
        """Create a client configured from FORECAST_* environment variables."""
        settings = ForecastSettings.from_env()
        dispatcher = ConcurrentDispatcher(
            concurrency=settings.concurrency,
            capabilities=capabilities,
            strategy=settings.strategy,
        )
        return cls(settings.api_key, base_url=settings.api_url, dispatcher=dispatcher)

    def _urls(self, queries: list[Query]) -> list[str]:
        return build_urls(queries, self.api_key, self.base_url)

    def _wrap(self, raws: list[RawOutcome]) -> list[Result]:
        results: list[Result] = []
        for index, raw in enumerate(raws):
            decoded = decode(raw)
            if isinstance(decoded, Failure):
                logger.warning("Failed to retrieve conditions for query %d", index)
                results.append(decoded)
            else:
                results.append(ForecastResponse(decoded))
        return results

    def get_data(self, *args) -> Result | list[Result]:
        """Fetch forecasts, returning a list only when a list of queries was passed in."""
        queries, as_list = normalize(args)
        results = self._wrap(self.dispatcher.dispatch(self._urls(queries)))
        return results if as_list else results[0]

    def fetch(self, query: Query | Mapping) -> Result:
        return self.get_data(_to_query(query))

    def fetch_batch(self, queries: Sequence[Query | Mapping], concurrency: int | None = None) -> list[Result]:
        """Fetch a batch, optionally overriding the dispatcher's concurrency for this call."""
        batch = _to_batch(queries)
        return self._wrap(self.dispatcher.dispatch(self._urls(batch), concurrency))

    async def aget_data(self, *args) -> Result | list[Result]:
        queries, as_list = normalize(args)
        results = self._wrap(await self.dispatcher.dispatch_async(self._urls(queries)))
        return results if as_list else results[0]

    async def afetch(self, query: Query | Mapping) -> Result:
        return await self.aget_data(_to_query(query))

    async def afetch_batch(
        self, queries: Sequence[Query | Mapping], concurrency: int | None = None
    ) -> list[Result]:
        batch = _to_batch(queries)
        return self._wrap(await self.dispatcher.dispatch_async(self._urls(batch), concurrency))
