# ABOUTME: Executes an ordered batch of request URLs under a concurrency limit.
# ABOUTME: Picks a concurrent, sequential, or minimal strategy once per call and isolates per-request failures.

import asyncio
import http.client
import logging
import math
import urllib.request
from collections.abc import Iterator, Sequence
from enum import Enum

import httpx

from forecasttools.deps import HttpCapabilities
from forecasttools.models import Failure, FailureKind

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY = 10

RawOutcome = str | Failure


class Strategy(str, Enum):
    CONCURRENT = "concurrent"
    SEQUENTIAL = "sequential"
    MINIMAL = "minimal"


def select_strategy(concurrency: int, capabilities: HttpCapabilities) -> Strategy:
    """Choose the execution strategy for one dispatch call."""
    if concurrency > 1 and capabilities.async_client_factory is not None:
        return Strategy.CONCURRENT
    if capabilities.client_factory is not None:
        return Strategy.SEQUENTIAL
    return Strategy.MINIMAL


def chunked(urls: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Yield contiguous slices of at most size items; the last may be shorter."""
    for start in range(0, len(urls), size):
        yield urls[start : start + size]


def _transport_failure(index: int, url: str, exc: Exception) -> Failure:
    logger.warning("Request %d failed (%s): %s", index, url, exc)
    return Failure(kind=FailureKind.TRANSPORT, reason=str(exc) or type(exc).__name__, url=url)


class ConcurrentDispatcher:
    """Fetches N URLs and returns N raw outcomes in input order.

    With the concurrent strategy the URLs are split into chunks of ``concurrency``. All
    requests in a chunk are in flight together and the next chunk starts only once every
    member of the current one has resolved. A failed request becomes a Failure at its own
    index; the call itself never raises for per-request problems.
    """

    def __init__(
        self,
        concurrency: int = DEFAULT_CONCURRENCY,
        capabilities: HttpCapabilities | None = None,
        strategy: Strategy | None = None,
    ):
        if concurrency < 1:
            raise ValueError(f"concurrency must be a positive integer, got {concurrency}")
        self.concurrency = concurrency
        self.capabilities = capabilities or HttpCapabilities()
        if strategy is not None:
            self._check_available(strategy)
        self.strategy = strategy

    def _check_available(self, strategy: Strategy) -> None:
        if strategy is Strategy.CONCURRENT and self.capabilities.async_client_factory is None:
            raise ValueError("concurrent strategy needs an async client factory")
        if strategy is Strategy.SEQUENTIAL and self.capabilities.client_factory is None:
            raise ValueError("sequential strategy needs a client factory")

    def _chunk_size(self, concurrency: int | None) -> int:
        if concurrency is None:
            return self.concurrency
        if concurrency < 1:
            raise ValueError(f"concurrency must be a positive integer, got {concurrency}")
        return concurrency

    def resolve_strategy(self, concurrency: int | None = None) -> Strategy:
        """Return the strategy a dispatch with the given concurrency would use."""
        if self.strategy is not None:
            return self.strategy
        return select_strategy(concurrency or self.concurrency, self.capabilities)

    def dispatch(self, urls: Sequence[str], concurrency: int | None = None) -> list[RawOutcome]:
        """Fetch every URL, blocking until all outcomes are known.

        Must not be called from inside a running event loop when the concurrent strategy is
        selected; use dispatch_async there.
        """
        if not urls:
            return []
        size = self._chunk_size(concurrency)
        strategy = self.resolve_strategy(size)
        logger.debug("Dispatching %d requests with %s strategy", len(urls), strategy.value)

        if strategy is Strategy.CONCURRENT:
            return asyncio.run(self._run_concurrent(urls, size))
        return self._run_blocking(strategy, urls)

    async def dispatch_async(self, urls: Sequence[str], concurrency: int | None = None) -> list[RawOutcome]:
        """Awaitable twin of dispatch for callers already inside an event loop."""
        if not urls:
            return []
        size = self._chunk_size(concurrency)
        strategy = self.resolve_strategy(size)
        logger.debug("Dispatching %d requests with %s strategy", len(urls), strategy.value)

        if strategy is Strategy.CONCURRENT:
            return await self._run_concurrent(urls, size)
        return await asyncio.to_thread(self._run_blocking, strategy, urls)

    async def _run_concurrent(self, urls: Sequence[str], size: int) -> list[RawOutcome]:
        outcomes: list[RawOutcome] = []
        total = math.ceil(len(urls) / size)
        async with self.capabilities.async_client_factory() as client:
            for number, chunk in enumerate(chunked(urls, size)):
                offset = number * size
                logger.debug("Chunk %d/%d: %d requests", number + 1, total, len(chunk))
                results = await asyncio.gather(
                    *(self._fetch_async(client, offset + i, url) for i, url in enumerate(chunk))
                )
                outcomes.extend(results)
        return outcomes

    async def _fetch_async(self, client: httpx.AsyncClient, index: int, url: str) -> RawOutcome:
        try:
            resp = await client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            return _transport_failure(index, url, e)
        return resp.text

    def _run_blocking(self, strategy: Strategy, urls: Sequence[str]) -> list[RawOutcome]:
        if strategy is Strategy.SEQUENTIAL:
            with self.capabilities.client_factory() as client:
                return [self._fetch_sync(client, i, url) for i, url in enumerate(urls)]
        return [self._fetch_minimal(i, url) for i, url in enumerate(urls)]

    def _fetch_sync(self, client: httpx.Client, index: int, url: str) -> RawOutcome:
        try:
            resp = client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            return _transport_failure(index, url, e)
        return resp.text

    def _fetch_minimal(self, index: int, url: str) -> RawOutcome:
        cache = self.capabilities.cache
        if cache is not None:
            try:
                return cache.fetch(url)
            except Exception as e:
                # Opaque collaborator: any error it raises fails only this index
                return _transport_failure(index, url, e)
        try:
            with urllib.request.urlopen(url) as resp:
                return resp.read().decode("utf-8")
        except (OSError, ValueError, http.client.HTTPException) as e:
            return _transport_failure(index, url, e)
