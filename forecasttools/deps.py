# ABOUTME: HTTP capabilities injected into the dispatcher using a Pydantic BaseModel.
# ABOUTME: Holds the httpx client factories and the optional response cache consulted by the minimal strategy.

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, ConfigDict


@runtime_checkable
class ResponseCache(Protocol):
    """Given a URL, return a cached body or perform a live fetch and return that."""

    def fetch(self, url: str) -> str: ...


def create_async_client() -> httpx.AsyncClient:
    """Create an httpx async client for issuing a chunk of simultaneous requests."""
    return httpx.AsyncClient(follow_redirects=True)


def create_client() -> httpx.Client:
    """Create a blocking httpx client for one-at-a-time requests."""
    return httpx.Client(follow_redirects=True)


class HttpCapabilities(BaseModel):
    """What the runtime can use to reach the forecast API.

    A factory set to None means that capability is unavailable; the dispatcher falls back
    to the next strategy. Each dispatch call opens its own client and closes it afterwards.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    async_client_factory: Callable[[], httpx.AsyncClient] | None = create_async_client
    client_factory: Callable[[], httpx.Client] | None = create_client
    cache: ResponseCache | None = None
