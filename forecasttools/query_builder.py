# ABOUTME: Builds forecast endpoint URLs from validated Query values.
# ABOUTME: Encodes coordinates and optional time in the path, modifiers in the query string.

import httpx

from forecasttools.models import Query

API_URL = "https://api.forecast.io/forecast/"


def build_url(query: Query, api_key: str, base_url: str = API_URL) -> str:
    """Return the request URL for one query.

    Time, when set, becomes the third comma-separated path segment. Modifiers that were
    not supplied are left out entirely, so a bare query has no query string at all.
    """
    location = f"{query.latitude},{query.longitude}"
    if query.time is not None:
        location += f",{query.time}"

    url = f"{base_url.rstrip('/')}/{api_key}/{location}"

    modifiers = query.modifiers()
    if modifiers:
        url += f"?{httpx.QueryParams(modifiers)}"
    return url


def build_urls(queries: list[Query], api_key: str, base_url: str = API_URL) -> list[str]:
    """Build one URL per query, preserving order."""
    return [build_url(q, api_key, base_url) for q in queries]
