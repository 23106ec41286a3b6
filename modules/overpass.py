"""
Overpass API client — the only network call in the region pipeline.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

import httpx
from pydantic import ValidationError

from modules.config import HTTP_TIMEOUT_S, HTTP_USER_AGENT, OVERPASS_URL
from modules.errors import UpstreamParseError, UpstreamRequestFailed, UpstreamStatusError
from modules.osm_features import OverpassElement, OverpassResponse

logger = logging.getLogger(__name__)

# Anything that turns an Overpass QL string into elements; tests swap in fakes.
ElementFetcher = Callable[[str], Awaitable[list[OverpassElement]]]


async def _post_query(client: httpx.AsyncClient, query: str) -> list[OverpassElement]:
    try:
        resp = await client.post(
            OVERPASS_URL,
            content=query.encode("utf-8"),
            headers={"User-Agent": HTTP_USER_AGENT},
        )
    except httpx.HTTPError as exc:
        logger.warning("Overpass request failed: %s", exc)
        raise UpstreamRequestFailed(f"Overpass request error: {exc}") from exc

    if not resp.is_success:
        logger.warning("Overpass returned status %s", resp.status_code)
        raise UpstreamStatusError("Overpass", resp.status_code)

    try:
        data = OverpassResponse.model_validate_json(resp.content)
    except ValidationError as exc:
        raise UpstreamParseError(f"Overpass JSON parse error: {exc}") from exc

    return data.elements or []


async def fetch_overpass_elements(
    query: str,
    client: Optional[httpx.AsyncClient] = None,
) -> list[OverpassElement]:
    """POST ``query`` to Overpass and return its ``elements`` (possibly empty).

    Raises:
        UpstreamRequestFailed: connection / timeout problems.
        UpstreamStatusError: any non-2xx response.
        UpstreamParseError: body is not the expected JSON shape.
    """
    if client is not None:
        return await _post_query(client, query)

    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_S) as own_client:
        return await _post_query(own_client, query)
