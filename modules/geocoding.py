"""
Place lookup — free-text search via the Nominatim HTTP API.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from modules.config import GEOSEARCH_LIMIT, HTTP_TIMEOUT_S, HTTP_USER_AGENT, NOMINATIM_SEARCH_URL
from modules.errors import UpstreamParseError, UpstreamRequestFailed, UpstreamStatusError

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> float:
    """Parse a Nominatim coordinate string, 0.0 when malformed.

    ``float()`` also accepts surrounding whitespace and digit underscores;
    those are treated as malformed here.
    """
    if isinstance(value, str) and (value != value.strip() or "_" in value):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_result(hit: dict[str, Any]) -> dict[str, Any]:
    """Nominatim hit → ``{"x": lon, "y": lat, "label": display_name}``."""
    if not isinstance(hit, dict) or not isinstance(hit.get("display_name"), str):
        raise UpstreamParseError("Nominatim JSON parse error: missing display_name")
    return {
        "x": _to_float(hit.get("lon")),
        "y": _to_float(hit.get("lat")),
        "label": hit["display_name"],
    }


async def _search(client: httpx.AsyncClient, query: str) -> list[dict[str, Any]]:
    try:
        resp = await client.get(
            NOMINATIM_SEARCH_URL,
            params={
                "format": "json",
                "q": query,
                "limit": GEOSEARCH_LIMIT,
                "addressdetails": 0,
            },
            headers={"User-Agent": HTTP_USER_AGENT},
        )
    except httpx.HTTPError as exc:
        logger.warning("Nominatim request failed for %r: %s", query, exc)
        raise UpstreamRequestFailed(f"Nominatim request error: {exc}") from exc

    if not resp.is_success:
        logger.warning("Nominatim returned status %s for %r", resp.status_code, query)
        raise UpstreamStatusError("Nominatim", resp.status_code)

    try:
        hits = resp.json()
    except ValueError as exc:
        raise UpstreamParseError(f"Nominatim JSON parse error: {exc}") from exc
    if not isinstance(hits, list):
        raise UpstreamParseError("Nominatim JSON parse error: expected a list")

    results = [_to_result(hit) for hit in hits[:GEOSEARCH_LIMIT]]
    logger.info("Geosearch %r -> %d results", query, len(results))
    return results


async def search_places(
    query: str,
    client: Optional[httpx.AsyncClient] = None,
) -> list[dict[str, Any]]:
    """Forward-geocode ``query``; returns at most ``GEOSEARCH_LIMIT`` hits.

    Blank input returns ``[]`` without touching the network. Unparseable
    ``lat``/``lon`` strings in a hit become ``0.0``.
    """
    if not query or not query.strip():
        return []

    if client is not None:
        return await _search(client, query)

    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_S) as own_client:
        return await _search(own_client, query)
