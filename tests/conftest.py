"""Shared fixtures: element factories and a fake Overpass fetcher."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from modules.osm_features import OverpassElement


def node(tags: Optional[dict[str, str]] = None) -> OverpassElement:
    return OverpassElement(type="node", tags=tags)


def way(tags: Optional[dict[str, str]], coords: list[tuple[float, float]]) -> OverpassElement:
    return OverpassElement.model_validate(
        {
            "type": "way",
            "tags": tags,
            "geometry": [{"lat": lat, "lon": lon} for lat, lon in coords],
        }
    )


class FakeFetcher:
    """Async stand-in for the Overpass client; records every query."""

    def __init__(self, elements: Optional[list[OverpassElement]] = None, error: Optional[Exception] = None):
        self.elements = elements
        self.error = error
        self.queries: list[str] = []

    async def __call__(self, query: str) -> list[OverpassElement]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.elements or [])


@pytest.fixture
def fake_fetcher():
    def _make(elements=None, error=None) -> FakeFetcher:
        return FakeFetcher(elements, error)

    return _make


@pytest.fixture
def city_block_elements() -> list[OverpassElement]:
    """A small mixed neighbourhood: amenities, one road, a few stops."""
    return [
        node({"amenity": "hospital", "name": "St. Mary"}),
        node({"amenity": "pharmacy"}),
        node({"amenity": "police"}),
        node({"amenity": "fire_station"}),
        node({"amenity": "school"}),
        node({"amenity": "school"}),
        way({"leisure": "park"}, [(0.01, 0.01), (0.01, 0.02), (0.02, 0.02), (0.01, 0.01)]),
        way({"highway": "residential"}, [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01)]),
        node({"highway": "bus_stop"}),
        node({"railway": "halt"}),
        node(None),
    ]


def overpass_payload(elements: list[dict[str, Any]]) -> dict[str, Any]:
    return {"version": 0.6, "generator": "Overpass API", "elements": elements}
