"""
Result aggregation — raw Overpass elements → amenity counts, road length,
transit stop count.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from modules.geometry import polyline_length_km
from modules.osm_features import (
    AMENITY_CATEGORIES,
    ROADS,
    TRANSIT_STOPS,
    FeatureCategory,
    OverpassElement,
)


@dataclass(frozen=True)
class AggregateResult:
    counts: Mapping[str, int]
    road_km: float = 0.0  # unrounded running total
    transit_stops: int = 0
    elements_seen: int = 0
    elements_tagged: int = 0

    def count(self, category: str) -> int:
        return self.counts.get(category, 0)


@dataclass
class _Tally:
    counts: dict[str, int] = field(default_factory=dict)
    road_km: float = 0.0
    transit_stops: int = 0
    seen: int = 0
    tagged: int = 0

    def freeze(self) -> AggregateResult:
        return AggregateResult(
            counts=MappingProxyType(dict(self.counts)),
            road_km=self.road_km,
            transit_stops=self.transit_stops,
            elements_seen=self.seen,
            elements_tagged=self.tagged,
        )


def _road_length_km(element: OverpassElement) -> float:
    geom = element.geometry
    if not geom or len(geom) < 2:
        return 0.0
    return polyline_length_km((node.lat, node.lon) for node in geom)


def aggregate_elements(
    elements: Optional[Iterable[OverpassElement]],
    categories: tuple[FeatureCategory, ...] = AMENITY_CATEGORIES,
) -> AggregateResult:
    """Fold the element list into counts and lengths.

    Untagged elements are skipped entirely. An element can land in several
    amenity categories if it carries several matching keys (e.g. ``amenity``
    and ``leisure``) but is counted at most once as a transit stop.
    """
    tally = _Tally(counts={c.name: 0 for c in categories})

    for element in elements or ():
        tally.seen += 1
        tags = element.tags
        if tags is None:
            continue
        tally.tagged += 1

        for category in categories:
            if category.matches(tags):
                tally.counts[category.name] += 1

        if ROADS.matches(tags):
            tally.road_km += _road_length_km(element)

        if TRANSIT_STOPS.matches(tags):
            tally.transit_stops += 1

    return tally.freeze()
