"""
OSM Features — category taxonomy and Overpass query construction.

The taxonomy below is the single table both the query builder and the
aggregator read from:
    hospitals      — amenity=hospital|clinic|doctors|pharmacy
    police         — amenity=police
    fire_stations  — amenity=fire_station
    schools        — amenity=school
    parks          — leisure=park
    roads          — any highway=* way (length only, never counted)
    transit_stops  — highway=bus_stop, railway=station|halt|stop,
                     public_transport=stop_position|platform
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

from modules.config import OVERPASS_TIMEOUT_S

# ------------------------------------------------------------------ #
#  Element model — what Overpass returns per matched feature          #
# ------------------------------------------------------------------ #


class GeometryNode(BaseModel):
    lat: float
    lon: float


class OverpassElement(BaseModel):
    """One Overpass element. ``geometry`` is only present for ways."""

    type: Optional[str] = None
    tags: Optional[dict[str, str]] = None
    geometry: Optional[list[GeometryNode]] = None


class OverpassResponse(BaseModel):
    elements: Optional[list[OverpassElement]] = None


# ------------------------------------------------------------------ #
#  Taxonomy                                                            #
# ------------------------------------------------------------------ #

ALL_KINDS = ("node", "way", "relation")


@dataclass(frozen=True)
class TagRule:
    """Match on one tag key; ``values=None`` accepts any value."""

    key: str
    values: Optional[tuple[str, ...]] = None

    def matches(self, tags: dict[str, str]) -> bool:
        if self.key not in tags:
            return False
        return self.values is None or tags[self.key] in self.values

    def overpass_filter(self) -> str:
        if self.values is None:
            return f'["{self.key}"]'
        if len(self.values) == 1:
            return f'["{self.key}"="{self.values[0]}"]'
        return f'["{self.key}"~"{"|".join(self.values)}"]'


@dataclass(frozen=True)
class FeatureCategory:
    name: str
    label: str
    rules: tuple[TagRule, ...]
    kinds: tuple[str, ...] = ALL_KINDS

    def matches(self, tags: dict[str, str]) -> bool:
        return any(rule.matches(tags) for rule in self.rules)


AMENITY_CATEGORIES: tuple[FeatureCategory, ...] = (
    FeatureCategory(
        "hospitals", "Healthcare",
        (TagRule("amenity", ("hospital", "clinic", "doctors", "pharmacy")),),
    ),
    FeatureCategory("police", "Police", (TagRule("amenity", ("police",)),)),
    FeatureCategory("fire_stations", "Fire", (TagRule("amenity", ("fire_station",)),)),
    FeatureCategory("schools", "Schools", (TagRule("amenity", ("school",)),)),
    FeatureCategory("parks", "Parks", (TagRule("leisure", ("park",)),)),
)

ROADS = FeatureCategory("roads", "Highways (for length)", (TagRule("highway"),), kinds=("way",))

TRANSIT_STOPS = FeatureCategory(
    "transit_stops",
    "Transit stops (bus + rail + public_transport)",
    (
        TagRule("highway", ("bus_stop",)),
        TagRule("railway", ("station", "halt", "stop")),
        TagRule("public_transport", ("stop_position", "platform")),
    ),
    kinds=("node", "way"),
)

QUERY_CATEGORIES: tuple[FeatureCategory, ...] = AMENITY_CATEGORIES + (ROADS, TRANSIT_STOPS)


# ------------------------------------------------------------------ #
#  Query builder                                                       #
# ------------------------------------------------------------------ #

def _category_statements(category: FeatureCategory, bbox: str) -> list[str]:
    lines = [f"  // {category.label}"]
    for rule in category.rules:
        for kind in category.kinds:
            lines.append(f"  {kind}{rule.overpass_filter()}({bbox});")
    return lines


def build_overpass_query(
    bbox: str,
    categories: tuple[FeatureCategory, ...] = QUERY_CATEGORIES,
    timeout_s: int = OVERPASS_TIMEOUT_S,
) -> str:
    """Build the Overpass QL union for every category inside ``bbox``.

    ``bbox`` is ``"minLat,minLng,maxLat,maxLng"``. ``out body geom`` returns
    tags plus full geometry, which the road-length sum depends on.
    """
    blocks = ["\n".join(_category_statements(c, bbox)) for c in categories]
    body = "\n\n".join(blocks)
    return f"[out:json][timeout:{timeout_s}];\n(\n{body}\n);\nout body geom;\n"
