"""
Region Analyzer — bounding box in, infrastructure report out.

Pipeline:
  1. Normalize the two corners and compute the flat-earth area
  2. Build the Overpass query for the fixed category taxonomy
  3. Fetch elements (the only network call)
  4. Aggregate into counts / road length / transit stops
  5. Derive population, infrastructure score and transport metrics

Usage:
    import asyncio
    from modules.region_analyzer import analyze_region

    report = asyncio.run(analyze_region([[52.50, 13.38], [52.52, 13.41]]))
    print(report["area"], report["infra_score"])
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from modules.aggregator import aggregate_elements
from modules.errors import InvalidBounds
from modules.geometry import (
    approximate_area_km2,
    bbox_center,
    bbox_string,
    is_within_wgs84,
    normalize_bounds,
)
from modules.metrics import (
    estimate_population,
    infrastructure_rating,
    infrastructure_score,
    population_is_representable,
    transport_metrics,
)
from modules.osm_features import build_overpass_query
from modules.overpass import ElementFetcher, fetch_overpass_elements

logger = logging.getLogger(__name__)


async def analyze_region(
    bounds: Sequence[Sequence[float]],
    fetch_elements: Optional[ElementFetcher] = None,
) -> dict[str, Any]:
    """Analyze the box spanned by ``bounds = [[lat1, lng1], [lat2, lng2]]``.

    Args:
        bounds: Two ``[lat, lng]`` corners in any order.
        fetch_elements: Async callable taking an Overpass QL string. Defaults
            to the live Overpass API.

    Returns:
        A dict matching the ``RegionReport`` contract::

            {
                "area": float,                  # km², 2 decimals
                "center": {"lat", "lng"},
                "amenities": {"hospitals", "police", "fire_stations",
                              "schools", "parks"},
                "population_data": {"current", "growth_rate",
                                    "projected5_year", "projected10_year"},
                "infra_score": int,             # 0..100
                "infra_rating": str,            # good / moderate / poor
                "transport": {"road_km_total", "road_density_km_per_km2",
                              "transit_stops"},
            }

    Raises:
        InvalidBounds: malformed corner input, non-finite coordinates, or
            an area too large for the population projections.
        UpstreamRequestFailed, UpstreamStatusError, UpstreamParseError:
            Overpass could not be queried; no partial report is produced.
    """
    bbox = normalize_bounds(bounds)
    if not is_within_wgs84(bbox):
        # Accepted as-is; the area formula just yields a meaningless number.
        logger.warning("Bounds outside WGS84 range: %s", bbox)

    (lat1, lng1), (lat2, lng2) = bounds
    area = approximate_area_km2(lat1, lng1, lat2, lng2)
    if not population_is_representable(area):
        raise InvalidBounds(f"Invalid bounds: area {area} km² is too large to analyze")

    query = build_overpass_query(bbox_string(bbox))
    fetch = fetch_elements or fetch_overpass_elements
    elements = await fetch(query)

    agg = aggregate_elements(elements)
    logger.info(
        "Region %s: %.2f km², %d elements (%d tagged), %.2f km of road",
        bbox_string(bbox), area, agg.elements_seen, agg.elements_tagged, agg.road_km,
    )

    score = infrastructure_score(agg.counts, area)
    center_lat, center_lng = bbox_center(bbox)

    return {
        "area": area,
        "center": {"lat": center_lat, "lng": center_lng},
        "amenities": {
            "hospitals": agg.count("hospitals"),
            "police": agg.count("police"),
            "fire_stations": agg.count("fire_stations"),
            "schools": agg.count("schools"),
            "parks": agg.count("parks"),
        },
        "population_data": estimate_population(area),
        "infra_score": score,
        "infra_rating": infrastructure_rating(score),
        "transport": transport_metrics(agg.road_km, agg.transit_stops, area),
    }
