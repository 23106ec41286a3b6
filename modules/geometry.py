"""
Geometry helpers — bounding boxes, flat-earth area, haversine lengths.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from modules.errors import InvalidBounds

EARTH_RADIUS_KM = 6371.0
KM_PER_DEG_LAT = 111.32

BBox = tuple[float, float, float, float]


def round_half_away(value: float, scale: float = 1.0) -> float:
    """Round ``value * scale`` half away from zero, then divide by ``scale``.

    ``round()`` would use banker's rounding; ``Decimal(float)`` is exact so
    ties are decided on the true binary value.
    """
    scaled = Decimal(value * scale).to_integral_value(rounding=ROUND_HALF_UP)
    return float(scaled) / scale


def normalize_bounds(bounds: Sequence[Sequence[float]]) -> BBox:
    """Return ``(min_lat, min_lng, max_lat, max_lng)`` from two ``[lat, lng]`` corners."""
    if bounds is None or len(bounds) != 2:
        raise InvalidBounds("Invalid bounds: expected exactly two corners")
    for corner in bounds:
        if corner is None or len(corner) != 2:
            raise InvalidBounds("Invalid bounds: each corner needs [lat, lng]")
        if not all(math.isfinite(c) for c in corner):
            raise InvalidBounds("Invalid bounds: coordinates must be finite numbers")

    (lat1, lng1), (lat2, lng2) = bounds
    return (min(lat1, lat2), min(lng1, lng2), max(lat1, lat2), max(lng1, lng2))


def approximate_area_km2(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Rectangle-on-a-plane area of the box in km², 2 decimals.

    1° latitude is taken as 111.32 km; 1° longitude shrinks with the cosine
    of the mean latitude. Good enough for city-scale boxes.
    """
    mean_lat_rad = math.radians((lat1 + lat2) / 2.0)
    km_per_deg_lng = KM_PER_DEG_LAT * math.cos(mean_lat_rad)

    lat_km = abs(lat1 - lat2) * KM_PER_DEG_LAT
    lng_km = abs(lng1 - lng2) * km_per_deg_lng
    return round_half_away(lat_km * lng_km, 100)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def polyline_length_km(points: Iterable[tuple[float, float]]) -> float:
    """Sum of great-circle lengths between consecutive ``(lat, lon)`` vertices."""
    total = 0.0
    prev = None
    for point in points:
        if prev is not None:
            total += haversine_km(prev[0], prev[1], point[0], point[1])
        prev = point
    return total


def bbox_string(bbox: BBox) -> str:
    """Overpass bbox order: ``south,west,north,east``."""
    min_lat, min_lng, max_lat, max_lng = bbox
    return f"{min_lat},{min_lng},{max_lat},{max_lng}"


def bbox_center(bbox: BBox) -> tuple[float, float]:
    min_lat, min_lng, max_lat, max_lng = bbox
    # Halve before adding so huge out-of-range corners cannot overflow.
    return (min_lat / 2.0 + max_lat / 2.0, min_lng / 2.0 + max_lng / 2.0)


def is_within_wgs84(bbox: BBox) -> bool:
    min_lat, min_lng, max_lat, max_lng = bbox
    return -90.0 <= min_lat and max_lat <= 90.0 and -180.0 <= min_lng and max_lng <= 180.0
