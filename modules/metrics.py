"""
Metric derivation — population, infrastructure score, transport summary.

All formulas are pure functions of the aggregate counts and the area, and
every rounding step is half-away-from-zero.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from modules.geometry import round_half_away

# Urban density assumption and annual growth (percent).
PEOPLE_PER_KM2 = 2500
GROWTH_RATE_PCT = 2.5
PROJECTION_YEARS = (5, 10)

# Ideal facility count per 10 km². Parks are tracked but not scored.
IDEAL_PER_UNIT: dict[str, float] = {
    "hospitals": 2.0,
    "police": 1.0,
    "fire_stations": 1.0,
    "schools": 5.0,
}
AREA_UNIT_KM2 = 10.0

RATING_BANDS = ((70, "good"), (40, "moderate"))


def estimate_population(area_km2: float) -> dict[str, Any]:
    current = int(round_half_away(area_km2 * PEOPLE_PER_KM2))
    factor = 1.0 + GROWTH_RATE_PCT / 100.0
    projected = {
        years: int(round_half_away(current * factor ** years))
        for years in PROJECTION_YEARS
    }
    return {
        "current": current,
        "growth_rate": GROWTH_RATE_PCT,
        "projected5_year": projected[5],
        "projected10_year": projected[10],
    }


def population_is_representable(area_km2: float) -> bool:
    """False when the area is so large (or NaN) that the projections overflow."""
    factor = 1.0 + GROWTH_RATE_PCT / 100.0
    return math.isfinite(area_km2 * PEOPLE_PER_KM2 * factor ** max(PROJECTION_YEARS))


def category_score(count: int, ideal: float, normalized_area: float) -> float:
    if normalized_area <= 0:
        return 0.0
    return min(100.0, (count / (ideal * normalized_area)) * 100.0)


def infrastructure_score(counts: Mapping[str, int], area_km2: float) -> int:
    """Average of the capped per-category ratios, as an int in [0, 100].

    ``normalized = area / 10``; each category scores
    ``min(100, count / (ideal * normalized) * 100)``.
    """
    normalized = area_km2 / AREA_UNIT_KM2 if area_km2 > 0 else 0.0
    scores = [
        category_score(counts.get(name, 0), ideal, normalized)
        for name, ideal in IDEAL_PER_UNIT.items()
    ]
    avg = sum(scores) / len(scores)
    return int(min(100.0, max(0.0, round_half_away(avg))))


def infrastructure_rating(score: int) -> str:
    for threshold, label in RATING_BANDS:
        if score >= threshold:
            return label
    return "poor"


def transport_metrics(road_km: float, transit_stops: int, area_km2: float) -> dict[str, Any]:
    # Density uses the raw total, not the 1-decimal display value.
    density = round_half_away(road_km / area_km2, 100) if area_km2 > 0 else 0.0
    return {
        "road_km_total": round_half_away(road_km, 10),
        "road_density_km_per_km2": density,
        "transit_stops": transit_stops,
    }
