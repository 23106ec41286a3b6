"""
Pydantic models — Data Contracts for the Urbanscope API.

Field names are snake_case in Python and camelCase on the wire
(``fireStations``, ``populationData``, ``projected5Year``, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Region analysis ---------- #

class AnalyzeRegionRequest(BaseModel):
    # Shape is checked by the analyzer so malformed corners get a 400, not a 422.
    bounds: list[list[float]] = Field(..., description="[[lat1, lng1], [lat2, lng2]]")


class Center(CamelModel):
    lat: float
    lng: float


class Amenities(CamelModel):
    hospitals: int = Field(..., ge=0)
    police: int = Field(..., ge=0)
    fire_stations: int = Field(..., ge=0)
    schools: int = Field(..., ge=0)
    parks: int = Field(..., ge=0)


class PopulationData(CamelModel):
    current: int
    growth_rate: float
    projected5_year: int
    projected10_year: int


class TransportMetrics(CamelModel):
    road_km_total: float
    road_density_km_per_km2: float
    transit_stops: int = Field(..., ge=0)


class RegionReport(CamelModel):
    area: float
    center: Center
    amenities: Amenities
    population_data: PopulationData
    infra_score: int = Field(..., ge=0, le=100)
    infra_rating: str
    transport: TransportMetrics


# ---------- Place lookup ---------- #

class GeoSearchRequest(BaseModel):
    query: str = ""


class GeoSearchResult(BaseModel):
    x: float  # longitude
    y: float  # latitude
    label: str
