"""
Geosearch Routes — free-text place lookup.
"""

from __future__ import annotations

from fastapi import APIRouter

from api.schemas import GeoSearchRequest, GeoSearchResult
from modules.geocoding import search_places

router = APIRouter()


@router.post("/geosearch", response_model=list[GeoSearchResult])
async def geosearch(req: GeoSearchRequest):
    """Top matches for a place name (empty list for blank input)."""
    return await search_places(req.query)
