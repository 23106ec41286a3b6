"""
Region Routes — bounding-box analysis endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.schemas import AnalyzeRegionRequest, RegionReport
from modules.region_analyzer import analyze_region

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/analyze-region", response_model=RegionReport)
async def analyze_region_route(req: AnalyzeRegionRequest):
    """Count amenities, roads and transit stops inside the box and score it.
    Errors (bad corners, Overpass failures) are turned into JSON responses
    by the handler registered in app.py.
    """
    logger.info("Analyze region %s", req.bounds)
    report = await analyze_region(req.bounds)
    return RegionReport.model_validate(report)
