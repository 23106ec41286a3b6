"""
api.routes — Aggregates all domain-specific route modules into a single router.

app.py imports ``from api.routes import router`` which resolves here.
"""

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.region import router as region_router
from api.routes.geosearch import router as geosearch_router

router = APIRouter()

router.include_router(health_router)
router.include_router(region_router)
router.include_router(geosearch_router)
