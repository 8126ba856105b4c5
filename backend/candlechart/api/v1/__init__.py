"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from candlechart.api.v1.endpoints import chart, health

router = APIRouter()

# Include all endpoint routers
router.include_router(health.router, tags=["Health"])
router.include_router(chart.router, prefix="/chart", tags=["Chart"])
