"""
API v1 router aggregating all endpoints.
"""

from fastapi import APIRouter

from api.v1.badges import router as badges_router

router = APIRouter()

router.include_router(badges_router, prefix="/badges", tags=["Badges"])
