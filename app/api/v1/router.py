"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import activities, fitness

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    fitness.router, prefix="/fitness", tags=["Fitness"]
)
api_router.include_router(
    activities.router, prefix="/activities", tags=["Activities"]
)
