"""
Activity endpoints — cached upstream activity data per owner.

A 404 from the GET endpoint means the caller must refetch from the
upstream provider and PUT the result back.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from app.api.dependencies import get_activity_cache
from app.services.activity_cache_service import ActivityCacheService
from app.trainfuel.activity_cache import ActivityCache

router = APIRouter()


@router.get("/{owner_id}/cache", summary="Get fresh cached activities for an owner.", )
def get_cached_activities(owner_id: str, cache: ActivityCache = Depends(get_activity_cache), ):
    service = ActivityCacheService(cache)
    return service.get_cached(owner_id)


@router.put("/{owner_id}/cache", summary="Replace cached activities for an owner.",
            status_code=status.HTTP_204_NO_CONTENT, )
def put_cached_activities(owner_id: str, payload: Any = Body(...),
                          cache: ActivityCache = Depends(get_activity_cache), ):
    service = ActivityCacheService(cache)
    service.store(owner_id, payload)
