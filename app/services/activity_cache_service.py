"""
Activity cache service.

Maps cache outcomes onto HTTP semantics for the activities endpoints.
"""

from typing import Any

from fastapi import HTTPException, status

from app.trainfuel.activity_cache import ActivityCache


class ActivityCacheService:
    """Service for serving and refreshing cached upstream activities."""

    def __init__(self, cache: ActivityCache):
        self.cache = cache

    def get_cached(self, owner_id: str) -> Any:
        payload = self.cache.get(owner_id)
        if payload is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No fresh cached activities, refetch from upstream",
            )
        return payload

    def store(self, owner_id: str, payload: Any) -> None:
        if not self.cache.put(owner_id, payload):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Activity cache is unavailable",
            )
