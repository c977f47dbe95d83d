"""Business logic services."""

from app.services.activity_cache_service import ActivityCacheService

__all__ = [
    "ActivityCacheService",
]
