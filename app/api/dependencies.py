"""
Shared API dependencies.

Reusable FastAPI dependencies for database-backed components.
"""

from fastapi import Depends
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.upstream_cache import UpstreamCacheRepository
from app.db.session import get_db
from app.trainfuel.activity_cache import ActivityCache


def get_activity_cache(db: Session = Depends(get_db)) -> ActivityCache:
    """Build an activity cache over the request's database session."""
    return ActivityCache(UpstreamCacheRepository(db), kind=settings.ACTIVITY_CACHE_KIND)
