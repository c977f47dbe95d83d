"""TrainFuel core — readiness classification and upstream activity cache."""

from app.trainfuel.activity_cache import CACHE_TTL, ActivityCache, is_fresh
from app.trainfuel.readiness import classify

__all__ = ["CACHE_TTL", "ActivityCache", "classify", "is_fresh"]
