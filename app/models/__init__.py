"""SQLModel database models."""

from app.models.upstream_cache import UpstreamCacheDocument

__all__ = [
    "UpstreamCacheDocument",
]
