"""Database repositories."""

from app.db.repositories.document_store import (
    DocumentStore,
    InMemoryDocumentStore,
    StoreFailure,
)
from app.db.repositories.upstream_cache import UpstreamCacheRepository

__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
    "StoreFailure",
    "UpstreamCacheRepository",
]
