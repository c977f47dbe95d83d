"""
Document store interface.

The upstream cache only needs two operations from its backing store:
read one document by key and overwrite one document by key.  Any I/O
problem is reported as :class:`StoreFailure`.
"""

from typing import Optional, Protocol

from app.schemas.activity_cache import CacheEntry, DocumentKey


class StoreFailure(Exception):
    """Raised when the backing store cannot be read or written."""


class DocumentStore(Protocol):
    """Key-value document store keyed by (owner, kind)."""

    def read(self, key: DocumentKey) -> Optional[CacheEntry]:
        ...

    def write(self, key: DocumentKey, entry: CacheEntry) -> None:
        ...


class InMemoryDocumentStore:
    """Dict-backed store for wiring without a database."""

    def __init__(self):
        self._documents: dict[DocumentKey, CacheEntry] = {}

    def read(self, key: DocumentKey) -> Optional[CacheEntry]:
        return self._documents.get(key)

    def write(self, key: DocumentKey, entry: CacheEntry) -> None:
        self._documents[key] = entry
