"""
Upstream cache repository.

SQL-backed :class:`~app.db.repositories.document_store.DocumentStore`
over the upstream_cache table.
"""

import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.db.repositories.document_store import StoreFailure
from app.models.upstream_cache import UpstreamCacheDocument
from app.schemas.activity_cache import CacheEntry, DocumentKey


class UpstreamCacheRepository:
    """Repository for UpstreamCacheDocument database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_key(self, key: DocumentKey) -> Optional[UpstreamCacheDocument]:
        statement = select(UpstreamCacheDocument).where(
            UpstreamCacheDocument.owner_id == key.owner_id,
            UpstreamCacheDocument.kind == key.kind,
        )
        return self.session.exec(statement).first()

    # ------------------------------------------------------------------
    # DocumentStore
    # ------------------------------------------------------------------

    def read(self, key: DocumentKey) -> Optional[CacheEntry]:
        try:
            document = self.get_by_key(key)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreFailure(f"Read failed for {key.owner_id}/{key.kind}: {exc}") from exc

        if document is None:
            return None
        return CacheEntry(
            payload=document.payload,
            cached_at=self._as_utc(document.cached_at),
        )

    def write(self, key: DocumentKey, entry: CacheEntry) -> None:
        """Overwrite the document for *key* (insert if missing).

        If another writer inserts the same key between our lookup and our
        insert, the unique constraint rejects the insert; the row is then
        re-read and overwritten, so the last writer still wins.
        """
        try:
            try:
                self._upsert(key, entry)
            except IntegrityError:
                self.session.rollback()
                self._upsert(key, entry)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StoreFailure(f"Write failed for {key.owner_id}/{key.kind}: {exc}") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _upsert(self, key: DocumentKey, entry: CacheEntry) -> None:
        document = self.get_by_key(key)
        if document is None:
            document = UpstreamCacheDocument(
                owner_id=key.owner_id,
                kind=key.kind,
                payload=entry.payload,
                cached_at=entry.cached_at,
            )
        else:
            document.payload = entry.payload
            document.cached_at = entry.cached_at
        self.session.add(document)
        self.session.commit()

    @staticmethod
    def _as_utc(value: datetime.datetime) -> datetime.datetime:
        """SQLite drops tzinfo; stored timestamps are always UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=datetime.timezone.utc)
        return value.astimezone(datetime.timezone.utc)
