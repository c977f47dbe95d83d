"""
Upstream activity cache.

Decides whether activity data previously fetched from the upstream
provider is still fresh enough to serve, or whether the caller has to
refetch it.

Policy
------
- One entry per owner (and data kind).  ``put`` overwrites it and stamps
  it with the current time; there is no merge.
- An entry is served only while ``now - cached_at < CACHE_TTL`` (1 hour).
  Stale entries stay in the store until the next ``put`` but are never
  returned, not even as a fallback.
- Absent, stale and unreadable entries all look the same to ``get``
  callers: ``None``.  A failing store read is logged and turned into a
  miss so the caller always falls back to refetching.

Entry lifecycle::

    Absent -> Fresh (age < TTL) -> Stale (age >= TTL) -> [put] -> Fresh
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Callable, Optional

from app.db.repositories.document_store import DocumentStore, StoreFailure
from app.schemas.activity_cache import CacheEntry, DocumentKey

logger = logging.getLogger(__name__)

CACHE_TTL = datetime.timedelta(hours=1)

DEFAULT_KIND = "activities"


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def is_fresh(
    now: datetime.datetime,
    cached_at: datetime.datetime,
    ttl: datetime.timedelta = CACHE_TTL,
) -> bool:
    """True while ``now - cached_at`` is strictly below *ttl*."""
    return now - cached_at < ttl


class ActivityCache:
    """Time-bounded cache for upstream activity data.

    Args:
        store: Backing document store.
        clock: Returns the current time (timezone-aware UTC).
        kind: Data-kind discriminator used in store keys.
    """

    def __init__(
        self,
        store: DocumentStore,
        clock: Callable[[], datetime.datetime] = utc_now,
        kind: str = DEFAULT_KIND,
    ):
        self.store = store
        self.clock = clock
        self.kind = kind

    def get(self, owner_id: str) -> Optional[Any]:
        """Return the cached payload for *owner_id*, or ``None`` on a miss."""
        key = self._key(owner_id)
        try:
            entry = self.store.read(key)
        except StoreFailure as exc:
            logger.warning("Cache read failed for %s, treating as miss: %s", owner_id, exc)
            return None

        if entry is None:
            logger.debug("Cache miss for %s (absent)", owner_id)
            return None

        if not is_fresh(self.clock(), entry.cached_at):
            logger.debug("Cache miss for %s (stale since %s)", owner_id, entry.cached_at)
            return None

        logger.debug("Cache hit for %s", owner_id)
        return entry.payload

    def put(self, owner_id: str, payload: Any) -> bool:
        """Overwrite the entry for *owner_id* with *payload*.

        Returns:
            ``True`` if the store accepted the write, ``False`` otherwise.
        """
        entry = CacheEntry(payload=payload, cached_at=self.clock())
        try:
            self.store.write(self._key(owner_id), entry)
        except StoreFailure as exc:
            logger.warning("Cache write failed for %s: %s", owner_id, exc)
            return False
        logger.debug("Cached payload for %s at %s", owner_id, entry.cached_at)
        return True

    def _key(self, owner_id: str) -> DocumentKey:
        return DocumentKey(owner_id=owner_id, kind=self.kind)
