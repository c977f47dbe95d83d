"""
Upstream activity cache schemas.

A cache entry holds the last payload fetched from the upstream activity
provider for one owner, stamped with the time it was fetched.
"""

import datetime
from typing import Any, NamedTuple

from pydantic import BaseModel, Field


class DocumentKey(NamedTuple):
    """Store key: owner identity plus data-kind discriminator."""

    owner_id: str
    kind: str


class CacheEntry(BaseModel):
    """Stored document for one (owner, kind) pair."""

    payload: Any = Field(
        ...,
        description="Serialisable upstream data",
    )
    cached_at: datetime.datetime = Field(
        ...,
        description="When the payload was written (UTC)",
    )
