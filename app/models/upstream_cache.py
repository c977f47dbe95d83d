"""
Upstream cache database model.

Defines the upstream_cache table: one JSON document per owner and data kind.
"""

import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


class UpstreamCacheDocument(SQLModel, table=True):
    """
    Cached upstream payload.

    One row per (owner_id, kind), enforced by unique constraint.
    Rows are overwritten in place, never deleted by the cache.
    """
    __tablename__ = "upstream_cache"
    __table_args__ = (
        UniqueConstraint("owner_id", "kind", name="uq_upstream_cache_owner_kind"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(max_length=128, nullable=False, index=True)
    kind: str = Field(max_length=64, nullable=False)

    payload: Any = Field(sa_column=Column(JSON, nullable=False))
    cached_at: datetime.datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
