"""
Snapshot extraction from provider wellness records.

The metrics provider returns one wellness record per day.  Fitness values
lag behind: the newest days often have no CTL yet, so the latest record
that does carry CTL is used.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from app.schemas.fitness import TrainingLoadSnapshot, WellnessRecord

logger = logging.getLogger(__name__)


def latest_with_fitness(records: Iterable[WellnessRecord]) -> Optional[WellnessRecord]:
    """Return the newest record whose CTL is set, or ``None``."""
    # ISO dates sort lexically.
    ordered = sorted(records, key=lambda r: r.id, reverse=True)
    for record in ordered:
        if record.ctl is not None:
            return record
    return None


def snapshot_from_wellness(records: Iterable[WellnessRecord]) -> Optional[TrainingLoadSnapshot]:
    """Build a snapshot from daily wellness records.

    TSB is derived here as ``ctl - atl`` because wellness records do not
    carry it.  Returns ``None`` when no record has fitness data.
    """
    record = latest_with_fitness(records)
    if record is None:
        logger.warning("No fitness data in wellness records")
        return None

    ctl = record.ctl or 0.0
    atl = record.atl or 0.0
    logger.debug("Using wellness record %s (ctl=%s, atl=%s)", record.id, ctl, atl)
    return TrainingLoadSnapshot(ctl=ctl, atl=atl, tsb=ctl - atl)
