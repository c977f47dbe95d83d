"""Pydantic schemas for request/response validation."""

from app.schemas.activity_cache import CacheEntry, DocumentKey
from app.schemas.fitness import (
    FatigueLevel,
    FitnessLevel,
    FormStatus,
    ReadinessResponse,
    ReadinessVerdict,
    TrainingLoadSnapshot,
    WellnessRecord,
)

__all__ = [
    "CacheEntry",
    "DocumentKey",
    "FatigueLevel",
    "FitnessLevel",
    "FormStatus",
    "ReadinessResponse",
    "ReadinessVerdict",
    "TrainingLoadSnapshot",
    "WellnessRecord",
]
