"""
Fitness endpoints — readiness classification from training load.
"""

from fastapi import APIRouter

from app.schemas.fitness import (
    ReadinessResponse,
    TrainingLoadSnapshot,
    WellnessRecord,
)
from app.trainfuel.fitness import snapshot_from_wellness
from app.trainfuel.readiness import classify

router = APIRouter()

_NOT_CONNECTED = "Connect Intervals.icu to see your fitness metrics"


def _to_response(snapshot: TrainingLoadSnapshot | None) -> ReadinessResponse:
    verdict = classify(snapshot) if snapshot is not None else None
    if verdict is None:
        return ReadinessResponse(connected=False, message=_NOT_CONNECTED)
    return ReadinessResponse(connected=True, verdict=verdict)


@router.post(
    "/readiness",
    summary="Classify readiness from a CTL / ATL / TSB snapshot.",
    response_model=ReadinessResponse,
)
def get_readiness(snapshot: TrainingLoadSnapshot):
    return _to_response(snapshot)


@router.post(
    "/readiness/from-wellness",
    summary="Classify readiness from daily wellness records.",
    response_model=ReadinessResponse,
)
def get_readiness_from_wellness(records: list[WellnessRecord]):
    """Uses the newest record that carries fitness values."""
    return _to_response(snapshot_from_wellness(records))
