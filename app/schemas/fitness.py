"""
Training-load (fitness) schemas.

Training load is summarised by three numbers supplied by the metrics
provider:

    CTL (chronic training load):  long-window load, "fitness"
    ATL (acute training load):    short-window load, "fatigue"
    TSB (training stress balance): readiness indicator, "form"

TSB is conceptually ``CTL - ATL`` but is taken as supplied; it is never
recomputed from the other two fields here.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormStatus(str, Enum):
    """Readiness state derived from TSB."""

    FRESH = "Fresh"
    OPTIMAL = "Optimal"
    PRODUCTIVE = "Productive"
    OVERREACHING = "Overreaching"
    OVERTRAINING = "Overtraining"


class FitnessLevel(str, Enum):
    """Fitness tier derived from CTL."""

    BEGINNER = "Beginner"
    DEVELOPING = "Developing"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    ELITE = "Elite"


class FatigueLevel(str, Enum):
    """Whether acute load currently exceeds chronic load."""

    MANAGEABLE = "Manageable"
    HIGH = "High"


class TrainingLoadSnapshot(BaseModel):
    """Current CTL / ATL / TSB reading for one athlete."""

    ctl: float = Field(
        0.0,
        description="Chronic training load (fitness)",
    )
    atl: float = Field(
        0.0,
        description="Acute training load (fatigue)",
    )
    tsb: float = Field(
        0.0,
        description="Training stress balance (form); may be negative",
    )

    @field_validator("ctl", "atl", "tsb", mode="before")
    @classmethod
    def _missing_as_zero(cls, value):
        # Providers send null before enough history exists.
        return 0.0 if value is None else value


class ReadinessVerdict(BaseModel):
    """Readiness classification for a single snapshot."""

    model_config = ConfigDict(frozen=True)

    status: FormStatus
    narrative: str = Field(
        ...,
        description="Explanation of the status",
    )
    nutrition_guidance: str = Field(
        ...,
        description="Nutrition adjustment for the current form",
    )
    fitness_level: FitnessLevel
    fatigue_level: FatigueLevel
    ctl: float
    atl: float
    tsb: float


class ReadinessResponse(BaseModel):
    """API response: a verdict, or the neutral "not connected" state."""

    connected: bool = Field(
        ...,
        description="False when no training-load data is available",
    )
    verdict: Optional[ReadinessVerdict] = None
    message: Optional[str] = None


class WellnessRecord(BaseModel):
    """One daily wellness record as delivered by the metrics provider.

    ``id`` is the ISO calendar date of the record.
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(
        ...,
        description="Calendar date of the record (YYYY-MM-DD)",
    )
    ctl: Optional[float] = None
    atl: Optional[float] = None
