"""
Readiness classification from training load.

Turns a CTL / ATL / TSB snapshot into a :class:`ReadinessVerdict`.

Model
-----
Three independent lookups are made from the same snapshot:

1. **Form status** from TSB.  Ordered thresholds, first match wins, each
   test is a strict ``tsb > threshold``::

       > 25   Fresh
       > 5    Optimal
       > -10  Productive
       > -30  Overreaching
       else   Overtraining

   So ``tsb == 25`` is Optimal, not Fresh.

2. **Nutrition guidance** from TSB, with its own boundaries::

       tsb < -20        increase calories and carbs
       -20 <= tsb < 0   maintain current nutrition
       0 <= tsb < 15    stick with the plan
       tsb >= 15        fuel up for hard training

   These boundaries do not line up with the status table (status flips at
   5, guidance at 0), so the two tables stay separate.

3. **Fitness level** from CTL alone, strict ``>`` as in (1)::

       > 100 Elite, > 80 Advanced, > 60 Intermediate, > 40 Developing,
       else Beginner

A snapshot with CTL, ATL and TSB all zero is treated as "no data": the
metrics provider is not connected yet, and nothing is classified.  A
genuinely all-zero athlete cannot be told apart from that case.
"""

from __future__ import annotations

from typing import Optional

from app.schemas.fitness import (
    FatigueLevel,
    FitnessLevel,
    FormStatus,
    ReadinessVerdict,
    TrainingLoadSnapshot,
)

# ======================================================================
# Threshold tables
# ======================================================================

# (lower bound, exclusive) -> status.  Checked in order.
_FORM_THRESHOLDS: list[tuple[float, FormStatus]] = [
    (25.0, FormStatus.FRESH),
    (5.0, FormStatus.OPTIMAL),
    (-10.0, FormStatus.PRODUCTIVE),
    (-30.0, FormStatus.OVERREACHING),
]

_FORM_NARRATIVES: dict[FormStatus, str] = {
    FormStatus.FRESH: "Well rested - good time for hard efforts",
    FormStatus.OPTIMAL: "Perfect balance - maintain current training",
    FormStatus.PRODUCTIVE: "Slight fatigue - building fitness",
    FormStatus.OVERREACHING: "Significant fatigue - consider recovery",
    FormStatus.OVERTRAINING: "High fatigue - recovery needed",
}

# (low inclusive, high exclusive, guidance).  Covers the whole real line.
_NUTRITION_BANDS: list[tuple[float, float, str]] = [
    (float("-inf"), -20.0, "High fatigue - increase calories and carbs for recovery"),
    (-20.0, 0.0, "Building fitness - maintain current nutrition"),
    (0.0, 15.0, "Good balance - stick with your plan"),
    (15.0, float("inf"), "Well rested - fuel up for hard training ahead"),
]

_FITNESS_THRESHOLDS: list[tuple[float, FitnessLevel]] = [
    (100.0, FitnessLevel.ELITE),
    (80.0, FitnessLevel.ADVANCED),
    (60.0, FitnessLevel.INTERMEDIATE),
    (40.0, FitnessLevel.DEVELOPING),
]


# ======================================================================
# Individual lookups
# ======================================================================


def classify_form(tsb: float) -> FormStatus:
    """Map TSB to its form status."""
    for threshold, status in _FORM_THRESHOLDS:
        if tsb > threshold:
            return status
    return FormStatus.OVERTRAINING


def form_narrative(status: FormStatus) -> str:
    """Explanation shown alongside a form status."""
    return _FORM_NARRATIVES[status]


def nutrition_guidance(tsb: float) -> str:
    """Map TSB to a nutrition adjustment."""
    for low, high, guidance in _NUTRITION_BANDS:
        if low <= tsb < high:
            return guidance
    # Only +inf and NaN fall through the half-open bands.
    return _NUTRITION_BANDS[-1][2]


def classify_fitness_level(ctl: float) -> FitnessLevel:
    """Map CTL to a fitness tier."""
    for threshold, level in _FITNESS_THRESHOLDS:
        if ctl > threshold:
            return level
    return FitnessLevel.BEGINNER


def classify_fatigue(ctl: float, atl: float) -> FatigueLevel:
    """High when acute load exceeds chronic load."""
    return FatigueLevel.HIGH if atl > ctl else FatigueLevel.MANAGEABLE


def has_fitness_data(snapshot: TrainingLoadSnapshot) -> bool:
    """False when CTL, ATL and TSB are all zero."""
    return bool(snapshot.ctl or snapshot.atl or snapshot.tsb)


# ======================================================================
# Main entry point
# ======================================================================


def classify(snapshot: TrainingLoadSnapshot) -> Optional[ReadinessVerdict]:
    """Classify a training-load snapshot.

    Args:
        snapshot: Current CTL / ATL / TSB.

    Returns:
        :class:`ReadinessVerdict`, or ``None`` when the snapshot carries
        no data (all three values zero).  Callers should show a neutral
        "not connected" state for ``None``.
    """
    if not has_fitness_data(snapshot):
        return None

    status = classify_form(snapshot.tsb)
    return ReadinessVerdict(
        status=status,
        narrative=form_narrative(status),
        nutrition_guidance=nutrition_guidance(snapshot.tsb),
        fitness_level=classify_fitness_level(snapshot.ctl),
        fatigue_level=classify_fatigue(snapshot.ctl, snapshot.atl),
        ctl=snapshot.ctl,
        atl=snapshot.atl,
        tsb=snapshot.tsb,
    )
