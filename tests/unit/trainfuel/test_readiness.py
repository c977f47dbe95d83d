"""
Unit tests for readiness classification.

Tests the three independent lookups (form status, nutrition guidance,
fitness level), the no-data short-circuit, and verdict assembly.
"""

import pytest
from pydantic import ValidationError

from app.schemas.fitness import (
    FatigueLevel,
    FitnessLevel,
    FormStatus,
    TrainingLoadSnapshot,
)
from app.trainfuel.readiness import (
    _FORM_NARRATIVES,
    _NUTRITION_BANDS,
    classify,
    classify_fatigue,
    classify_fitness_level,
    classify_form,
    has_fitness_data,
    nutrition_guidance,
)

INCREASE = "High fatigue - increase calories and carbs for recovery"
MAINTAIN = "Building fitness - maintain current nutrition"
STICK = "Good balance - stick with your plan"
FUEL_UP = "Well rested - fuel up for hard training ahead"


# ======================================================================
# classify_form
# ======================================================================


class TestClassifyForm:
    """Test TSB → form status thresholds."""

    @pytest.mark.parametrize("tsb,expected", [
        (60.0, FormStatus.FRESH),
        (25.0001, FormStatus.FRESH),
        (25.0, FormStatus.OPTIMAL),
        (10.0, FormStatus.OPTIMAL),
        (5.0001, FormStatus.OPTIMAL),
        (5.0, FormStatus.PRODUCTIVE),
        (0.0, FormStatus.PRODUCTIVE),
        (-9.99, FormStatus.PRODUCTIVE),
        (-10.0, FormStatus.OVERREACHING),
        (-29.99, FormStatus.OVERREACHING),
        (-30.0, FormStatus.OVERTRAINING),
        (-80.0, FormStatus.OVERTRAINING),
    ])
    def test_thresholds(self, tsb, expected):
        assert classify_form(tsb) == expected

    def test_every_status_has_a_narrative(self):
        assert set(_FORM_NARRATIVES) == set(FormStatus)


# ======================================================================
# nutrition_guidance
# ======================================================================


class TestNutritionGuidance:
    """Test TSB → nutrition guidance bands."""

    @pytest.mark.parametrize("tsb,expected", [
        (-50.0, INCREASE),
        (-20.0001, INCREASE),
        (-20.0, MAINTAIN),
        (-0.0001, MAINTAIN),
        (0.0, STICK),
        (14.999, STICK),
        (15.0, FUEL_UP),
        (40.0, FUEL_UP),
        (float("inf"), FUEL_UP),
    ])
    def test_bands(self, tsb, expected):
        assert nutrition_guidance(tsb) == expected

    def test_bands_are_contiguous(self):
        """Each band starts where the previous one ends."""
        for (_, high, _), (low, _, _) in zip(_NUTRITION_BANDS, _NUTRITION_BANDS[1:]):
            assert high == low
        assert _NUTRITION_BANDS[0][0] == float("-inf")
        assert _NUTRITION_BANDS[-1][1] == float("inf")

    def test_not_aligned_with_status(self):
        """Status flips at 5, guidance at 0: tsb=3 is Productive but 'stick with plan'."""
        assert classify_form(3.0) == FormStatus.PRODUCTIVE
        assert nutrition_guidance(3.0) == STICK
        assert classify_form(-3.0) == FormStatus.PRODUCTIVE
        assert nutrition_guidance(-3.0) == MAINTAIN


# ======================================================================
# classify_fitness_level / classify_fatigue
# ======================================================================


class TestFitnessLevel:
    """Test CTL → fitness tier."""

    @pytest.mark.parametrize("ctl,expected", [
        (150.0, FitnessLevel.ELITE),
        (100.0001, FitnessLevel.ELITE),
        (100.0, FitnessLevel.ADVANCED),
        (80.0001, FitnessLevel.ADVANCED),
        (80.0, FitnessLevel.INTERMEDIATE),
        (60.0, FitnessLevel.DEVELOPING),
        (40.0001, FitnessLevel.DEVELOPING),
        (40.0, FitnessLevel.BEGINNER),
        (0.0, FitnessLevel.BEGINNER),
    ])
    def test_thresholds(self, ctl, expected):
        assert classify_fitness_level(ctl) == expected


class TestFatigue:

    def test_atl_above_ctl_is_high(self):
        assert classify_fatigue(ctl=50.0, atl=70.0) == FatigueLevel.HIGH

    def test_equal_is_manageable(self):
        assert classify_fatigue(ctl=50.0, atl=50.0) == FatigueLevel.MANAGEABLE


# ======================================================================
# classify
# ======================================================================


class TestClassify:
    """Test full verdict assembly."""

    def test_all_zero_is_no_data(self):
        assert classify(TrainingLoadSnapshot(ctl=0, atl=0, tsb=0)) is None

    def test_missing_fields_are_no_data(self):
        snapshot = TrainingLoadSnapshot(ctl=None, atl=None, tsb=None)
        assert snapshot.ctl == 0.0
        assert classify(snapshot) is None
        assert classify(TrainingLoadSnapshot()) is None

    def test_single_nonzero_field_is_classified(self):
        verdict = classify(TrainingLoadSnapshot(ctl=0, atl=0, tsb=-12))
        assert verdict is not None
        assert verdict.status == FormStatus.OVERREACHING

    def test_verdict_fields(self):
        verdict = classify(TrainingLoadSnapshot(ctl=72.0, atl=80.0, tsb=-8.0))
        assert verdict.status == FormStatus.PRODUCTIVE
        assert verdict.narrative == "Slight fatigue - building fitness"
        assert verdict.nutrition_guidance == MAINTAIN
        assert verdict.fitness_level == FitnessLevel.INTERMEDIATE
        assert verdict.fatigue_level == FatigueLevel.HIGH
        assert (verdict.ctl, verdict.atl, verdict.tsb) == (72.0, 80.0, -8.0)

    def test_tsb_taken_as_supplied(self):
        """TSB is not recomputed from CTL - ATL."""
        verdict = classify(TrainingLoadSnapshot(ctl=50.0, atl=20.0, tsb=-40.0))
        assert verdict.status == FormStatus.OVERTRAINING
        assert verdict.nutrition_guidance == INCREASE

    def test_fresh_athlete(self):
        verdict = classify(TrainingLoadSnapshot(ctl=105.0, atl=70.0, tsb=35.0))
        assert verdict.status == FormStatus.FRESH
        assert verdict.narrative == "Well rested - good time for hard efforts"
        assert verdict.nutrition_guidance == FUEL_UP
        assert verdict.fitness_level == FitnessLevel.ELITE
        assert verdict.fatigue_level == FatigueLevel.MANAGEABLE

    def test_verdict_is_immutable(self):
        verdict = classify(TrainingLoadSnapshot(ctl=50.0, atl=40.0, tsb=10.0))
        with pytest.raises(ValidationError):
            verdict.status = FormStatus.FRESH

    @pytest.mark.parametrize("ctl,atl,tsb,expected", [
        (0.0, 0.0, 0.0, False),
        (1.0, 0.0, 0.0, True),
        (0.0, 1.0, 0.0, True),
        (0.0, 0.0, -1.0, True),
    ])
    def test_has_fitness_data(self, ctl, atl, tsb, expected):
        assert has_fitness_data(TrainingLoadSnapshot(ctl=ctl, atl=atl, tsb=tsb)) is expected
