"""
Unit tests for backend/core/strength_metrics.py

Tests cover:
- Brzycki and Epley e1RM estimates
- Rep capping and single-rep handling
- Set-level e1RM eligibility
- Intensity zone helpers
"""
import pytest

from backend.core.strength_metrics import (
    MAX_FORMULA_REPS,
    OneRepMaxFormula,
    calculate_1rm_brzycki,
    calculate_1rm_epley,
    estimated_one_rep_max,
    percent_of_max,
    recommended_rep_range,
    set_estimated_one_rep_max,
)
from domain.models import WorkoutSet

pytestmark = pytest.mark.unit


class TestBrzycki:
    def test_five_reps(self):
        """100 x 5 -> 100 * 36 / 32."""
        assert calculate_1rm_brzycki(100, 5) == pytest.approx(112.5)

    def test_single_rep_is_the_max(self):
        assert calculate_1rm_brzycki(140, 1) == 140.0

    def test_zero_reps_returns_weight(self):
        assert calculate_1rm_brzycki(80, 0) == 80.0

    def test_reps_above_cap_are_capped(self):
        capped = calculate_1rm_brzycki(60, MAX_FORMULA_REPS)
        assert calculate_1rm_brzycki(60, 20) == pytest.approx(capped)


class TestEpley:
    def test_five_reps(self):
        assert calculate_1rm_epley(100, 5) == pytest.approx(100 * (1 + 5 / 30))

    def test_epley_exceeds_brzycki_for_moderate_reps(self):
        assert calculate_1rm_epley(100, 8) > calculate_1rm_brzycki(100, 8)


class TestEstimatedOneRepMax:
    def test_defaults_to_brzycki(self):
        assert estimated_one_rep_max(100, 5) == pytest.approx(112.5)

    def test_accepts_formula_string(self):
        assert estimated_one_rep_max(100, 5, "epley") == pytest.approx(
            calculate_1rm_epley(100, 5)
        )

    def test_explicit_formula_enum(self):
        assert estimated_one_rep_max(100, 5, OneRepMaxFormula.BRZYCKI) == pytest.approx(112.5)

    def test_unknown_formula_raises(self):
        with pytest.raises(ValueError):
            estimated_one_rep_max(100, 5, "lombardi")


class TestSetEstimatedOneRepMax:
    def test_qualifying_set(self):
        workout_set = WorkoutSet(weight=100, reps=5, is_completed=True)
        assert set_estimated_one_rep_max(workout_set) == pytest.approx(112.5)

    def test_bodyweight_set_has_no_estimate(self):
        assert set_estimated_one_rep_max(WorkoutSet(weight=0, reps=10)) is None

    def test_zero_rep_set_has_no_estimate(self):
        assert set_estimated_one_rep_max(WorkoutSet(weight=100, reps=0)) is None


class TestIntensityZones:
    def test_percent_of_max(self):
        assert percent_of_max(90, 100) == pytest.approx(0.9)

    def test_percent_of_unknown_max_is_zero(self):
        assert percent_of_max(90, 0) == 0.0

    @pytest.mark.parametrize(
        "percentage,expected",
        [
            (0.95, (1, 3)),
            (0.85, (3, 6)),
            (0.75, (6, 10)),
            (0.65, (10, 15)),
            (0.5, (15, 20)),
        ],
    )
    def test_recommended_rep_range(self, percentage, expected):
        assert recommended_rep_range(percentage) == expected
