"""
Strength metrics: estimated one-rep max and intensity zones.

Pure, stateless helpers shared by PR detection and progression analytics.
Brzycki is the formula used system-wide so that every e1RM is comparable.
"""
from enum import Enum
from typing import Optional, Tuple

from domain.models import WorkoutSet


# Formulas degrade beyond typical strength rep ranges
MAX_FORMULA_REPS = 12


class OneRepMaxFormula(str, Enum):
    """Supported e1RM formulas."""
    BRZYCKI = "brzycki"
    EPLEY = "epley"


# =============================================================================
# 1RM Calculation Formulas
# =============================================================================


def calculate_1rm_brzycki(weight: float, reps: int) -> float:
    """
    Estimate 1RM with the Brzycki formula.

    Formula: 1RM = weight * (36 / (37 - reps))

    Args:
        weight: Weight lifted
        reps: Reps completed (capped at 12)

    Returns:
        Estimated 1RM, unrounded
    """
    if reps <= 1:
        return float(weight)
    capped = min(reps, MAX_FORMULA_REPS)
    return weight * (36.0 / (37.0 - capped))


def calculate_1rm_epley(weight: float, reps: int) -> float:
    """
    Estimate 1RM with the Epley formula.

    Formula: 1RM = weight * (1 + reps/30)

    Generally a little higher than Brzycki for the same set.
    """
    if reps <= 1:
        return float(weight)
    capped = min(reps, MAX_FORMULA_REPS)
    return weight * (1.0 + capped / 30.0)


def estimated_one_rep_max(
    weight: float,
    reps: int,
    formula: OneRepMaxFormula = OneRepMaxFormula.BRZYCKI,
) -> float:
    """
    Estimate 1RM using the requested formula.

    A single rep *is* the max, so reps <= 1 returns the weight unchanged.

    Examples:
        >>> estimated_one_rep_max(100, 5)
        112.5
        >>> estimated_one_rep_max(100, 1)
        100.0
    """
    if OneRepMaxFormula(formula) is OneRepMaxFormula.EPLEY:
        return calculate_1rm_epley(weight, reps)
    return calculate_1rm_brzycki(weight, reps)


def set_estimated_one_rep_max(
    workout_set: WorkoutSet,
    formula: OneRepMaxFormula = OneRepMaxFormula.BRZYCKI,
) -> Optional[float]:
    """e1RM for a logged set, or None when the set has no load or no reps."""
    if not workout_set.is_pr_candidate:
        return None
    return estimated_one_rep_max(workout_set.weight, workout_set.reps, formula)


# =============================================================================
# Intensity Zones
# =============================================================================


def percent_of_max(weight: float, one_rm: float) -> float:
    """Fraction of 1RM that `weight` represents (0 when 1RM is unknown)."""
    if one_rm <= 0:
        return 0.0
    return weight / one_rm


def recommended_rep_range(percentage: float) -> Tuple[int, int]:
    """
    Typical rep range for a given fraction of 1RM.

    Returns:
        (min_reps, max_reps)
    """
    if 0.9 <= percentage <= 1.0:
        return (1, 3)      # max strength
    if 0.8 <= percentage < 0.9:
        return (3, 6)      # strength
    if 0.7 <= percentage < 0.8:
        return (6, 10)     # hypertrophy
    if 0.6 <= percentage < 0.7:
        return (10, 15)    # hypertrophy / endurance
    return (15, 20)
