"""
Effort model: the Berger equation in RPE form.

Effort is expressed as RPE on a 0–10 scale with reps in reserve
RIR = 10 − RPE.  The independent variable of the equation is the number of
effective reps, i.e. reps performed plus reps left in the tank:

  effective_reps = reps + (10 − RPE)
  pct            = 100 × exp(K × (effective_reps − 1)),   K = 0.0262

pct is the estimated one-rep max expressed as a percentage of the weight
lifted: 100 at one effective rep, growing with every rep of capacity.

Inverse:

  effective_reps = 1 + ln(pct / 100) / K
  reps           = max(0, effective_reps − (10 − RPE))

References
----------
Berger 1961 (repetitions-to-failure vs. %1RM), Helms et al. 2016
(RIR-based RPE scale).
"""

from __future__ import annotations

import math

from .config import BERGER_K, MAX_EFFORT


class DomainError(ValueError):
    """Raised when an input lies outside the domain of the formula."""

    pass


def reps_in_reserve(effort: float) -> float:
    """RIR = 10 − RPE."""
    return MAX_EFFORT - effort


def effective_reps(reps: float, effort: float) -> float:
    """Reps performed plus reps in reserve."""
    return reps + reps_in_reserve(effort)


def to_load_percentage(reps: float, effort: float) -> float:
    """
    Estimated 1RM as a percentage of the weight lifted for reps @ effort.

    Defined for every real input; RPE 10 means the reps were taken to
    failure, so effective reps equal actual reps.

    Args:
        reps: Reps performed (fractional allowed)
        effort: RPE, nominally (0, 10]

    Returns:
        Percentage (100 at 1 rep @ RPE 10)
    """
    return 100.0 * math.exp(BERGER_K * (effective_reps(reps, effort) - 1.0))


def from_load_percentage(pct: float, effort: float) -> float:
    """
    Reps achievable at effort when the 1RM is pct % of the weight.

    Args:
        pct: Percentage as returned by to_load_percentage
        effort: RPE the set should stop at

    Returns:
        Rep count, clamped to ≥ 0

    Raises:
        DomainError: If pct ≤ 0 (logarithm undefined)
    """
    if pct <= 0:
        raise DomainError(f"load percentage must be positive, got {pct}")
    eff = 1.0 + math.log(pct / 100.0) / BERGER_K
    return max(0.0, eff - reps_in_reserve(effort))


def estimate_one_rep_max(total_weight: float, reps: float, effort: float) -> float:
    """
    Estimated total weight for a single rep at RPE 10.

    Args:
        total_weight: Weight moved in the set (plate + base)
        reps: Reps performed
        effort: RPE of the set

    Returns:
        Estimated 1RM in the same unit as total_weight
    """
    return total_weight * to_load_percentage(reps, effort) / 100.0
