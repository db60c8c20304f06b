"""
Set calculator: from a reference set to a target set.

Both queries go through the same estimated max:

  ref_total     = ref_plate + base
  estimated_max = ref_total × pct(ref_reps, ref_rpe) / 100

Weight mode (target reps + RPE given):

  target_total  = estimated_max × 100 / pct(target_reps, target_rpe)
  exact_plate   = target_total − base

Reps mode (target plate weight + RPE given):

  target_pct    = estimated_max × 100 / (target_plate + base)
  exact_reps    = reps(target_pct, target_rpe)

In both modes the plate weight is then quantized for the equipment and the
reps are recomputed at that achievable weight, so the caller gets an
"exact" answer and an "achievable" one.
"""

from __future__ import annotations

import math

from .effort import DomainError, estimate_one_rep_max, from_load_percentage, to_load_percentage
from .equipment import resolve_selection
from .models import (
    CalculationRequest,
    EquipmentSelection,
    ReferenceSet,
    RoundingDirection,
    TargetRepsResult,
    TargetRepsSet,
    TargetWeightResult,
    TargetWeightSet,
)
from .rounding import round_weight


def _estimated_max(reference: ReferenceSet, base_weight: float) -> float:
    ref_total = reference.plate_weight + base_weight
    if ref_total == 0:
        raise DomainError("reference total weight is zero; no max can be estimated")
    return estimate_one_rep_max(ref_total, reference.reps, reference.effort)


def _reps_at(plate_weight: float, base_weight: float, estimated_max: float, effort: float) -> float:
    """Reps achievable at plate_weight for a lifter with the given max; inf with no load."""
    total = plate_weight + base_weight
    if total <= 0:
        return math.inf
    return from_load_percentage(estimated_max * 100.0 / total, effort)


def compute_target_weight(
    reference: ReferenceSet,
    target: TargetRepsSet,
    equipment: EquipmentSelection,
    direction: RoundingDirection = "nearest",
) -> TargetWeightResult:
    """
    Plate weight needed for target.reps @ target.effort.

    Args:
        reference: Performed set (reps, plate weight, RPE)
        target: Desired reps and RPE
        equipment: Equipment selection (base weight + rounding rule)
        direction: How to quantize the exact weight

    Returns:
        TargetWeightResult with the exact plate weight, the achievable
        (rounded) plate weight and the reps at that achievable weight

    Raises:
        DomainError: If the reference total weight is zero
    """
    eq = resolve_selection(equipment)
    estimated_max = _estimated_max(reference, eq.base_weight)

    target_pct = to_load_percentage(target.reps, target.effort)
    target_total = estimated_max * 100.0 / target_pct
    exact_plate = target_total - eq.base_weight

    rounded_plate = round_weight(exact_plate, eq.rule, direction)
    rounded_reps = _reps_at(rounded_plate, eq.base_weight, estimated_max, target.effort)

    return TargetWeightResult(
        exact_plate_weight=exact_plate,
        rounded_plate_weight=rounded_plate,
        rounded_reps=rounded_reps,
        target_reps=target.reps,
        target_effort=target.effort,
        base_weight=eq.base_weight,
        estimated_max=estimated_max,
    )


def compute_target_reps(
    reference: ReferenceSet,
    target: TargetWeightSet,
    equipment: EquipmentSelection,
    direction: RoundingDirection = "nearest",
) -> TargetRepsResult:
    """
    Reps achievable with target.plate_weight @ target.effort.

    The given plate weight may not be loadable on the equipment, so it is
    also quantized and the reps at the achievable weight are reported.

    Args:
        reference: Performed set (reps, plate weight, RPE)
        target: Plate weight to use and RPE to stop at
        equipment: Equipment selection (base weight + rounding rule)
        direction: How to quantize target.plate_weight

    Returns:
        TargetRepsResult

    Raises:
        DomainError: If the reference total weight is zero
    """
    eq = resolve_selection(equipment)
    estimated_max = _estimated_max(reference, eq.base_weight)

    exact_reps = _reps_at(target.plate_weight, eq.base_weight, estimated_max, target.effort)

    rounded_plate = round_weight(target.plate_weight, eq.rule, direction)
    rounded_reps = _reps_at(rounded_plate, eq.base_weight, estimated_max, target.effort)

    return TargetRepsResult(
        exact_reps=exact_reps,
        rounded_plate_weight=rounded_plate,
        rounded_reps=rounded_reps,
        target_plate_weight=target.plate_weight,
        target_effort=target.effort,
        base_weight=eq.base_weight,
        estimated_max=estimated_max,
    )


def calculate(request: CalculationRequest) -> TargetWeightResult | TargetRepsResult:
    """
    Run the calculation described by request.

    Raises:
        ValueError: If request.target does not match request.mode
    """
    if request.mode == "weight":
        if not isinstance(request.target, TargetRepsSet):
            raise ValueError("weight mode needs a TargetRepsSet target")
        return compute_target_weight(
            request.reference, request.target, request.equipment, request.direction
        )
    if request.mode == "reps":
        if not isinstance(request.target, TargetWeightSet):
            raise ValueError("reps mode needs a TargetWeightSet target")
        return compute_target_reps(
            request.reference, request.target, request.equipment, request.direction
        )
    raise ValueError(f"Unknown mode '{request.mode}'. Valid modes: weight, reps")
