"""
Input validation and JSON conversion.

Everything typed by a user passes through here before it reaches the core,
which assumes already-valid numbers.
"""

import math
from dataclasses import asdict
from typing import Any

from ..core.config import MAX_EFFORT, MAX_REPS_INPUT
from ..core.equipment import EQUIPMENT_CATALOG
from ..core.models import ROUNDING_DIRECTIONS, RoundingDirection, TargetRepsResult, TargetWeightResult


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def _parse_number(raw: str | float | int | None, label: str) -> float:
    """Parse raw into a float (NaN when not numeric); empty input is an error."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError(f"{label} is required")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return math.nan
    return value


def validate_reps(raw: str | float | int | None, label: str = "Reps") -> float:
    """
    Validate a rep count.

    Args:
        raw: User input
        label: Field name used in the "required" message

    Returns:
        Reps as float (0 to 50 inclusive)

    Raises:
        ValidationError: If empty, non-numeric, negative or above 50
    """
    value = _parse_number(raw, label)
    if math.isnan(value) or value < 0:
        raise ValidationError("Reps must be ≥ 0")
    if value > MAX_REPS_INPUT:
        raise ValidationError(f"Reps must be ≤ {MAX_REPS_INPUT}")
    return value


def validate_weight(raw: str | float | int | None, label: str = "Weight") -> float:
    """
    Validate a plate weight.

    Raises:
        ValidationError: If empty, non-numeric or not positive
    """
    value = _parse_number(raw, label)
    if math.isnan(value) or value <= 0 or math.isinf(value):
        raise ValidationError("Weight must be positive")
    return value


def validate_effort(raw: str | float | int | None, label: str = "RPE") -> float:
    """
    Validate an RPE value in (0, 10].

    Raises:
        ValidationError: If empty, non-numeric, not positive or above 10
    """
    value = _parse_number(raw, label)
    if math.isnan(value) or value <= 0:
        raise ValidationError("RPE must be positive")
    if value > MAX_EFFORT:
        raise ValidationError(f"RPE must be ≤ {MAX_EFFORT:g}")
    return value


def validate_custom_base_weight(raw: str | float | int | None, label: str = "Base weight") -> float:
    """
    Validate a custom apparatus base weight (0 allowed).

    Raises:
        ValidationError: If empty, non-numeric or negative
    """
    value = _parse_number(raw, label)
    if math.isnan(value) or value < 0 or math.isinf(value):
        raise ValidationError("Base weight must be ≥ 0")
    return value


def validate_increment(raw: str | float | int | None, label: str = "Increment") -> float:
    """
    Validate a custom rounding increment.

    Raises:
        ValidationError: If empty, non-numeric or not positive
    """
    value = _parse_number(raw, label)
    if math.isnan(value) or value <= 0 or math.isinf(value):
        raise ValidationError("Increment must be positive")
    return value


def validate_equipment_key(key: str) -> str:
    """
    Validate an equipment key against the catalog.

    Raises:
        ValidationError: If key is not in the catalog
    """
    if key not in EQUIPMENT_CATALOG:
        valid = ", ".join(EQUIPMENT_CATALOG)
        raise ValidationError(f"Unknown equipment '{key}'. Valid keys: {valid}")
    return key


def validate_direction(direction: str) -> RoundingDirection:
    """
    Validate a rounding direction.

    Raises:
        ValidationError: If direction is not nearest, down or up
    """
    if direction not in ROUNDING_DIRECTIONS:
        raise ValidationError(
            f"Invalid rounding direction: {direction}. Must be one of: {', '.join(ROUNDING_DIRECTIONS)}"
        )
    return direction  # type: ignore


def parse_weights_list(raw: str) -> tuple[float, ...]:
    """
    Parse a comma-separated list of available weights.

    Example: "5, 10, 12.5" → (5.0, 10.0, 12.5)

    Returns:
        Sorted tuple of unique weights

    Raises:
        ValidationError: If the list is empty or any entry is not positive
    """
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if not parts:
        raise ValidationError("Weights list is empty")
    weights: set[float] = set()
    for part in parts:
        try:
            value = float(part)
        except ValueError as e:
            raise ValidationError(f"Invalid weight in list: '{part}'") from e
        if not math.isfinite(value) or value <= 0:
            raise ValidationError(f"Weights must be positive, got '{part}'")
        weights.add(value)
    return tuple(sorted(weights))


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def result_to_dict(result: TargetWeightResult | TargetRepsResult) -> dict[str, Any]:
    """
    Convert a calculation result to a JSON-compatible dict.

    Non-finite numbers become None so the output stays valid JSON.
    """
    data = {k: _finite_or_none(v) for k, v in asdict(result).items()}
    data["mode"] = "weight" if isinstance(result, TargetWeightResult) else "reps"
    return data
