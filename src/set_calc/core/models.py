"""
Data models for set-calc.

All values are immutable and live for a single calculation call.  Set
values (reps, weights, RPE) are not range-checked here: the boundary layer
in io/serializers.py validates user input before it reaches the core.
"""

from dataclasses import dataclass, field
from typing import Literal

RoundingDirection = Literal["nearest", "down", "up"]
CalculationMode = Literal["weight", "reps"]

ROUNDING_DIRECTIONS: tuple[str, ...] = ("nearest", "down", "up")


@dataclass(frozen=True)
class ReferenceSet:
    """A set the lifter has already performed."""

    reps: float
    plate_weight: float  # Loaded weight, excluding the apparatus base
    effort: float  # RPE, (0, 10]


@dataclass(frozen=True)
class TargetRepsSet:
    """Target for weight mode: how many reps, at what RPE."""

    reps: float
    effort: float


@dataclass(frozen=True)
class TargetWeightSet:
    """Target for reps mode: how much plate weight, at what RPE."""

    plate_weight: float
    effort: float


@dataclass(frozen=True)
class IncrementRule:
    """Achievable weights are whole multiples of a fixed step."""

    increment: float


@dataclass(frozen=True)
class EnumeratedRule:
    """Achievable weights are a fixed set (e.g. a dumbbell rack)."""

    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate ordering."""
        for lo, hi in zip(self.weights, self.weights[1:]):
            if not lo < hi:
                raise ValueError("weights must be sorted ascending and unique")


QuantizationRule = IncrementRule | EnumeratedRule


@dataclass(frozen=True)
class EquipmentProfile:
    """
    One entry of the equipment catalog.

    base_weight is the resistance the apparatus contributes on its own
    (sled, bar carriage); the lifter only loads plate weight on top of it.
    """

    key: str
    label: str
    base_weight: float
    rule: QuantizationRule | None


@dataclass(frozen=True)
class EquipmentSelection:
    """
    Equipment chosen for a calculation.

    The custom_* fields only matter for the "custom" key; catalog
    profiles ignore them.
    """

    key: str = "none"
    custom_base_weight: float | None = None
    custom_increment: float | None = None
    custom_weights: tuple[float, ...] | None = None


@dataclass(frozen=True)
class ResolvedEquipment:
    """Concrete base weight and rounding rule for one calculation."""

    base_weight: float
    rule: QuantizationRule | None


@dataclass(frozen=True)
class TargetWeightResult:
    """Outcome of solving for weight."""

    exact_plate_weight: float
    rounded_plate_weight: float
    rounded_reps: float
    target_reps: float
    target_effort: float
    base_weight: float
    estimated_max: float  # Total weight (plate + base) at 1 rep, RPE 10


@dataclass(frozen=True)
class TargetRepsResult:
    """Outcome of solving for reps."""

    exact_reps: float
    rounded_plate_weight: float
    rounded_reps: float
    target_plate_weight: float
    target_effort: float
    base_weight: float
    estimated_max: float


@dataclass(frozen=True)
class CalculationRequest:
    """
    Everything one calculation needs, passed explicitly.

    mode="weight" expects a TargetRepsSet, mode="reps" a TargetWeightSet.
    """

    mode: CalculationMode
    reference: ReferenceSet
    target: TargetRepsSet | TargetWeightSet
    equipment: EquipmentSelection = field(default_factory=EquipmentSelection)
    direction: RoundingDirection = "nearest"
