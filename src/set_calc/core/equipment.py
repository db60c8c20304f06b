"""
Equipment-aware load system.

The formula works on the total resistance the body moves.  On most
apparatus that is more than what the lifter loads:

  total_weight = plate_weight + base_weight

e.g. a Smith machine bar carriage (~25 lb) or a 45° leg press sled
(~167 lb).  Each profile also carries the rounding rule that decides which
plate weights are actually achievable.

Catalog
-------
  none          :   0 lb base, 5 lb steps
  smith_machine :  25 lb base, 5 lb steps
  leg_press_45  : 167 lb base, 5 lb steps
  dumbbells     :   0 lb base, one dumbbell from a typical rack
  dumbbells_x2  :   0 lb base, a pair from the same rack (weights doubled)
  cable_purple  :   0 lb base, 2.5 lb pin stack steps
  custom        : base and step supplied by the user
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .config import CUSTOM_EQUIPMENT, DEFAULT_INCREMENT
from .models import (
    EnumeratedRule,
    EquipmentProfile,
    EquipmentSelection,
    IncrementRule,
    QuantizationRule,
    ResolvedEquipment,
)


# ---------------------------------------------------------------------------
# Equipment catalog
# Each item: {label, base_weight, increment | weights}
#   increment → grid rounding
#   weights   → enumerated rounding (ascending, unique)
# ---------------------------------------------------------------------------

DUMBBELL_RACK: tuple[float, ...] = (
    3, 5, 8, 10, 12, 15, 17.5, 20, 25, 30, 35, 40, 45, 50, 55, 60, 65, 70,
)

EQUIPMENT_CATALOG: dict[str, dict] = {
    "none": {
        "label": "None (free weight / bodyweight)",
        "base_weight": 0.0,
        "increment": 5.0,
    },
    "smith_machine": {
        "label": "Smith machine",
        "base_weight": 25.0,
        "increment": 5.0,
    },
    "leg_press_45": {
        "label": "45° leg press",
        "base_weight": 167.0,
        "increment": 5.0,
    },
    "dumbbells": {
        "label": "Dumbbells (x1)",
        "base_weight": 0.0,
        "weights": DUMBBELL_RACK,
    },
    "dumbbells_x2": {
        "label": "Dumbbells (x2, pair)",
        "base_weight": 0.0,
        "weights": tuple(w * 2 for w in DUMBBELL_RACK),
    },
    "cable_purple": {
        "label": "Cable stack (purple)",
        "base_weight": 0.0,
        "increment": 2.5,
    },
    CUSTOM_EQUIPMENT: {
        "label": "Custom (enter base weight and increment)",
        "base_weight": None,  # user enters custom_base_weight
        "increment": None,  # user enters custom_increment
    },
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _rule_from_entry(entry: dict) -> QuantizationRule | None:
    if entry.get("weights"):
        return EnumeratedRule(tuple(float(w) for w in entry["weights"]))
    if entry.get("increment"):
        return IncrementRule(float(entry["increment"]))
    return None


def _usable(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def _custom_rule(
    custom_increment: float | None,
    custom_weights: Sequence[float] | None,
) -> QuantizationRule:
    if custom_weights:
        return EnumeratedRule(tuple(sorted(set(float(w) for w in custom_weights))))
    if _usable(custom_increment) and custom_increment > 0:  # type: ignore[operator]
        return IncrementRule(float(custom_increment))  # type: ignore[arg-type]
    return IncrementRule(DEFAULT_INCREMENT)


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def get_profile(key: str) -> EquipmentProfile | None:
    """
    Return the catalog profile for key, or None if key is unknown.

    The custom profile is returned with its defaults (base 0, default step).
    """
    entry = EQUIPMENT_CATALOG.get(key)
    if entry is None:
        return None
    if key == CUSTOM_EQUIPMENT:
        return EquipmentProfile(
            key=key,
            label=entry["label"],
            base_weight=0.0,
            rule=IncrementRule(DEFAULT_INCREMENT),
        )
    return EquipmentProfile(
        key=key,
        label=entry["label"],
        base_weight=float(entry["base_weight"]),
        rule=_rule_from_entry(entry),
    )


def list_profiles() -> list[EquipmentProfile]:
    """All catalog profiles in display order."""
    return [get_profile(key) for key in EQUIPMENT_CATALOG]  # type: ignore[misc]


def resolve(
    key: str,
    custom_base_weight: float | None = None,
    custom_increment: float | None = None,
    custom_weights: Sequence[float] | None = None,
) -> ResolvedEquipment:
    """
    Resolve an equipment key to a base weight and rounding rule.

    Never fails: an unknown key resolves to no base weight and no rounding.

    Args:
        key: Catalog key (e.g. "smith_machine") or "custom"
        custom_base_weight: Base weight for "custom"; missing, non-finite or
            negative values fall back to 0
        custom_increment: Step for "custom"; missing, non-finite or ≤ 0
            values fall back to DEFAULT_INCREMENT
        custom_weights: Enumerated weights for "custom"; when given, they
            take precedence over custom_increment

    Returns:
        ResolvedEquipment
    """
    if key == CUSTOM_EQUIPMENT:
        base = (
            float(custom_base_weight)  # type: ignore[arg-type]
            if _usable(custom_base_weight) and custom_base_weight >= 0  # type: ignore[operator]
            else 0.0
        )
        return ResolvedEquipment(
            base_weight=base,
            rule=_custom_rule(custom_increment, custom_weights),
        )

    profile = get_profile(key)
    if profile is None:
        return ResolvedEquipment(base_weight=0.0, rule=None)
    return ResolvedEquipment(base_weight=profile.base_weight, rule=profile.rule)


def resolve_selection(selection: EquipmentSelection) -> ResolvedEquipment:
    """resolve() for an EquipmentSelection request object."""
    return resolve(
        selection.key,
        selection.custom_base_weight,
        selection.custom_increment,
        selection.custom_weights,
    )


def describe_rule(rule: QuantizationRule | None) -> str:
    """Short human-readable description of a rounding rule."""
    if isinstance(rule, EnumeratedRule):
        shown = ", ".join(f"{w:g}" for w in rule.weights)
        return f"one of {{{shown}}}"
    if isinstance(rule, IncrementRule):
        return f"steps of {rule.increment:g}"
    return "exact (no rounding)"
