"""
Weight quantization.

Maps an exact weight to one the lifter can actually load, either on a
fixed increment grid (plates, pin stacks) or onto an enumerated set of
items (dumbbells).  Three directions are supported:

  nearest : closest achievable weight
  down    : heaviest achievable weight not above the exact one
  up      : lightest achievable weight not below the exact one

Tie-breaking differs between the two rule kinds: on the increment grid an
exact midpoint goes up (112.5 → 115 at step 5), while between two
enumerated items the lighter one wins (6.5 → 5 between 5 and 8).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .config import GRID_TOLERANCE
from .models import EnumeratedRule, IncrementRule, QuantizationRule, RoundingDirection


def round_to_increment(
    weight: float,
    increment: float,
    direction: RoundingDirection = "nearest",
) -> float:
    """
    Round weight onto the grid of whole multiples of increment.

    Args:
        weight: Exact weight
        increment: Grid step; ≤ 0 leaves weight unchanged
        direction: "nearest" (half up), "down" (floor) or "up" (ceil)

    Returns:
        Quantized weight
    """
    if increment <= 0:
        return weight
    steps = weight / increment
    # On-grid weights can land a hair off an integer (0.7 / 0.1 = 6.999...)
    if math.isfinite(steps) and abs(steps - round(steps)) < GRID_TOLERANCE:
        steps = round(steps)
    if direction == "down":
        n = math.floor(steps)
    elif direction == "up":
        n = math.ceil(steps)
    else:
        # Half up, not Python's round-half-even
        n = math.floor(steps + 0.5)
    return n * increment


def round_to_enumerated(
    weight: float,
    weights: Sequence[float] | None,
    direction: RoundingDirection = "nearest",
) -> float:
    """
    Snap weight to one of the available weights.

    Out-of-range weights clamp to the lightest (down) or heaviest (up)
    item rather than failing.

    Args:
        weight: Exact weight
        weights: Available weights, ascending; empty or None leaves weight unchanged
        direction: "nearest", "down" or "up"

    Returns:
        An element of weights (or weight itself when weights is empty)
    """
    if not weights:
        return weight

    if direction == "down":
        below = [w for w in weights if w <= weight]
        return max(below) if below else min(weights)

    if direction == "up":
        above = [w for w in weights if w >= weight]
        return min(above) if above else max(weights)

    closest = weights[0]
    min_diff = abs(weight - closest)
    for w in weights[1:]:
        diff = abs(weight - w)
        if diff < min_diff:  # strict: earlier (lighter) item keeps ties
            min_diff = diff
            closest = w
    return closest


def round_weight(
    weight: float,
    rule: QuantizationRule | None,
    direction: RoundingDirection = "nearest",
) -> float:
    """
    Quantize weight according to an equipment rounding rule.

    Args:
        weight: Exact weight
        rule: IncrementRule, EnumeratedRule, or None for no quantization
        direction: "nearest", "down" or "up"

    Returns:
        Achievable weight
    """
    if isinstance(rule, EnumeratedRule):
        return round_to_enumerated(weight, rule.weights, direction)
    if isinstance(rule, IncrementRule):
        return round_to_increment(weight, rule.increment, direction)
    return weight
