"""
Pure computation for the set calculator.

Nothing in this package reads input or writes output; every function is a
deterministic function of its arguments.
"""

from .calculator import calculate, compute_target_reps, compute_target_weight
from .effort import DomainError, from_load_percentage, to_load_percentage
from .equipment import EQUIPMENT_CATALOG, resolve
from .rounding import round_to_enumerated, round_to_increment, round_weight

__all__ = [
    "DomainError",
    "EQUIPMENT_CATALOG",
    "calculate",
    "compute_target_reps",
    "compute_target_weight",
    "from_load_percentage",
    "resolve",
    "round_to_enumerated",
    "round_to_increment",
    "round_weight",
    "to_load_percentage",
]
