"""
Configuration constants for the set calculator.

The formula constant is part of the model, not a tunable: user settings
(see io/settings_store.py) only cover CLI defaults.
"""

from typing import Final

# =============================================================================
# BERGER EQUATION
# =============================================================================

BERGER_K: Final[float] = 0.0262  # Empirical exponent per effective rep
MAX_EFFORT: Final[float] = 10.0  # RPE 10 = zero reps in reserve

# =============================================================================
# EQUIPMENT
# =============================================================================

DEFAULT_INCREMENT: Final[float] = 5.0  # Fallback step for the custom profile
DEFAULT_EQUIPMENT: Final[str] = "none"
CUSTOM_EQUIPMENT: Final[str] = "custom"
DEFAULT_DIRECTION: Final[str] = "nearest"
GRID_TOLERANCE: Final[float] = 1e-9  # Quotients this close to an integer are on the grid

# =============================================================================
# INPUT LIMITS (boundary policy, not enforced by core)
# =============================================================================

MAX_REPS_INPUT: Final[int] = 50

# =============================================================================
# DISPLAY
# =============================================================================

DISPLAY_DECIMALS: Final[int] = 1
MAX_DISPLAY_DECIMALS: Final[int] = 6
PLACEHOLDER: Final[str] = "—"
