"""
YAML → typed CLI settings.

Loads CLI defaults from defaults.yaml (bundled with the package) and
optionally merges user overrides from ~/.set-calc/config.yaml.

Usage:
    from set_calc.io.settings_store import load_settings
    settings = load_settings()
    settings.equipment  # "none"

If the user override file has parse errors, a warning is emitted and the
file is ignored.  A user value of the wrong type or outside its allowed set
is ignored individually (with a warning); the bundled value stays in effect.
"""

from __future__ import annotations

import importlib.resources
import math
import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..core.config import (
    DEFAULT_DIRECTION,
    DEFAULT_EQUIPMENT,
    DEFAULT_INCREMENT,
    DISPLAY_DECIMALS,
    MAX_DISPLAY_DECIMALS,
)
from ..core.equipment import EQUIPMENT_CATALOG
from ..core.models import ROUNDING_DIRECTIONS, RoundingDirection

USER_DIR_NAME = ".set-calc"
USER_FILE_NAME = "config.yaml"


@dataclass(frozen=True)
class Settings:
    """CLI defaults; command-line options override these."""

    equipment: str = DEFAULT_EQUIPMENT
    rounding: RoundingDirection = DEFAULT_DIRECTION  # type: ignore[assignment]
    custom_base_weight: float = 0.0
    custom_increment: float = DEFAULT_INCREMENT
    decimals: int = DISPLAY_DECIMALS


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; warn and return {} if it cannot be parsed."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"set-calc: ignoring settings file {path} ({exc})", stacklevel=2)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        warnings.warn(f"set-calc: ignoring settings file {path} (not a mapping)", stacklevel=2)
        return {}
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _section(config: dict, name: str) -> dict:
    value = config.get(name, {})
    return value if isinstance(value, dict) else {}


def _number(
    value: Any,
    key: str,
    default: float,
    minimum: float,
    strict: bool,
    maximum: float | None = None,
) -> float:
    """
    Coerce value to a finite float within bounds, else warn and use default.

    Bounds: ≥ minimum (> minimum if strict) and, when given, ≤ maximum.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        warnings.warn(f"set-calc: '{key}' must be a finite number; using {default:g}", stacklevel=3)
        return default
    if maximum is not None and value > maximum:
        warnings.warn(f"set-calc: '{key}' must be ≤ {maximum:g}; using {default:g}", stacklevel=3)
        return default
    if value < minimum or (strict and value == minimum):
        bound = ">" if strict else "≥"
        warnings.warn(f"set-calc: '{key}' must be {bound} {minimum:g}; using {default:g}", stacklevel=3)
        return default
    return float(value)


def _choice(value: Any, key: str, default: str, allowed: tuple[str, ...] | list[str]) -> str:
    if value not in allowed:
        warnings.warn(
            f"set-calc: '{key}' must be one of {', '.join(allowed)}; using {default}",
            stacklevel=3,
        )
        return default
    return str(value)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_yaml_path() -> Path | None:
    """Return the path to the bundled defaults.yaml, or None if not found."""
    ref = importlib.resources.files("set_calc").joinpath("defaults.yaml")
    if not ref.is_file():
        return None
    return Path(str(ref))


def get_user_yaml_path() -> Path | None:
    """Return ~/.set-calc/config.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / USER_DIR_NAME / USER_FILE_NAME
    return p if p.exists() else None


def load_config() -> dict[str, Any]:
    """
    Load and merge raw settings from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/set_calc/defaults.yaml
    2. User override at ~/.set-calc/config.yaml

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_yaml_path()
    if bundled is not None:
        config = _deep_merge(config, _load_yaml_file(bundled))

    user = get_user_yaml_path()
    if user is not None:
        config = _deep_merge(config, _load_yaml_file(user))

    return config


def settings_from_dict(config: dict[str, Any]) -> Settings:
    """Convert merged raw config to Settings, falling back per key on bad values."""
    defaults = Settings()
    calc = _section(config, "calculator")
    custom = _section(config, "custom_equipment")
    display = _section(config, "display")

    decimals = _number(
        display.get("decimals", defaults.decimals),
        "display.decimals",
        defaults.decimals,
        0,
        False,
        MAX_DISPLAY_DECIMALS,
    )

    return Settings(
        equipment=_choice(
            calc.get("equipment", defaults.equipment),
            "calculator.equipment",
            defaults.equipment,
            list(EQUIPMENT_CATALOG),
        ),
        rounding=_choice(  # type: ignore[arg-type]
            calc.get("rounding", defaults.rounding),
            "calculator.rounding",
            defaults.rounding,
            ROUNDING_DIRECTIONS,
        ),
        custom_base_weight=_number(
            custom.get("base_weight", defaults.custom_base_weight),
            "custom_equipment.base_weight",
            defaults.custom_base_weight,
            0,
            False,
        ),
        custom_increment=_number(
            custom.get("increment", defaults.custom_increment),
            "custom_equipment.increment",
            defaults.custom_increment,
            0,
            True,
        ),
        decimals=int(decimals),
    )


def load_settings() -> Settings:
    """Load bundled defaults merged with the user's overrides."""
    return settings_from_dict(load_config())
