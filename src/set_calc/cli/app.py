"""Shared Typer app object, shared option types, and settings utility."""

from typing import Annotated, Optional

import typer

from ..io.settings_store import Settings, load_settings

# Shared --equipment option type used by the calculation commands
EquipmentOption = Annotated[
    Optional[str],
    typer.Option(
        "--equipment",
        "-e",
        help="Equipment key (see 'equipment'); defaults to the configured one",
    ),
]

BaseWeightOption = Annotated[
    Optional[float],
    typer.Option("--base-weight", help="Apparatus base weight (custom equipment only)"),
]

IncrementOption = Annotated[
    Optional[float],
    typer.Option("--increment", help="Plate increment (custom equipment only)"),
]

WeightsOption = Annotated[
    Optional[str],
    typer.Option(
        "--weights",
        help="Comma-separated available weights, e.g. '5,10,15' (custom equipment only)",
    ),
]

RoundOption = Annotated[
    Optional[str],
    typer.Option("--round", help="Rounding direction for the achievable weight: nearest, down, up"),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="set-calc",
    help="RPE set calculator: weight or reps for a target set from a reference set.",
    no_args_is_help=False,
    invoke_without_command=True,
)


def get_settings() -> Settings:
    """Load CLI defaults from the bundled and user settings files."""
    return load_settings()
