"""
CLI view formatters using Rich for pretty console output.

Handles number formatting and the result / catalog tables.
"""

import math

from rich.console import Console
from rich.table import Table

from ..core.config import DISPLAY_DECIMALS, PLACEHOLDER
from ..core.equipment import describe_rule
from ..core.models import EquipmentProfile, TargetRepsResult, TargetWeightResult

console = Console()


def format_number(value: float | None, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Format a number for display: fixed decimals, trailing zeros trimmed.

    Non-finite values (and None) render as the placeholder, so a broken
    calculation never shows as a number.

    Examples:
        81.24 → "81.2",  115.0 → "115",  inf → "—"
    """
    if value is None or not math.isfinite(value):
        return PLACEHOLDER
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _result_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("", style="dim")
    table.add_column("Weight", justify="right", style="bold cyan")
    table.add_column("Reps", justify="right", style="bold")
    table.add_column("RPE", justify="right", style="magenta")
    return table


def _print_load_footer(base_weight: float, estimated_max: float, decimals: int) -> None:
    if base_weight > 0:
        console.print(
            f"[dim]Weights are plate weight; the apparatus adds {format_number(base_weight, decimals)}.[/dim]"
        )
    console.print(f"[dim]Estimated 1RM (total load): {format_number(estimated_max, decimals)}[/dim]")


def print_weight_result(
    result: TargetWeightResult,
    equipment_label: str,
    decimals: int = DISPLAY_DECIMALS,
) -> None:
    """
    Print the answer to "what weight for these reps?".

    Args:
        result: Calculator output
        equipment_label: Shown in the table title
        decimals: Display precision
    """
    table = _result_table(f"Target weight — {equipment_label}")
    rpe = format_number(result.target_effort, decimals)
    table.add_row(
        "Exact",
        format_number(result.exact_plate_weight, decimals),
        format_number(result.target_reps, decimals),
        rpe,
    )
    table.add_row(
        "Achievable",
        format_number(result.rounded_plate_weight, decimals),
        format_number(result.rounded_reps, decimals),
        rpe,
    )
    console.print(table)
    _print_load_footer(result.base_weight, result.estimated_max, decimals)


def print_reps_result(
    result: TargetRepsResult,
    equipment_label: str,
    decimals: int = DISPLAY_DECIMALS,
) -> None:
    """
    Print the answer to "how many reps at this weight?".

    Args:
        result: Calculator output
        equipment_label: Shown in the table title
        decimals: Display precision
    """
    table = _result_table(f"Target reps — {equipment_label}")
    rpe = format_number(result.target_effort, decimals)
    table.add_row(
        "Exact",
        format_number(result.target_plate_weight, decimals),
        format_number(result.exact_reps, decimals),
        rpe,
    )
    table.add_row(
        "Achievable",
        format_number(result.rounded_plate_weight, decimals),
        format_number(result.rounded_reps, decimals),
        rpe,
    )
    console.print(table)
    _print_load_footer(result.base_weight, result.estimated_max, decimals)


def print_equipment_table(profiles: list[EquipmentProfile]) -> None:
    """Print the equipment catalog."""
    table = Table(title="Equipment")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Equipment")
    table.add_column("Base", justify="right")
    table.add_column("Rounding")

    for p in profiles:
        custom = p.key == "custom"
        table.add_row(
            p.key,
            p.label,
            "user" if custom else format_number(p.base_weight),
            "user (default " + describe_rule(p.rule) + ")" if custom else describe_rule(p.rule),
        )

    console.print(table)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")