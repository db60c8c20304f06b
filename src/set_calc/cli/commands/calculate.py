"""Calculation commands: weight, reps, and the interactive menu helper."""

import json
from typing import Annotated, Callable

import typer

from ...core.calculator import calculate
from ...core.effort import DomainError
from ...core.equipment import get_profile
from ...core.models import (
    CalculationMode,
    CalculationRequest,
    EquipmentSelection,
    ReferenceSet,
    TargetRepsSet,
    TargetWeightSet,
)
from ...io.serializers import (
    ValidationError,
    parse_weights_list,
    result_to_dict,
    validate_custom_base_weight,
    validate_direction,
    validate_effort,
    validate_equipment_key,
    validate_increment,
    validate_reps,
    validate_weight,
)
from ...io.settings_store import Settings
from .. import views
from ..app import (
    BaseWeightOption,
    EquipmentOption,
    IncrementOption,
    JsonOption,
    RoundOption,
    WeightsOption,
    app,
    get_settings,
)

RefWeightOption = Annotated[
    float,
    typer.Option("--ref-weight", "-w", help="Plate weight of the reference set"),
]
RefRepsOption = Annotated[
    float,
    typer.Option("--ref-reps", "-r", help="Reps performed in the reference set"),
]
RefRpeOption = Annotated[
    float,
    typer.Option("--ref-rpe", help="RPE of the reference set (0-10]"),
]
TargetRpeOption = Annotated[
    float,
    typer.Option("--target-rpe", help="RPE to stop the target set at (0-10]"),
]


def build_selection(
    settings: Settings,
    equipment: str | None,
    base_weight: float | None = None,
    increment: float | None = None,
    weights: str | None = None,
) -> EquipmentSelection:
    """
    Validate equipment inputs and build an EquipmentSelection.

    Custom base weight and increment fall back to the configured defaults.

    Raises:
        ValidationError: If any equipment input is invalid
    """
    key = validate_equipment_key(equipment or settings.equipment)

    if key != "custom":
        if base_weight is not None or increment is not None or weights is not None:
            views.print_warning(
                f"--base-weight/--increment/--weights only apply to custom equipment; ignored for '{key}'"
            )
        return EquipmentSelection(key=key)

    return EquipmentSelection(
        key=key,
        custom_base_weight=validate_custom_base_weight(
            base_weight if base_weight is not None else settings.custom_base_weight
        ),
        custom_increment=validate_increment(
            increment if increment is not None else settings.custom_increment
        ),
        custom_weights=parse_weights_list(weights) if weights is not None else None,
    )


def _equipment_label(selection: EquipmentSelection, decimals: int) -> str:
    profile = get_profile(selection.key)
    label = profile.label if profile is not None else selection.key
    if selection.key == "custom":
        base = views.format_number(selection.custom_base_weight, decimals)
        label = f"Custom (base {base})"
    return label


def _run(request: CalculationRequest, settings: Settings, json_out: bool) -> None:
    """Run request and print the result; exit 1 on a domain error."""
    try:
        result = calculate(request)
    except DomainError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        data = result_to_dict(result)
        data["equipment"] = request.equipment.key
        data["rounding"] = request.direction
        print(json.dumps(data, indent=2))
        return

    label = _equipment_label(request.equipment, settings.decimals)
    if request.mode == "weight":
        views.print_weight_result(result, label, settings.decimals)  # type: ignore[arg-type]
    else:
        views.print_reps_result(result, label, settings.decimals)  # type: ignore[arg-type]


@app.command()
def weight(
    ref_weight: RefWeightOption,
    ref_reps: RefRepsOption,
    ref_rpe: RefRpeOption,
    target_reps: Annotated[
        float,
        typer.Option("--target-reps", "-t", help="Reps wanted in the target set"),
    ],
    target_rpe: TargetRpeOption,
    equipment: EquipmentOption = None,
    base_weight: BaseWeightOption = None,
    increment: IncrementOption = None,
    weights: WeightsOption = None,
    round_direction: RoundOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Calculate the weight for a target rep count and RPE.
    """
    settings = get_settings()
    try:
        request = CalculationRequest(
            mode="weight",
            reference=ReferenceSet(
                reps=validate_reps(ref_reps),
                plate_weight=validate_weight(ref_weight),
                effort=validate_effort(ref_rpe),
            ),
            target=TargetRepsSet(
                reps=validate_reps(target_reps),
                effort=validate_effort(target_rpe),
            ),
            equipment=build_selection(settings, equipment, base_weight, increment, weights),
            direction=validate_direction(round_direction or settings.rounding),
        )
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    _run(request, settings, json_out)


@app.command()
def reps(
    ref_weight: RefWeightOption,
    ref_reps: RefRepsOption,
    ref_rpe: RefRpeOption,
    target_weight: Annotated[
        float,
        typer.Option("--target-weight", "-t", help="Plate weight for the target set"),
    ],
    target_rpe: TargetRpeOption,
    equipment: EquipmentOption = None,
    base_weight: BaseWeightOption = None,
    increment: IncrementOption = None,
    weights: WeightsOption = None,
    round_direction: RoundOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Calculate the reps achievable at a target weight and RPE.
    """
    settings = get_settings()
    try:
        request = CalculationRequest(
            mode="reps",
            reference=ReferenceSet(
                reps=validate_reps(ref_reps),
                plate_weight=validate_weight(ref_weight),
                effort=validate_effort(ref_rpe),
            ),
            target=TargetWeightSet(
                plate_weight=validate_weight(target_weight),
                effort=validate_effort(target_rpe),
            ),
            equipment=build_selection(settings, equipment, base_weight, increment, weights),
            direction=validate_direction(round_direction or settings.rounding),
        )
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    _run(request, settings, json_out)


def _prompt(label: str, validator: Callable[[str], float], default: str | None = None) -> float:
    """Prompt until validator accepts the input."""
    hint = f" \\[{default}]" if default is not None else ""
    while True:
        raw = views.console.input(f"{label}{hint}: ").strip()
        if not raw and default is not None:
            raw = default
        try:
            return validator(raw)
        except ValidationError as e:
            views.print_error(str(e))


def _prompt_equipment(settings: Settings) -> EquipmentSelection:
    while True:
        raw = views.console.input(f"Equipment \\[{settings.equipment}]: ").strip() or settings.equipment
        try:
            key = validate_equipment_key(raw)
            break
        except ValidationError as e:
            views.print_error(str(e))

    if key != "custom":
        return EquipmentSelection(key=key)

    base_weight = _prompt(
        "Base weight", validate_custom_base_weight, views.format_number(settings.custom_base_weight)
    )
    weights = _prompt_weights()
    if weights is not None:
        return EquipmentSelection(key=key, custom_base_weight=base_weight, custom_weights=weights)

    return EquipmentSelection(
        key=key,
        custom_base_weight=base_weight,
        custom_increment=_prompt(
            "Increment", validate_increment, views.format_number(settings.custom_increment)
        ),
    )


def _prompt_weights() -> tuple[float, ...] | None:
    """Optional list of available weights; blank means round to an increment."""
    while True:
        raw = views.console.input("Available weights, comma-separated (blank for an increment): ").strip()
        if not raw:
            return None
        try:
            return parse_weights_list(raw)
        except ValidationError as e:
            views.print_error(str(e))


def menu_calculate(mode: CalculationMode) -> None:
    """Interactive weight/reps calculation called from the main menu."""
    settings = get_settings()

    views.console.print()
    views.console.print("[bold]Reference set[/bold]")
    ref_weight = _prompt("Weight", validate_weight)
    ref_reps = _prompt("Reps", validate_reps)
    ref_rpe = _prompt("RPE", validate_effort)

    views.console.print("[bold]Target set[/bold]")
    if mode == "weight":
        target: TargetRepsSet | TargetWeightSet = TargetRepsSet(
            reps=_prompt("Reps", validate_reps),
            effort=_prompt("RPE", validate_effort),
        )
    else:
        target = TargetWeightSet(
            plate_weight=_prompt("Weight", validate_weight),
            effort=_prompt("RPE", validate_effort),
        )

    request = CalculationRequest(
        mode=mode,
        reference=ReferenceSet(reps=ref_reps, plate_weight=ref_weight, effort=ref_rpe),
        target=target,
        equipment=_prompt_equipment(settings),
        direction=settings.rounding,
    )
    views.console.print()
    _run(request, settings, json_out=False)
