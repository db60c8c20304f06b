"""
CLI entry point using Typer.

Provides commands for set calculations:
- weight: Weight for a target rep count and RPE
- reps: Reps achievable at a target weight and RPE
- equipment: List equipment profiles
"""

import typer

from . import views
from .app import app
from .commands import calculate, equipment  # noqa: F401  (registers commands)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    """
    RPE set calculator. Run without a command for interactive mode.
    """
    if ctx.invoked_subcommand is not None:
        return  # A sub-command was given; let it handle things

    # ── Interactive main menu ───────────────────────────────────────────────
    views.console.print()
    views.console.print("[bold cyan]set-calc[/bold cyan] — RPE set calculator")
    views.console.print()

    menu = {
        "1": ("weight",    "Calculate weight (from target reps)"),
        "2": ("reps",      "Calculate reps (from target weight)"),
        "3": ("equipment", "List equipment"),
        "0": ("quit",      "Quit"),
    }

    for key, (_, desc) in menu.items():
        views.console.print(f"  \\[{key}] {desc}")

    views.console.print()
    choice = views.console.input("Choose [1]: ").strip() or "1"

    if choice == "0":
        raise typer.Exit(0)

    cmd_map = {k: v[0] for k, v in menu.items()}
    chosen = cmd_map.get(choice)

    if chosen is None:
        views.print_error(f"Unknown choice: {choice}")
        raise typer.Exit(1)

    if chosen == "weight":
        calculate.menu_calculate("weight")
    elif chosen == "reps":
        calculate.menu_calculate("reps")
    elif chosen == "equipment":
        ctx.invoke(equipment.equipment_list, json_out=False)


if __name__ == "__main__":
    app()
