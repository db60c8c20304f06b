"""Equipment catalog command."""

import json

from ...core.equipment import list_profiles
from ...core.models import EnumeratedRule, IncrementRule
from .. import views
from ..app import JsonOption, app


@app.command("equipment")
def equipment_list(
    json_out: JsonOption = False,
) -> None:
    """
    List the available equipment profiles.
    """
    profiles = list_profiles()

    if json_out:
        rows = []
        for p in profiles:
            row: dict = {"key": p.key, "label": p.label}
            if p.key == "custom":
                row["base_weight"] = None
                row["increment"] = None
            else:
                row["base_weight"] = p.base_weight
                if isinstance(p.rule, IncrementRule):
                    row["increment"] = p.rule.increment
                elif isinstance(p.rule, EnumeratedRule):
                    row["weights"] = list(p.rule.weights)
            rows.append(row)
        print(json.dumps({"equipment": rows}, indent=2))
        return

    views.print_equipment_table(profiles)
