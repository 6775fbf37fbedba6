"""Console rendering of estimate results."""

from __future__ import annotations

import io
import json
from typing import Final

from rich import box
from rich.console import Console
from rich.table import Table

from flight_carbon.results import Estimate

BANNER: Final[str] = r"""

-------WELCOME TO THE CARBON FOOTPRINT CLI-------
                   __|__
            --------(_)--------
              O  O       O  O
"""

_TABLE_WIDTH: Final[int] = 80


def estimate_rows(estimate: Estimate) -> list[tuple[str, str, str]]:
    """Return the Metric/Value/Unit rows shown for ``estimate``."""

    return [
        ("Carbon emissions (g)", f"{estimate.grams:.2f}", "g"),
        ("Carbon emissions (kg)", f"{estimate.kilograms:.2f}", "kg"),
        ("Carbon emissions (lb)", f"{estimate.pounds:.2f}", "lb"),
        ("Carbon emissions (t)", f"{estimate.metric_tons:.2f}", "t"),
        ("Distance", f"{estimate.distance_value:.2f}", estimate.distance_unit),
    ]


def build_estimate_table(estimate: Estimate) -> Table:
    """Build a borderless rich table for ``estimate``."""

    table = Table(box=box.SIMPLE_HEAD, show_edge=False, pad_edge=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Unit")
    for row in estimate_rows(estimate):
        table.add_row(*row)
    return table


def render_estimate_table(estimate: Estimate) -> str:
    """Render ``estimate`` as plain text, without colour or markup."""

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=_TABLE_WIDTH,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )
    console.print(build_estimate_table(estimate))
    return buffer.getvalue().rstrip("\n")


def estimate_to_json(estimate: Estimate) -> str:
    """Serialize ``estimate`` for machine consumption."""

    return json.dumps(estimate.to_dict(), sort_keys=True)
