"""
Console rendering of step sequences with rich.

format_metric(value)     - Render one metric value as text
format_edge(key)         - Render an edge key as "A–B"
step_detail(step)        - Table of one step's highlights and metrics
step_table(sequence)     - Table with one row per step
print_sequence(sequence) - Print the step table (and the outcome) to a console
"""

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from localtypes import EdgeKey, Metric
from steps import Action, Step, StepSequence

ACTION_STYLES = {
    Action.VISIT: "bold cyan",
    Action.DISCOVER: "cyan",
    Action.TRAVERSE: "cyan",
    Action.CONSIDER: "yellow",
    Action.ACCEPT: "bold green",
    Action.REJECT: "red",
    Action.MEET: "bold magenta",
    Action.COMPLETE: "bold green",
    Action.ERROR: "bold red",
}


def format_metric(value: Metric) -> str:
    if isinstance(value, tuple):
        return ", ".join("·" if item is None else format_metric(item) for item in value)
    if isinstance(value, float):
        return f"{value:g}"
    return "" if value is None else str(value)


def format_edge(key: EdgeKey) -> str:
    source, target = key
    return f"{source}–{target}"


def _format_ids(ids: Iterable[object]) -> str:
    return ", ".join(sorted(str(node_id) for node_id in ids))


def step_detail(step: Step) -> Table:
    """Two-column table describing a single step."""
    table = Table(show_header=False, box=None, title=f"Step {step.index}")
    table.add_column("field", style="dim")
    table.add_column("value")
    table.add_row("action", Text(step.action.value, style=ACTION_STYLES.get(step.action, "")))
    table.add_row("description", step.description)
    if step.highlighted_nodes:
        table.add_row("nodes", _format_ids(step.highlighted_nodes))
    if step.highlighted_edges:
        table.add_row(
            "edges", ", ".join(sorted(format_edge(key) for key in step.highlighted_edges))
        )
    for name, value in step.metrics.items():
        table.add_row(name, format_metric(value))
    if step.error is not None:
        table.add_row("error", Text(step.error.value, style="bold red"))
    return table


def step_table(sequence: StepSequence, title: str = "Steps") -> Table:
    """One row per step: index, action, description, highlights."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Action")
    table.add_column("Description")
    table.add_column("Nodes")
    table.add_column("Edges")
    for step in sequence:
        table.add_row(
            str(step.index),
            Text(step.action.value, style=ACTION_STYLES.get(step.action, "")),
            step.description,
            _format_ids(step.highlighted_nodes),
            ", ".join(sorted(format_edge(key) for key in step.highlighted_edges)),
        )
    return table


def print_sequence(
    sequence: StepSequence, title: str = "Steps", console: Console | None = None
) -> None:
    console = console or Console()
    console.print(step_table(sequence, title))
    final = sequence.final
    if final.error is not None:
        console.print(Text.assemble((final.error.value, "bold red"), ": ", final.description))
    elif final.outcome is not None:
        console.print(f"Outcome: {final.outcome}", markup=False)
