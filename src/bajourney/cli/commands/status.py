"""Status command: phase table and overall progress."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bajourney.cli.context import open_session
from bajourney.journey import queries
from bajourney.tui.widgets.journey_labels import (
    PHASE_STATUS_ICONS,
    format_percentage,
)


def cmd_status(args: argparse.Namespace) -> int:
    """Print every phase with its derived status and progress."""
    session = open_session(args)
    if session is None:
        return 1
    state = session.state

    table = Table(title=session.curriculum.title, show_lines=False)
    table.add_column("", width=2)
    table.add_column("Phase")
    table.add_column("Status")
    table.add_column("Progress", justify="right")

    for phase in queries.phases_ordered(state):
        status = queries.phase_status(state, phase.id)
        icon, style = PHASE_STATUS_ICONS[status]
        table.add_row(
            Text(icon, style=style),
            Text(f"Phase {phase.order}: {phase.title}", style=style),
            status.value,
            format_percentage(queries.phase_progress(state, phase.id)),
        )

    console = Console()
    console.print(table)
    console.print(f"Learner: {session.learner}")
    console.print(f"Overall: {format_percentage(queries.journey_progress(state))}")

    step = queries.next_unlocked_step(state)
    if step is not None:
        console.print(f"Next: {step.title} ({step.id})")
    elif queries.is_finished(state):
        console.print("Journey complete.")
    return 0
