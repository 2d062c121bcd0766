"""Complete command: record a finished step."""

from __future__ import annotations

import argparse
import sys

from bajourney.cli.context import open_session
from bajourney.journey import queries
from bajourney.journey.transitions import complete_step
from bajourney.models.curriculum import ProgressStatus


def cmd_complete(args: argparse.Namespace) -> int:
    """Complete the learner's unlocked step and save the new progress."""
    session = open_session(args)
    if session is None:
        return 1
    state = session.state

    step = queries.step_by_id(state, args.step_id)
    if step is None:
        print(f"Error: Step '{args.step_id}' not found", file=sys.stderr)
        return 1

    status = state.status_of(step.id)
    if status is ProgressStatus.COMPLETED:
        print(f"Step '{step.id}' is already completed.")
        return 0
    if status is ProgressStatus.LOCKED:
        print(f"Error: Step '{step.id}' is locked", file=sys.stderr)
        frontier = queries.next_unlocked_step(state)
        if frontier is not None:
            print(f"  Current step: {frontier.id}", file=sys.stderr)
        return 1

    new_state = complete_step(state, step.id)
    session.writer.save(new_state)

    print(f"Completed: {step.title}")
    following = queries.next_unlocked_step(new_state)
    if following is not None:
        print(f"Unlocked: {following.title} ({following.id})")
    elif queries.is_finished(new_state):
        print("Journey complete.")
    return 0
