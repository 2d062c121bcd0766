"""Next command: where the learner's frontier is."""

from __future__ import annotations

import argparse

from bajourney.cli.context import open_session
from bajourney.journey import navigation, queries


def cmd_next(args: argparse.Namespace) -> int:
    """Print the unlocked step and where it sits in the curriculum."""
    session = open_session(args)
    if session is None:
        return 1
    state = session.state

    step = queries.next_unlocked_step(state)
    if step is None:
        if queries.is_finished(state):
            print("Journey complete. Nothing left to do.")
        else:
            print("No step is unlocked.")
        return 0

    phase = queries.phase_for_step(state, step.id)
    section = queries.section_for_step(state, step.id)
    position = navigation.step_position(state, step.id)
    print(f"{step.title}")
    print(f"  Id: {step.id}")
    print(f"  Type: {step.step_type.value}")
    if phase is not None:
        print(f"  Phase: {phase.title}")
    if section is not None and position is not None:
        print(f"  Section: {section.title} ({position.label})")
    print(f"\nRun 'ba-journey complete {step.id}' when done.")
    return 0
