"""Reset command: forget a learner's progress."""

from __future__ import annotations

import argparse

from bajourney.cli.context import learner_for
from bajourney.config.paths import JourneyPaths
from bajourney.config.settings import Settings
from bajourney.persistence.progress_store import ProgressWriter


def cmd_reset(args: argparse.Namespace) -> int:
    """Delete the saved progress snapshot for the selected learner."""
    paths = JourneyPaths.for_workspace()
    learner = learner_for(args, Settings(paths))

    if not args.yes:
        answer = input(f"Delete saved progress for '{learner}'? [y/N] ")
        if answer.strip().lower() not in {"y", "yes"}:
            print("Aborted.")
            return 1

    if ProgressWriter(paths, learner).clear():
        print(f"Progress for '{learner}' cleared.")
    else:
        print(f"No saved progress for '{learner}'.")
    return 0
