"""TUI launch command."""

from __future__ import annotations

import argparse

from bajourney.cli.context import open_session
from bajourney.tui.app import JourneyApp


def cmd_tui(args: argparse.Namespace) -> int:
    """Launch the TUI application."""
    session = open_session(args)
    if session is None:
        return 1
    app = JourneyApp(
        session.navigator,
        session.settings,
        journey_title=session.curriculum.title,
    )
    app.run()
    return 0
