"""Argument parser construction for the BA Journey CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from bajourney.config.paths import is_valid_learner_name


def learner_name(value: str) -> str:
    """argparse type for --learner: a plain directory name."""
    if not is_valid_learner_name(value):
        raise argparse.ArgumentTypeError(
            f"invalid learner name '{value}' (no path separators or dot names)"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        description="BA Journey - guided onboarding for new Business Analysts"
    )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Working directory for journey progress (default: current directory)",
    )
    parser.add_argument(
        "--curriculum",
        "-c",
        type=Path,
        help="Curriculum YAML/JSON file (default: settings, then bundled content)",
    )
    parser.add_argument(
        "--learner",
        "-l",
        type=learner_name,
        help="Learner whose progress to use (default: from settings)",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "tui",
        help="Open the interactive journey (default)",
    )

    subparsers.add_parser(
        "status",
        help="Show phase statuses and overall progress",
    )

    complete_parser = subparsers.add_parser(
        "complete",
        help="Mark the unlocked step as completed",
    )
    complete_parser.add_argument(
        "step_id",
        help="Id of the step to complete",
    )

    subparsers.add_parser(
        "next",
        help="Show the step to work on next",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a curriculum file for structural problems",
    )
    validate_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Curriculum file (default: the configured curriculum)",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings (empty phases or sections) as errors",
    )

    reset_parser = subparsers.add_parser(
        "reset",
        help="Delete the learner's saved progress",
    )
    reset_parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Do not ask for confirmation",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments from argv (or sys.argv when omitted)."""
    parser = build_parser()
    if argv is None:
        return parser.parse_args()
    return parser.parse_args(list(argv))
