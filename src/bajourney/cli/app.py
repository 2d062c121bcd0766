"""CLI orchestration and command routing."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from bajourney.cli.commands import (
    cmd_complete,
    cmd_next,
    cmd_reset,
    cmd_status,
    cmd_tui,
    cmd_validate,
)
from bajourney.cli.parser import parse_args

logger = logging.getLogger(__name__)


def dispatch(args: argparse.Namespace) -> int:
    """Route parsed args to the correct command handler."""
    command_handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "tui": cmd_tui,
        "status": cmd_status,
        "complete": cmd_complete,
        "next": cmd_next,
        "validate": cmd_validate,
        "reset": cmd_reset,
    }

    if args.command is None:
        return cmd_tui(args)

    handler = command_handlers.get(args.command)
    if handler is None:
        return cmd_tui(args)

    return handler(args)


def run(
    argv: Sequence[str] | None = None,
    *,
    configure_logging: Callable[[], None] | None = None,
) -> int:
    """Parse args, apply shared CLI setup, and execute command."""
    args = parse_args(argv)

    # Resolve against the invoking directory before changing into --workdir
    if args.curriculum:
        args.curriculum = args.curriculum.resolve()
    if getattr(args, "file", None):
        args.file = args.file.resolve()

    if args.workdir:
        workdir = args.workdir.resolve()
        workdir.mkdir(parents=True, exist_ok=True)
        os.chdir(workdir)

    if configure_logging is not None:
        configure_logging()

    logger.info("Working directory: %s", Path.cwd())
    return dispatch(args)
