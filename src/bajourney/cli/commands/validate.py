"""Validate command: structural checks for curriculum files."""

from __future__ import annotations

import argparse
import sys

from bajourney.cli.context import curriculum_source, load_curriculum_or_error
from bajourney.config.paths import JourneyPaths
from bajourney.config.settings import Settings


def cmd_validate(args: argparse.Namespace) -> int:
    """Report every structural problem in a curriculum."""
    path = args.file
    if path is None:
        path = curriculum_source(args, Settings(JourneyPaths.for_workspace()))

    curriculum = load_curriculum_or_error(path)
    if curriculum is None:
        return 1

    report = curriculum.validate()
    errors = list(report.errors)
    warnings = list(report.warnings)
    if args.strict:
        errors.extend(warnings)
        warnings = []

    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    if errors:
        print("Validation errors:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    print(
        f"{curriculum.id}: {len(curriculum.phases)} phases, "
        f"{len(curriculum.sections)} sections, {len(curriculum.steps)} steps. OK"
    )
    return 0
