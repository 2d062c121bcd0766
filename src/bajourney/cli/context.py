"""Shared context helpers for CLI command modules."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from bajourney.config.paths import JourneyPaths, is_valid_learner_name
from bajourney.config.settings import DEFAULT_LEARNER, Settings
from bajourney.content.loader import (
    Curriculum,
    CurriculumLoadError,
    load_curriculum,
    load_default_curriculum,
)
from bajourney.journey.transitions import recover_frontier
from bajourney.models.journey import JourneyState
from bajourney.models.validation import CurriculumValidationError
from bajourney.persistence.progress_store import ProgressReader, ProgressWriter
from bajourney.persistence.schema import SchemaError
from bajourney.shell.navigator import JourneyNavigator

logger = logging.getLogger(__name__)


@dataclass
class JourneySession:
    """Everything a command needs to work on one learner's journey."""

    paths: JourneyPaths
    settings: Settings
    curriculum: Curriculum
    learner: str
    writer: ProgressWriter
    navigator: JourneyNavigator

    @property
    def state(self) -> JourneyState:
        return self.navigator.state


def learner_for(args: argparse.Namespace, settings: Settings) -> str:
    """Learner from --learner, falling back to settings.

    A settings value that is not a plain directory name is ignored in
    favor of the default learner.
    """
    learner = getattr(args, "learner", None) or settings.learner
    if not is_valid_learner_name(learner):
        logger.warning("Ignoring invalid learner name %r", learner)
        print(
            f"Warning: invalid learner name '{learner}'; using '{DEFAULT_LEARNER}'",
            file=sys.stderr,
        )
        return DEFAULT_LEARNER
    return learner


def curriculum_source(
    args: argparse.Namespace, settings: Settings
) -> Path | None:
    """Curriculum file from --curriculum or settings; None means bundled."""
    return getattr(args, "curriculum", None) or settings.curriculum_path


def load_curriculum_or_error(path: Path | None) -> Curriculum | None:
    """Load a curriculum or print a user-facing error and return None."""
    try:
        if path is None:
            return load_default_curriculum()
        return load_curriculum(path)
    except CurriculumLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def open_session(args: argparse.Namespace) -> JourneySession | None:
    """Load content and saved progress for the selected learner.

    Prints a user-facing error and returns None when the curriculum or
    the progress snapshot cannot be used.
    """
    paths = JourneyPaths.for_workspace()
    settings = Settings(paths)
    learner = learner_for(args, settings)

    curriculum = load_curriculum_or_error(curriculum_source(args, settings))
    if curriculum is None:
        return None

    try:
        snapshot = ProgressReader.load(paths, learner)
    except SchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("  Run 'ba-journey reset' to start over.", file=sys.stderr)
        return None

    saved = None
    if snapshot is not None:
        if snapshot.curriculum_id and snapshot.curriculum_id != curriculum.id:
            print(
                f"Warning: saved progress belongs to curriculum "
                f"'{snapshot.curriculum_id}'; starting '{curriculum.id}' fresh",
                file=sys.stderr,
            )
        else:
            saved = snapshot.progress

    try:
        if saved is None:
            state = curriculum.new_journey()
        else:
            state = JourneyState.new(
                curriculum.phases,
                curriculum.sections,
                curriculum.steps,
                saved,
                curriculum_id=curriculum.id,
            )
    except CurriculumValidationError as e:
        print("Curriculum errors:", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        return None

    state = recover_frontier(state)
    writer = ProgressWriter(paths, learner)
    logger.info("Opened journey %s for learner %s", curriculum.id, learner)
    return JourneySession(
        paths=paths,
        settings=settings,
        curriculum=curriculum,
        learner=learner,
        writer=writer,
        navigator=JourneyNavigator(state, on_progress=writer.save),
    )
