"""Learner progress snapshots.

Stands in for the hosted backend: the journey engine is handed an
initial progress map at session start and every completion's output is
written back. Saving replaces the whole snapshot (last writer wins).
"""

from __future__ import annotations

import json
import logging
import tempfile
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from bajourney.config.paths import JourneyPaths
from bajourney.models.curriculum import ProgressStatus
from bajourney.models.journey import JourneyState
from bajourney.persistence.schema import (
    InvalidSchemaError,
    migrate_if_needed,
    write_schema_fields,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressSnapshot:
    """A persisted progress map with its provenance."""

    curriculum_id: str
    learner: str
    progress: dict[str, ProgressStatus]
    updated_at: datetime | None = None


def _atomic_write(path: Path, text: str) -> None:
    """Write to a temp file beside ``path``, then rename over it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", dir=path.parent, suffix=".tmp", delete=False, encoding="utf-8"
    ) as f:
        f.write(text)
        temp_path = Path(f.name)
    try:
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


class ProgressWriter:
    """Persists a learner's progress map to JSON."""

    def __init__(self, paths: JourneyPaths, learner: str) -> None:
        self.learner = learner
        self.file_path = paths.progress_file(learner)

    def save(self, state: JourneyState) -> None:
        """Save the progress map of a journey (overwrites file)."""
        document: dict[str, Any] = {
            **write_schema_fields("progress"),
            "curriculum": state.curriculum_id,
            "learner": self.learner,
            "updated_at": datetime.now(UTC).isoformat(),
            "progress": state.progress_to_dict(),
        }
        _atomic_write(self.file_path, json.dumps(document, indent=2) + "\n")
        logger.debug("Saved progress for %s to %s", self.learner, self.file_path)

    def clear(self) -> bool:
        """Delete the snapshot. Returns True if one existed."""
        if not self.file_path.exists():
            return False
        self.file_path.unlink()
        logger.info("Cleared progress for %s", self.learner)
        return True


class ProgressReader:
    """Reads a learner's progress map from JSON."""

    @classmethod
    def load(cls, paths: JourneyPaths, learner: str) -> ProgressSnapshot | None:
        """Load a learner's snapshot.

        Returns:
            ProgressSnapshot if a file exists, None otherwise.

        Raises:
            InvalidSchemaError: If the file is corrupt or not a progress file.
        """
        file_path = paths.progress_file(learner)
        if not file_path.exists():
            return None

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidSchemaError(file_path, f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise InvalidSchemaError(file_path, "Top level must be an object")

        data = migrate_if_needed(data, file_path, "progress")

        raw_progress = data.get("progress") or {}
        if not isinstance(raw_progress, dict):
            raise InvalidSchemaError(file_path, "'progress' must be an object")
        try:
            progress = JourneyState.progress_from_dict(raw_progress)
        except ValueError as e:
            raise InvalidSchemaError(file_path, f"Unknown progress status: {e}") from e

        updated_raw = data.get("updated_at")
        try:
            updated_at = datetime.fromisoformat(updated_raw) if updated_raw else None
        except (TypeError, ValueError) as e:
            raise InvalidSchemaError(
                file_path, f"Invalid 'updated_at' timestamp {updated_raw!r}"
            ) from e

        return ProgressSnapshot(
            curriculum_id=str(data.get("curriculum") or ""),
            learner=str(data.get("learner") or learner),
            progress=progress,
            updated_at=updated_at,
        )
