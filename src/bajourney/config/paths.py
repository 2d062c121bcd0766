"""Centralized path management for BA Journey.

Follows XDG Base Directory Specification:
- Config: $XDG_CONFIG_HOME/bajourney (default: ~/.config/bajourney)

Learner progress lives in the workspace (``.bajourney/``) so separate
working directories keep separate journeys.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def is_valid_learner_name(name: str) -> bool:
    """Whether a learner name is usable as a single directory name."""
    if not name or name in {".", ".."}:
        return False
    return "/" not in name and "\\" not in name and "\0" not in name


@dataclass
class JourneyPaths:
    """Path layout for one workspace, resolved against the XDG homes."""

    workspace: Path

    _config_home: Path = field(default_factory=_xdg_config_home)

    @classmethod
    def for_workspace(cls, workspace: Path | None = None) -> "JourneyPaths":
        """Build paths for a workspace (default: current directory)."""
        return cls(workspace=(workspace or Path.cwd()).resolve())

    # === WORKSPACE PATHS ===

    @property
    def workspace_config(self) -> Path:
        """Workspace .bajourney/ directory."""
        return self.workspace / ".bajourney"

    @property
    def learners_dir(self) -> Path:
        return self.workspace_config / "learners"

    def learner_dir(self, learner: str) -> Path:
        """Directory for one learner's journey files.

        Raises:
            ValueError: If the name would leave the learners directory.
        """
        if not is_valid_learner_name(learner):
            raise ValueError(f"Invalid learner name: {learner!r}")
        return self.learners_dir / learner

    def progress_file(self, learner: str) -> Path:
        """Get the progress.json snapshot path for a learner."""
        return self.learner_dir(learner) / "progress.json"

    @property
    def debug_log(self) -> Path:
        """Debug log: .bajourney/debug.log"""
        return self.workspace_config / "debug.log"

    # === GLOBAL PATHS (XDG compliant) ===

    @property
    def global_config_dir(self) -> Path:
        """Global config: ~/.config/bajourney/"""
        return self._config_home / "bajourney"

    @property
    def global_settings(self) -> Path:
        """Global settings file: ~/.config/bajourney/settings.json"""
        return self.global_config_dir / "settings.json"
