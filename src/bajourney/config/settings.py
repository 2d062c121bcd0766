"""Configuration and settings persistence."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from bajourney.config.paths import JourneyPaths

logger = logging.getLogger(__name__)

DEFAULT_LEARNER = "default"


def detect_terminal_theme() -> str:
    """Detect terminal light/dark preference."""
    # COLORFGBG is "fg;bg" where bg < 7 means dark
    colorfgbg = os.environ.get("COLORFGBG", "")
    if colorfgbg:
        try:
            parts = colorfgbg.split(";")
            if len(parts) >= 2:
                bg = int(parts[-1])
                return "textual-light" if bg >= 7 else "textual-dark"
        except (ValueError, IndexError):
            pass

    # Most modern terminals default to dark
    return "textual-dark"


class Settings:
    """Persistent settings for BA Journey.

    Instances are created once at startup and passed to whatever needs
    them.
    """

    _defaults: dict[str, Any] = {
        "learner": DEFAULT_LEARNER,
        # theme intentionally not in defaults - we detect it
    }

    def __init__(self, paths: JourneyPaths) -> None:
        self.paths = paths
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self.paths.global_settings

    def _load(self) -> None:
        """Load settings from disk."""
        if self.path.exists():
            try:
                self._data = json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable settings %s: %s", self.path, e)
                self._data = {}
        else:
            self._data = {}

    def _save(self) -> None:
        """Save settings to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            logger.info("Saved settings to %s", self.path)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)

    def get(self, key: str) -> Any:
        """Get a setting value, falling back to default."""
        return self._data.get(key, self._defaults.get(key))

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and persist to disk."""
        self._data[key] = value
        self._save()

    @property
    def theme(self) -> str:
        """Get the current theme, detecting from terminal if not set."""
        saved = self._data.get("theme")
        if saved:
            return str(saved)
        return detect_terminal_theme()

    @theme.setter
    def theme(self, value: str) -> None:
        self.set("theme", value)

    @property
    def curriculum_path(self) -> Path | None:
        """Configured curriculum file, or None for the bundled one."""
        saved = self._data.get("curriculum_path")
        if saved:
            return Path(saved).expanduser().resolve()
        return None

    @curriculum_path.setter
    def curriculum_path(self, value: str | Path | None) -> None:
        if value is None:
            self._data.pop("curriculum_path", None)
            self._save()
            return
        self.set("curriculum_path", str(value))

    @property
    def learner(self) -> str:
        """Name of the learner whose progress is tracked."""
        return str(self.get("learner") or DEFAULT_LEARNER)

    @learner.setter
    def learner(self, value: str) -> None:
        self.set("learner", value)
