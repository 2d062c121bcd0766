"""Configuration management for BA Journey."""
from __future__ import annotations

from bajourney.config.paths import JourneyPaths, is_valid_learner_name
from bajourney.config.settings import DEFAULT_LEARNER, Settings, detect_terminal_theme

__all__ = [
    "DEFAULT_LEARNER",
    "JourneyPaths",
    "Settings",
    "detect_terminal_theme",
    "is_valid_learner_name",
]
