"""Widgets for the journey TUI."""

from .journey_labels import (
    PHASE_STATUS_ICONS,
    STEP_STATUS_ICONS,
    format_percentage,
    format_phase_label,
    format_progress_dots,
    format_step_label,
)

__all__ = [
    "PHASE_STATUS_ICONS",
    "STEP_STATUS_ICONS",
    "format_percentage",
    "format_phase_label",
    "format_progress_dots",
    "format_step_label",
]
