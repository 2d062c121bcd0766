"""Journey query service, navigation resolver and transition engine."""

from .navigation import (
    StepPosition,
    has_previous_step,
    next_step,
    previous_step,
    step_position,
)
from .queries import (
    current_phase,
    is_finished,
    iter_steps,
    journey_progress,
    next_phase,
    next_unlocked_step,
    phase_by_id,
    phase_by_slug,
    phase_for_step,
    phase_progress,
    phase_status,
    phases_ordered,
    section_for_step,
    sections_of_phase,
    step_by_id,
    steps_of_phase,
    steps_of_section,
)
from .transitions import complete_step, following_step, recover_frontier

__all__ = [
    "StepPosition",
    "complete_step",
    "current_phase",
    "following_step",
    "has_previous_step",
    "is_finished",
    "iter_steps",
    "journey_progress",
    "next_phase",
    "next_step",
    "next_unlocked_step",
    "phase_by_id",
    "phase_by_slug",
    "phase_for_step",
    "phase_progress",
    "phase_status",
    "phases_ordered",
    "previous_step",
    "recover_frontier",
    "section_for_step",
    "sections_of_phase",
    "step_by_id",
    "step_position",
    "steps_of_phase",
    "steps_of_section",
]
