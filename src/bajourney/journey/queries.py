"""Read-only queries over a journey state.

Every function here is pure: no I/O, no mutation. Absence (unknown ids,
end of content) is reported as ``None`` rather than raised.
"""

from __future__ import annotations

from collections.abc import Iterator

from bajourney.models.curriculum import (
    Phase,
    PhaseProgress,
    PhaseStatus,
    ProgressStatus,
    Section,
    Step,
)
from bajourney.models.journey import JourneyState


def phases_ordered(state: JourneyState) -> list[Phase]:
    """All phases sorted by order."""
    return sorted(state.phases, key=lambda p: p.order)


def sections_of_phase(state: JourneyState, phase_id: str) -> list[Section]:
    """Sections of a phase sorted by order."""
    return sorted(
        (s for s in state.sections if s.phase_id == phase_id),
        key=lambda s: s.order,
    )


def steps_of_section(state: JourneyState, section_id: str) -> list[Step]:
    """Steps of a section sorted by order."""
    return sorted(
        (s for s in state.steps if s.section_id == section_id),
        key=lambda s: s.order,
    )


def steps_of_phase(state: JourneyState, phase_id: str) -> list[Step]:
    """All steps of a phase, section by section."""
    steps: list[Step] = []
    for section in sections_of_phase(state, phase_id):
        steps.extend(steps_of_section(state, section.id))
    return steps


def iter_steps(state: JourneyState) -> Iterator[Step]:
    """Yield every step in curriculum order (phase, section, step).

    Empty sections and phases contribute nothing.
    """
    for phase in phases_ordered(state):
        yield from steps_of_phase(state, phase.id)


def step_by_id(state: JourneyState, step_id: str) -> Step | None:
    return next((s for s in state.steps if s.id == step_id), None)


def phase_by_id(state: JourneyState, phase_id: str) -> Phase | None:
    return next((p for p in state.phases if p.id == phase_id), None)


def phase_by_slug(state: JourneyState, slug: str) -> Phase | None:
    return next((p for p in state.phases if p.slug == slug), None)


def section_for_step(state: JourneyState, step_id: str) -> Section | None:
    """Section owning a step, or None if the step is unknown."""
    step = step_by_id(state, step_id)
    if step is None:
        return None
    return next((s for s in state.sections if s.id == step.section_id), None)


def phase_for_step(state: JourneyState, step_id: str) -> Phase | None:
    """Phase owning a step, or None if the step is unknown."""
    section = section_for_step(state, step_id)
    if section is None:
        return None
    return phase_by_id(state, section.phase_id)


def next_phase(state: JourneyState, phase_id: str) -> Phase | None:
    """Phase immediately after the given one by order."""
    phase = phase_by_id(state, phase_id)
    if phase is None:
        return None
    return next((p for p in state.phases if p.order == phase.order + 1), None)


def next_unlocked_step(state: JourneyState) -> Step | None:
    """First unlocked step in curriculum order.

    Returns None in terminal states (everything locked or completed).
    """
    for step in iter_steps(state):
        if state.progress.get(step.id) is ProgressStatus.UNLOCKED:
            return step
    return None


def current_phase(state: JourneyState) -> Phase | None:
    """Phase holding the learner's frontier step."""
    step = next_unlocked_step(state)
    if step is None:
        return None
    return phase_for_step(state, step.id)


def _count_completed(state: JourneyState, steps: list[Step]) -> int:
    return sum(
        1 for s in steps if state.progress.get(s.id) is ProgressStatus.COMPLETED
    )


def phase_progress(state: JourneyState, phase_id: str) -> PhaseProgress:
    """Completed and total steps of a phase, with a rounded percentage."""
    steps = steps_of_phase(state, phase_id)
    return PhaseProgress.from_counts(_count_completed(state, steps), len(steps))


def journey_progress(state: JourneyState) -> PhaseProgress:
    """Completed and total steps over the whole curriculum."""
    steps = list(iter_steps(state))
    return PhaseProgress.from_counts(_count_completed(state, steps), len(steps))


def phase_status(state: JourneyState, phase_id: str) -> PhaseStatus:
    """Derive a phase's status from its steps' progress.

    Rules are evaluated in order; ``current`` must win over the weaker
    ``unlocked`` fallback when a phase mixes completed and unlocked
    steps.
    """
    if not sections_of_phase(state, phase_id):
        return PhaseStatus.LOCKED

    statuses = [state.progress.get(s.id) for s in steps_of_phase(state, phase_id)]
    if statuses and all(s is ProgressStatus.COMPLETED for s in statuses):
        return PhaseStatus.COMPLETED
    if any(s is ProgressStatus.UNLOCKED for s in statuses):
        return PhaseStatus.CURRENT
    if any(s is ProgressStatus.COMPLETED for s in statuses):
        return PhaseStatus.UNLOCKED
    return PhaseStatus.LOCKED


def is_finished(state: JourneyState) -> bool:
    """Whether every step of a non-empty curriculum is completed."""
    return bool(state.steps) and all(
        state.progress.get(s.id) is ProgressStatus.COMPLETED for s in state.steps
    )
