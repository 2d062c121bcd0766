"""Step-to-step paging within a section.

Paging never crosses a section boundary in either direction. Moving
the learner into the next section or phase is the transition engine's
job (see ``transitions.following_step``).
"""

from __future__ import annotations

from dataclasses import dataclass

from bajourney.journey.queries import step_by_id, steps_of_section
from bajourney.models.curriculum import Step
from bajourney.models.journey import JourneyState


@dataclass(frozen=True, slots=True)
class StepPosition:
    """Where a step sits inside its section."""

    index: int
    total: int
    previous: Step | None
    next: Step | None

    @property
    def label(self) -> str:
        """Human readable position, e.g. "Step 2 of 3"."""
        return f"Step {self.index + 1} of {self.total}"


def previous_step(state: JourneyState, step_id: str) -> Step | None:
    """Step immediately before this one in the same section."""
    step = step_by_id(state, step_id)
    if step is None:
        return None
    siblings = steps_of_section(state, step.section_id)
    index = next(i for i, s in enumerate(siblings) if s.id == step_id)
    return siblings[index - 1] if index > 0 else None


def has_previous_step(state: JourneyState, step_id: str) -> bool:
    return previous_step(state, step_id) is not None


def next_step(state: JourneyState, step_id: str) -> Step | None:
    """Step after this one in the same section, regardless of lock status."""
    step = step_by_id(state, step_id)
    if step is None:
        return None
    return next(
        (
            s
            for s in steps_of_section(state, step.section_id)
            if s.order == step.order + 1
        ),
        None,
    )


def step_position(state: JourneyState, step_id: str) -> StepPosition | None:
    """Bundle index, section size and neighbours for a step screen."""
    step = step_by_id(state, step_id)
    if step is None:
        return None
    siblings = steps_of_section(state, step.section_id)
    index = next(i for i, s in enumerate(siblings) if s.id == step_id)
    return StepPosition(
        index=index,
        total=len(siblings),
        previous=previous_step(state, step_id),
        next=next_step(state, step_id),
    )
