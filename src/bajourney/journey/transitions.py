"""Progress transitions: the only way a journey's progress changes.

Completing a step advances the unlocked frontier to the structurally
next step. Advancing works like incrementing a mixed-radix counter:
step carries into section, section carries into phase. Walking the
curriculum in order performs that carry and skips empty sections and
phases.
"""

from __future__ import annotations

import logging

from bajourney.journey.queries import iter_steps, step_by_id
from bajourney.models.curriculum import ProgressStatus, Step
from bajourney.models.journey import JourneyState

logger = logging.getLogger(__name__)


def following_step(state: JourneyState, step_id: str) -> Step | None:
    """Next step after this one in curriculum order.

    Crosses section and phase boundaries. Returns None for the last
    step of the curriculum or an unknown id.
    """
    steps = iter_steps(state)
    for step in steps:
        if step.id == step_id:
            return next(steps, None)
    return None


def complete_step(state: JourneyState, step_id: str) -> JourneyState:
    """Mark a step completed and unlock the step that follows it.

    A following step that is already completed keeps its status, so
    re-completing an earlier step is harmless. Unknown step ids leave
    the state untouched.

    Args:
        state: The current journey.
        step_id: The step whose completion criteria were met.

    Returns:
        A new JourneyState, or ``state`` itself for unknown ids.
    """
    if step_by_id(state, step_id) is None:
        logger.warning("Ignoring completion of unknown step %s", step_id)
        return state

    progress = dict(state.progress)
    progress[step_id] = ProgressStatus.COMPLETED

    successor = following_step(state, step_id)
    if successor is None:
        logger.info("Completed %s; end of curriculum reached", step_id)
    elif progress.get(successor.id) is ProgressStatus.COMPLETED:
        logger.debug("Completed %s; %s already completed", step_id, successor.id)
    else:
        progress[successor.id] = ProgressStatus.UNLOCKED
        logger.info("Completed %s; unlocked %s", step_id, successor.id)

    return state.with_progress(progress)


def recover_frontier(state: JourneyState) -> JourneyState:
    """Restore an unlocked frontier after loading saved progress.

    Saved progress can lose its frontier when content changes between
    sessions. If nothing is unlocked but work remains, the first step
    that is not completed becomes unlocked.

    Returns:
        A new JourneyState, or ``state`` if no recovery was needed.
    """
    if any(s is ProgressStatus.UNLOCKED for s in state.progress.values()):
        return state
    pending = next(
        (
            s
            for s in iter_steps(state)
            if state.progress.get(s.id) is not ProgressStatus.COMPLETED
        ),
        None,
    )
    if pending is None:
        return state
    logger.info("Recovered journey frontier at %s", pending.id)
    return state.with_progress({**state.progress, pending.id: ProgressStatus.UNLOCKED})
