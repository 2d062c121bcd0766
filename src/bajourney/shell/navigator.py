"""View-mode navigation for the journey shell.

The navigator owns the canonical ``JourneyState`` for a session plus
the transient view state (which screen is showing). It decides what
to show by asking the query service and changes progress only through
``complete_step``; it holds no progress rules of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from bajourney.journey import navigation, queries
from bajourney.journey.transitions import complete_step
from bajourney.models.curriculum import Phase, PhaseStatus, ProgressStatus, Step
from bajourney.models.journey import JourneyState

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[JourneyState], None]


class ViewMode(Enum):
    """Screens the shell can show."""

    JOURNEY_MAP = "journey-map"
    PHASE_HERO = "phase-hero"
    STEP = "step"
    PHASE_COMPLETE = "phase-complete"


@dataclass(frozen=True, slots=True)
class ViewState:
    """Transient UI position. Never persisted."""

    mode: ViewMode = ViewMode.JOURNEY_MAP
    phase_slug: str | None = None
    step_id: str | None = None


JOURNEY_MAP_VIEW = ViewState()


class JourneyNavigator:
    """Single gateway between the UI and the journey engine."""

    def __init__(
        self,
        state: JourneyState,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.state = state
        self.view = JOURNEY_MAP_VIEW
        self._on_progress = on_progress

    # --- resolution ---

    @property
    def current_phase(self) -> Phase | None:
        """Phase named by the view, if it resolves."""
        if self.view.phase_slug is None:
            return None
        return queries.phase_by_slug(self.state, self.view.phase_slug)

    @property
    def current_step(self) -> Step | None:
        """Step named by the view, if it resolves."""
        if self.view.step_id is None:
            return None
        return queries.step_by_id(self.state, self.view.step_id)

    def resolved_view(self) -> ViewState:
        """The view to render, falling back to the journey map.

        A phase hero or step view whose target no longer resolves (for
        example after content changed) renders the journey map instead.
        """
        mode = self.view.mode
        if mode is ViewMode.PHASE_HERO and self.current_phase is None:
            return JOURNEY_MAP_VIEW
        if mode is ViewMode.STEP and self.current_step is None:
            return JOURNEY_MAP_VIEW
        return self.view

    def _show(self, view: ViewState) -> None:
        logger.debug("View %s -> %s", self.view, view)
        self.view = view

    def _show_step(self, step: Step) -> None:
        self._show(ViewState(mode=ViewMode.STEP, step_id=step.id))

    # --- journey map ---

    def begin_journey(self) -> None:
        """Jump to the learner's frontier step."""
        step = queries.next_unlocked_step(self.state)
        if step is not None:
            self._show_step(step)

    def open_phase(self, phase_id: str) -> None:
        """Show a phase hero, unless the phase is still locked."""
        phase = queries.phase_by_id(self.state, phase_id)
        if phase is None:
            return
        if queries.phase_status(self.state, phase.id) is PhaseStatus.LOCKED:
            logger.debug("Phase %s is locked", phase.id)
            return
        self._show(ViewState(mode=ViewMode.PHASE_HERO, phase_slug=phase.slug))

    def back_to_journey(self) -> None:
        self._show(JOURNEY_MAP_VIEW)

    # --- phase hero ---

    def begin_phase(self, phase_slug: str) -> None:
        """Enter a phase at its unlocked step, or at its first step."""
        phase = queries.phase_by_slug(self.state, phase_slug)
        if phase is None:
            return
        steps = queries.steps_of_phase(self.state, phase.id)
        unlocked = next(
            (s for s in steps if self.state.status_of(s.id) is ProgressStatus.UNLOCKED),
            None,
        )
        target = unlocked or (steps[0] if steps else None)
        if target is not None:
            self._show_step(target)

    def following_open_phase(self) -> Phase | None:
        """First phase after the shown one that is not locked.

        Empty phases stay locked, so they are skipped.
        """
        phase = self.current_phase
        while phase is not None:
            phase = queries.next_phase(self.state, phase.id)
            if (
                phase is not None
                and queries.phase_status(self.state, phase.id) is not PhaseStatus.LOCKED
            ):
                return phase
        return None

    def continue_to_next_phase(self) -> None:
        """From a completed phase, open the next phase that is not locked.

        Falls back to the journey map when no later phase is open.
        """
        following = self.following_open_phase()
        if following is None:
            self.back_to_journey()
            return
        self._show(ViewState(mode=ViewMode.PHASE_HERO, phase_slug=following.slug))

    # --- step screen ---

    def complete_current_step(self) -> None:
        """Complete the shown step if it is the learner's frontier."""
        step = self.current_step
        if step is None:
            return
        if self.state.status_of(step.id) is not ProgressStatus.UNLOCKED:
            return
        self.state = complete_step(self.state, step.id)
        if self._on_progress is not None:
            self._on_progress(self.state)

    def next_step(self) -> None:
        """Page forward within the section.

        At the end of a section, show the phase-complete overlay if the
        phase is done, otherwise return to the phase hero.
        """
        step = self.current_step
        if step is None:
            return
        following = navigation.next_step(self.state, step.id)
        if following is not None:
            self._show_step(following)
            return
        phase = queries.phase_for_step(self.state, step.id)
        if phase is None:
            return
        if queries.phase_status(self.state, phase.id) is PhaseStatus.COMPLETED:
            self._show(ViewState(mode=ViewMode.PHASE_COMPLETE, phase_slug=phase.slug))
        else:
            self.back_to_phase()

    def previous_step(self) -> None:
        step = self.current_step
        if step is None:
            return
        previous = navigation.previous_step(self.state, step.id)
        if previous is not None:
            self._show_step(previous)

    def can_continue(self) -> bool:
        """Whether the step screen's continue control is enabled."""
        step = self.current_step
        if step is None:
            return False
        return self.state.status_of(step.id) is not ProgressStatus.LOCKED

    def continue_(self) -> None:
        """Primary step control: complete if unlocked, then page forward."""
        step = self.current_step
        if step is None or not self.can_continue():
            return
        self.complete_current_step()
        if self.state.status_of(step.id) is ProgressStatus.COMPLETED:
            self.next_step()

    def back_to_phase(self) -> None:
        """Return from a step to its phase hero."""
        step = self.current_step
        phase = queries.phase_for_step(self.state, step.id) if step else None
        if phase is None:
            self.back_to_journey()
            return
        self._show(ViewState(mode=ViewMode.PHASE_HERO, phase_slug=phase.slug))
