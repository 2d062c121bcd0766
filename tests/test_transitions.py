"""Tests for completing steps and the unlock cascade."""

import logging

import pytest

from bajourney.journey import queries
from bajourney.journey.transitions import (
    complete_step,
    following_step,
    recover_frontier,
)
from bajourney.models import (
    JourneyState,
    Phase,
    PhaseStatus,
    ProgressStatus,
    Section,
    Step,
)
from conftest import boundary_content

ALL_STEPS = ["S1", "S2", "S3", "S4"]


def _unlocked(state: JourneyState) -> set[str]:
    return {k for k, v in state.progress.items() if v is ProgressStatus.UNLOCKED}


def _completed(state: JourneyState) -> set[str]:
    return {k for k, v in state.progress.items() if v is ProgressStatus.COMPLETED}


class TestFollowingStep:
    """Tests for the curriculum-order successor."""

    def test_within_section(self, boundary_state: JourneyState) -> None:
        step = following_step(boundary_state, "S1")
        assert step is not None and step.id == "S2"

    def test_across_sections(self, boundary_state: JourneyState) -> None:
        step = following_step(boundary_state, "S2")
        assert step is not None and step.id == "S3"

    def test_across_phases(self, boundary_state: JourneyState) -> None:
        step = following_step(boundary_state, "S3")
        assert step is not None and step.id == "S4"

    def test_end_of_curriculum(self, boundary_state: JourneyState) -> None:
        assert following_step(boundary_state, "S4") is None

    def test_unknown_id(self, boundary_state: JourneyState) -> None:
        assert following_step(boundary_state, "nonexistent") is None


class TestCompleteStep:
    """Tests for complete_step()."""

    def test_marks_completed_and_unlocks_next(
        self, boundary_state: JourneyState
    ) -> None:
        state = complete_step(boundary_state, "S1")
        assert state.status_of("S1") is ProgressStatus.COMPLETED
        assert state.status_of("S2") is ProgressStatus.UNLOCKED
        assert state.status_of("S3") is ProgressStatus.LOCKED

    def test_does_not_mutate_input(self, boundary_state: JourneyState) -> None:
        before = dict(boundary_state.progress)
        complete_step(boundary_state, "S1")
        assert boundary_state.progress == before

    def test_boundary_crossing(self, boundary_state: JourneyState) -> None:
        """S2 unlocks S3 across sections; S3 unlocks S4 across phases."""
        state = complete_step(complete_step(boundary_state, "S1"), "S2")
        assert state.status_of("S3") is ProgressStatus.UNLOCKED
        assert queries.phase_status(state, "A") is PhaseStatus.CURRENT

        state = complete_step(state, "S3")
        assert state.status_of("S4") is ProgressStatus.UNLOCKED
        assert queries.phase_status(state, "A") is PhaseStatus.COMPLETED
        assert queries.phase_status(state, "B") is PhaseStatus.CURRENT

    def test_unknown_id_returns_same_state(self, boundary_state: JourneyState) -> None:
        assert complete_step(boundary_state, "nonexistent") == boundary_state
        assert complete_step(boundary_state, "nonexistent") is boundary_state

    def test_unknown_id_logs_warning(
        self, boundary_state: JourneyState, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            complete_step(boundary_state, "nonexistent")
        assert "nonexistent" in caplog.text

    def test_idempotent(self, boundary_state: JourneyState) -> None:
        once = complete_step(boundary_state, "S1")
        twice = complete_step(once, "S1")
        assert twice.progress == once.progress

    def test_terminal_stability(self, boundary_state: JourneyState) -> None:
        state = boundary_state
        for step_id in ALL_STEPS:
            state = complete_step(state, step_id)
        assert queries.next_unlocked_step(state) is None
        assert _completed(state) == set(ALL_STEPS)
        again = complete_step(state, "S4")
        assert again.progress == state.progress

    def test_recompleting_earlier_step_keeps_successor_completed(
        self, boundary_state: JourneyState
    ) -> None:
        """A completed successor is never downgraded to unlocked."""
        state = complete_step(complete_step(boundary_state, "S1"), "S2")
        state = complete_step(state, "S1")
        assert state.status_of("S2") is ProgressStatus.COMPLETED
        assert _unlocked(state) == {"S3"}


class TestCascadeProperties:
    """Properties that hold across a whole walk through the curriculum."""

    def test_monotonic_and_single_frontier(self, boundary_state: JourneyState) -> None:
        state = boundary_state
        for step_id in ALL_STEPS:
            before_completed = _completed(state)
            before_unlocked = _unlocked(state)
            state = complete_step(state, step_id)

            assert before_completed <= _completed(state)
            assert len(_unlocked(state)) <= 1
            newly_unlocked = _unlocked(state) - before_unlocked
            successor = following_step(state, step_id)
            expected = {successor.id} if successor is not None else set()
            assert newly_unlocked == expected

    def test_empty_section_is_skipped(self) -> None:
        """An empty section between two sections does not stall the cascade."""
        phases = [Phase(id="P", slug="p", title="P", order=0)]
        sections = [
            Section(id="a", slug="a", title="A", order=0, phase_id="P"),
            Section(id="empty", slug="empty", title="Empty", order=1, phase_id="P"),
            Section(id="c", slug="c", title="C", order=2, phase_id="P"),
        ]
        steps = [
            Step(id="a1", title="A1", order=0, section_id="a"),
            Step(id="c1", title="C1", order=0, section_id="c"),
        ]
        state = complete_step(JourneyState.new(phases, sections, steps), "a1")
        assert state.status_of("c1") is ProgressStatus.UNLOCKED

    def test_empty_phase_is_skipped(self) -> None:
        phases, sections, steps = boundary_content()
        phases[1] = Phase(id="B", slug="phase-b", title="Phase B", order=2)
        phases.append(Phase(id="E", slug="phase-e", title="Empty", order=1))
        state = JourneyState.new(phases, sections, steps)
        for step_id in ("S1", "S2", "S3"):
            state = complete_step(state, step_id)
        assert state.status_of("S4") is ProgressStatus.UNLOCKED
        assert queries.phase_status(state, "E") is PhaseStatus.LOCKED


class TestRecoverFrontier:
    """Tests for restoring a lost frontier."""

    def test_noop_when_frontier_exists(self, boundary_state: JourneyState) -> None:
        assert recover_frontier(boundary_state) is boundary_state

    def test_unlocks_first_pending_step(self, boundary_state: JourneyState) -> None:
        state = boundary_state.with_progress(
            {
                "S1": ProgressStatus.COMPLETED,
                "S2": ProgressStatus.LOCKED,
                "S3": ProgressStatus.LOCKED,
                "S4": ProgressStatus.LOCKED,
            }
        )
        recovered = recover_frontier(state)
        assert _unlocked(recovered) == {"S2"}

    def test_noop_when_finished(self, boundary_state: JourneyState) -> None:
        state = boundary_state.with_progress(
            {s: ProgressStatus.COMPLETED for s in ALL_STEPS}
        )
        assert recover_frontier(state) is state
