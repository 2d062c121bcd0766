"""Tests for curriculum content models and journey state."""

import pytest

from bajourney.models import (
    DEFAULT_PHASE_DESCRIPTION,
    CurriculumValidationError,
    JourneyState,
    Phase,
    PhaseProgress,
    ProgressStatus,
    Section,
    Step,
    StepType,
)
from conftest import boundary_content


class TestFromDict:
    """Tests for building content models from dictionaries."""

    def test_phase(self) -> None:
        phase = Phase.from_dict(
            {
                "id": "p0",
                "slug": "orientation",
                "title": "Orientation",
                "order": 0,
                "description": "Hi",
            }
        )
        assert phase == Phase(
            id="p0", slug="orientation", title="Orientation", order=0, description="Hi"
        )

    def test_phase_defaults(self) -> None:
        """Slug defaults to id and description to the generic text."""
        phase = Phase.from_dict({"id": "p0", "title": "Orientation", "order": 0})
        assert phase.slug == "p0"
        assert phase.description == DEFAULT_PHASE_DESCRIPTION

    def test_section(self) -> None:
        section = Section.from_dict(
            {"id": "s", "title": "S", "order": "2", "phase_id": "p0"}
        )
        assert section == Section(id="s", slug="s", title="S", order=2, phase_id="p0")

    def test_step_reads_type(self) -> None:
        """Step type is read from the "type" key."""
        step = Step.from_dict(
            {
                "id": "t",
                "title": "T",
                "order": 0,
                "section_id": "s",
                "type": "quiz",
                "content": {"body": "?"},
            }
        )
        assert step.step_type is StepType.QUIZ
        assert step.content == {"body": "?"}

    def test_step_type_defaults_to_text(self) -> None:
        step = Step.from_dict({"id": "t", "title": "T", "order": 0, "section_id": "s"})
        assert step.step_type is StepType.TEXT
        assert step.content == {}


class TestPhaseProgress:
    """Tests for percentage rounding."""

    def test_half_of_four(self) -> None:
        assert PhaseProgress.from_counts(2, 4) == PhaseProgress(2, 4, 50)

    def test_empty_is_zero(self) -> None:
        """Empty containers report (0, 0, 0) instead of dividing by zero."""
        assert PhaseProgress.from_counts(0, 0) == PhaseProgress(0, 0, 0)

    def test_rounds_to_nearest(self) -> None:
        assert PhaseProgress.from_counts(1, 3).percentage == 33
        assert PhaseProgress.from_counts(2, 3).percentage == 67

    def test_halves_round_up(self) -> None:
        """1/8 is 12.5% and displays as 13%."""
        assert PhaseProgress.from_counts(1, 8).percentage == 13

    def test_complete(self) -> None:
        assert PhaseProgress.from_counts(7, 7).percentage == 100


class TestJourneyStateNew:
    """Tests for building a journey from content."""

    def test_first_step_unlocked_rest_locked(self, boundary_state: JourneyState) -> None:
        """A fresh journey has exactly one unlocked step: the first one."""
        assert boundary_state.progress == {
            "S1": ProgressStatus.UNLOCKED,
            "S2": ProgressStatus.LOCKED,
            "S3": ProgressStatus.LOCKED,
            "S4": ProgressStatus.LOCKED,
        }

    def test_progress_is_total(self, boundary_state: JourneyState) -> None:
        """Every step id has an entry."""
        assert set(boundary_state.progress) == {s.id for s in boundary_state.steps}

    def test_first_step_follows_order_not_list_position(self) -> None:
        """Content given out of order still unlocks the first step by order."""
        phases, sections, steps = boundary_content()
        state = JourneyState.new(
            list(reversed(phases)), list(reversed(sections)), list(reversed(steps))
        )
        assert state.status_of("S1") is ProgressStatus.UNLOCKED
        assert state.status_of("S4") is ProgressStatus.LOCKED

    def test_restored_progress_is_kept(self) -> None:
        phases, sections, steps = boundary_content()
        saved = {
            "S1": ProgressStatus.COMPLETED,
            "S2": ProgressStatus.UNLOCKED,
        }
        state = JourneyState.new(phases, sections, steps, saved)
        assert state.status_of("S1") is ProgressStatus.COMPLETED
        assert state.status_of("S2") is ProgressStatus.UNLOCKED
        assert state.status_of("S3") is ProgressStatus.LOCKED

    def test_restored_progress_drops_unknown_steps(self) -> None:
        """Progress for steps no longer in the content is discarded."""
        phases, sections, steps = boundary_content()
        saved = {"gone": ProgressStatus.COMPLETED, "S1": ProgressStatus.UNLOCKED}
        state = JourneyState.new(phases, sections, steps, saved)
        assert "gone" not in state.progress
        assert state.status_of("gone") is None

    def test_empty_curriculum(self) -> None:
        """No steps means nothing to unlock."""
        state = JourneyState.new([], [], [])
        assert state.progress == {}

    def test_invalid_content_raises(self) -> None:
        phases, sections, steps = boundary_content()
        steps.append(Step(id="orphan", title="O", order=0, section_id="missing"))
        with pytest.raises(CurriculumValidationError) as exc_info:
            JourneyState.new(phases, sections, steps)
        assert any("orphan" in error for error in exc_info.value.errors)


class TestJourneyStateImmutability:
    """Tests for with_progress and progress serialization."""

    def test_with_progress_returns_copy(self, boundary_state: JourneyState) -> None:
        updated = boundary_state.with_progress(
            {**boundary_state.progress, "S1": ProgressStatus.COMPLETED}
        )
        assert updated is not boundary_state
        assert boundary_state.status_of("S1") is ProgressStatus.UNLOCKED
        assert updated.status_of("S1") is ProgressStatus.COMPLETED
        assert updated.steps is boundary_state.steps

    def test_progress_dict_roundtrip(self, boundary_state: JourneyState) -> None:
        data = boundary_state.progress_to_dict()
        assert data["S1"] == "unlocked"
        assert JourneyState.progress_from_dict(data) == boundary_state.progress

    def test_progress_from_dict_rejects_unknown_status(self) -> None:
        with pytest.raises(ValueError):
            JourneyState.progress_from_dict({"S1": "started"})
