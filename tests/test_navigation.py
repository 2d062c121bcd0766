"""Tests for in-section step paging."""

from bajourney.journey import navigation
from bajourney.models import JourneyState, ProgressStatus


class TestPaging:
    """Tests for previous_step and next_step."""

    def test_next_within_section(self, boundary_state: JourneyState) -> None:
        step = navigation.next_step(boundary_state, "S1")
        assert step is not None and step.id == "S2"

    def test_next_ignores_lock_status(self, boundary_state: JourneyState) -> None:
        """Paging shows the next step even while it is locked."""
        assert boundary_state.status_of("S2") is ProgressStatus.LOCKED
        assert navigation.next_step(boundary_state, "S1") is not None

    def test_next_stops_at_section_end(self, boundary_state: JourneyState) -> None:
        assert navigation.next_step(boundary_state, "S2") is None

    def test_previous_within_section(self, boundary_state: JourneyState) -> None:
        step = navigation.previous_step(boundary_state, "S2")
        assert step is not None and step.id == "S1"
        assert navigation.has_previous_step(boundary_state, "S2")

    def test_previous_stops_at_section_start(
        self, boundary_state: JourneyState
    ) -> None:
        """The first step of a section has no previous step, even mid-phase."""
        assert navigation.previous_step(boundary_state, "S3") is None
        assert not navigation.has_previous_step(boundary_state, "S3")

    def test_unknown_ids(self, boundary_state: JourneyState) -> None:
        assert navigation.next_step(boundary_state, "nope") is None
        assert navigation.previous_step(boundary_state, "nope") is None
        assert navigation.step_position(boundary_state, "nope") is None


class TestStepPosition:
    """Tests for step_position()."""

    def test_first_of_two(self, boundary_state: JourneyState) -> None:
        position = navigation.step_position(boundary_state, "S1")
        assert position is not None
        assert (position.index, position.total) == (0, 2)
        assert position.previous is None
        assert position.next is not None and position.next.id == "S2"
        assert position.label == "Step 1 of 2"

    def test_only_step_in_section(self, boundary_state: JourneyState) -> None:
        position = navigation.step_position(boundary_state, "S4")
        assert position is not None
        assert position.label == "Step 1 of 1"
        assert position.previous is None and position.next is None
