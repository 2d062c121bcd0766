"""Phase hero screen: introduction and progress for one phase."""

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Static

from bajourney.journey import queries
from bajourney.models.curriculum import Phase, PhaseStatus, ProgressStatus
from bajourney.shell.navigator import JourneyNavigator
from bajourney.tui.screens.base import JourneyScreen
from bajourney.tui.widgets.journey_labels import format_percentage, format_step_label


class PhaseHeroScreen(JourneyScreen):
    """Describes a phase and lets the learner enter it."""

    BINDINGS = [
        *JourneyScreen.BINDINGS,
        Binding("escape", "back", "Back to journey", show=True),
        Binding("enter", "begin_phase", "Begin", show=True),
    ]

    DEFAULT_CSS = """
    PhaseHeroScreen > Vertical {
        padding: 1 2;
    }

    PhaseHeroScreen .phase-number {
        color: $text-muted;
    }

    PhaseHeroScreen .phase-title {
        text-style: bold;
        margin-bottom: 1;
    }

    PhaseHeroScreen .section-title {
        text-style: bold;
        margin-top: 1;
    }

    PhaseHeroScreen .modal-actions {
        dock: bottom;
        height: auto;
        padding: 1 0 0 0;
        border-top: solid $surface-lighten-1;
    }

    PhaseHeroScreen Button {
        margin: 0 1;
    }
    """

    def __init__(self, navigator: JourneyNavigator, phase: Phase, **kwargs: Any) -> None:
        super().__init__(navigator, **kwargs)
        self.phase = phase

    def compose(self) -> ComposeResult:
        state = self.navigator.state
        progress = queries.phase_progress(state, self.phase.id)
        status = queries.phase_status(state, self.phase.id)

        if status is PhaseStatus.COMPLETED:
            begin_label = "Review phase"
        elif progress.completed:
            begin_label = "Continue phase"
        else:
            begin_label = "Begin phase"

        yield Header()
        with Vertical():
            yield Static(f"Phase {self.phase.order}", classes="phase-number")
            yield Static(self.phase.title, classes="phase-title")
            yield Static(self.phase.description, classes="description")
            yield Static(format_percentage(progress), id="phase-progress")
            with VerticalScroll():
                for section in queries.sections_of_phase(state, self.phase.id):
                    yield Static(section.title, classes="section-title")
                    for step in queries.steps_of_section(state, section.id):
                        step_status = state.status_of(step.id) or ProgressStatus.LOCKED
                        yield Static(format_step_label(step, step_status))
            with Horizontal(classes="modal-actions"):
                yield Button("Back to journey", id="btn-back")
                yield Button(
                    begin_label,
                    id="btn-begin",
                    variant="primary",
                    disabled=progress.total == 0,
                )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-begin":
            self.action_begin_phase()
        else:
            self.action_back()

    def action_back(self) -> None:
        self.navigator.back_to_journey()
        self.changed()

    def action_begin_phase(self) -> None:
        self.navigator.begin_phase(self.phase.slug)
        self.changed()
