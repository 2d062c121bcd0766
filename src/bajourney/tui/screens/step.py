"""Step screen: one step's content with paging controls.

Step-type specific rendering (quizzes, checklists, video) lives outside
this project. The screen shows the step's markdown ``body`` when the
content payload carries one.
"""

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Markdown, Static

from bajourney.journey import navigation, queries
from bajourney.models.curriculum import ProgressStatus, Step
from bajourney.shell.navigator import JourneyNavigator
from bajourney.tui.screens.base import JourneyScreen
from bajourney.tui.widgets.journey_labels import format_progress_dots


def step_body(step: Step) -> str:
    """Markdown to show for a step's opaque content."""
    body = step.content.get("body") or step.content.get("prompt") or ""
    items = step.content.get("items")
    if isinstance(items, list) and items:
        bullets = "\n".join(f"- [ ] {item}" for item in items)
        body = f"{body}\n\n{bullets}" if body else bullets
    return str(body) or f"*{step.step_type.value.title()} step*"


class StepScreen(JourneyScreen):
    """Shows a step and drives completion and paging."""

    BINDINGS = [
        *JourneyScreen.BINDINGS,
        Binding("escape", "back_to_phase", "Back to phase", show=True),
        Binding("p", "previous_step", "Previous", show=True),
        Binding("n", "continue", "Continue", show=True),
    ]

    DEFAULT_CSS = """
    StepScreen > Vertical {
        padding: 1 2;
    }

    StepScreen .breadcrumb {
        color: $text-muted;
    }

    StepScreen .step-title {
        text-style: bold;
        margin: 1 0;
    }

    StepScreen VerticalScroll {
        height: 1fr;
        border: solid $surface-lighten-1;
    }

    StepScreen .modal-actions {
        dock: bottom;
        height: auto;
        padding: 1 0 0 0;
        border-top: solid $surface-lighten-1;
    }

    StepScreen Button {
        margin: 0 1;
    }
    """

    def __init__(self, navigator: JourneyNavigator, step: Step, **kwargs: Any) -> None:
        super().__init__(navigator, **kwargs)
        self.step = step

    def compose(self) -> ComposeResult:
        state = self.navigator.state
        phase = queries.phase_for_step(state, self.step.id)
        section = queries.section_for_step(state, self.step.id)
        position = navigation.step_position(state, self.step.id)
        status = state.status_of(self.step.id) or ProgressStatus.LOCKED

        crumbs = [p.title for p in (phase, section) if p is not None]
        if position is not None:
            crumbs.append(position.label)
        phase_pct = (
            f"{queries.phase_progress(state, phase.id).percentage}%" if phase else ""
        )

        siblings = queries.steps_of_section(state, self.step.section_id)
        statuses = [state.status_of(s.id) or ProgressStatus.LOCKED for s in siblings]
        selected = position.index if position is not None else -1

        yield Header()
        with Vertical():
            yield Static(" · ".join(crumbs) + f"   {phase_pct}", classes="breadcrumb")
            yield Static(self.step.title, classes="step-title")
            with VerticalScroll():
                yield Markdown(step_body(self.step))
            yield Static(format_progress_dots(statuses, selected), id="dots")
            with Horizontal(classes="modal-actions"):
                yield Button("Back to phase", id="btn-back")
                yield Button(
                    "Previous",
                    id="btn-previous",
                    disabled=not navigation.has_previous_step(state, self.step.id),
                )
                yield Button(
                    "Next" if status is ProgressStatus.COMPLETED else "Continue",
                    id="btn-continue",
                    variant="primary",
                    disabled=not self.navigator.can_continue(),
                )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-continue":
            self.action_continue()
        elif event.button.id == "btn-previous":
            self.action_previous_step()
        else:
            self.action_back_to_phase()

    def action_continue(self) -> None:
        self.navigator.continue_()
        self.changed()

    def action_previous_step(self) -> None:
        self.navigator.previous_step()
        self.changed()

    def action_back_to_phase(self) -> None:
        self.navigator.back_to_phase()
        self.changed()
