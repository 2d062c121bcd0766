"""Phase-complete overlay."""

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from bajourney.models.curriculum import Phase
from bajourney.shell.navigator import JourneyNavigator
from bajourney.tui.screens.base import JourneyScreen


class PhaseCompleteScreen(JourneyScreen):
    """Celebrates a finished phase and offers the next one."""

    BINDINGS = [
        *JourneyScreen.BINDINGS,
        Binding("escape", "back", "Back to journey", show=True),
    ]

    DEFAULT_CSS = """
    PhaseCompleteScreen {
        align: center middle;
    }

    PhaseCompleteScreen > Vertical {
        width: 60;
        height: auto;
        border: solid $success;
        padding: 1 2;
    }

    PhaseCompleteScreen .modal-title {
        text-style: bold;
        text-align: center;
        color: $success;
        padding: 1 0;
    }

    PhaseCompleteScreen .modal-actions {
        height: auto;
        padding: 1 0 0 0;
        align: center middle;
    }
    """

    def __init__(self, navigator: JourneyNavigator, phase: Phase, **kwargs: Any) -> None:
        super().__init__(navigator, **kwargs)
        self.phase = phase

    def compose(self) -> ComposeResult:
        following = self.navigator.following_open_phase()
        yield Header()
        with Vertical():
            yield Static(f"Phase {self.phase.order} complete", classes="modal-title")
            yield Static(self.phase.title)
            if following is not None:
                yield Static(f"Up next: {following.title}", classes="next-phase")
            with Horizontal(classes="modal-actions"):
                yield Button("Back to journey", id="btn-back")
                if following is not None:
                    yield Button("Continue", id="btn-next", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-next":
            self.navigator.continue_to_next_phase()
            self.changed()
        else:
            self.action_back()

    def action_back(self) -> None:
        self.navigator.back_to_journey()
        self.changed()
