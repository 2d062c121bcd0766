"""Journey map screen: every phase with its status and progress."""

from typing import Any

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button, Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from bajourney.journey import queries
from bajourney.models.curriculum import PhaseStatus
from bajourney.shell.navigator import JourneyNavigator
from bajourney.tui.screens.base import JourneyScreen
from bajourney.tui.widgets.journey_labels import format_percentage, format_phase_label


class JourneyMapScreen(JourneyScreen):
    """Phase path with a begin/continue control."""

    BINDINGS = [
        *JourneyScreen.BINDINGS,
        Binding("c", "begin_journey", "Continue", show=True),
    ]

    DEFAULT_CSS = """
    JourneyMapScreen > Vertical {
        padding: 1 2;
    }

    JourneyMapScreen .title {
        text-style: bold;
        text-align: center;
        padding: 1 0 0 0;
    }

    JourneyMapScreen .subtitle {
        color: $text-muted;
        text-align: center;
        margin-bottom: 1;
    }

    JourneyMapScreen OptionList {
        height: 1fr;
        border: solid $surface-lighten-1;
    }

    JourneyMapScreen #overall {
        color: $text-muted;
        padding: 1 0;
    }
    """

    def __init__(
        self, navigator: JourneyNavigator, title: str = "", **kwargs: Any
    ) -> None:
        super().__init__(navigator, **kwargs)
        self.journey_title = title or "Your BA Journey"

    def compose(self) -> ComposeResult:
        state = self.navigator.state
        frontier = queries.current_phase(state)
        options: list[Option] = []
        for phase in queries.phases_ordered(state):
            status = queries.phase_status(state, phase.id)
            label = format_phase_label(
                phase,
                status,
                queries.phase_progress(state, phase.id),
                is_current=frontier is not None and frontier.id == phase.id,
            )
            options.append(
                Option(label, id=phase.id, disabled=status is PhaseStatus.LOCKED)
            )

        overall = queries.journey_progress(state)
        has_frontier = queries.next_unlocked_step(state) is not None
        yield Header()
        with Vertical():
            yield Static(self.journey_title, classes="title")
            yield Static("Your first weeks as a Business Analyst", classes="subtitle")
            yield OptionList(*options, id="phase-list")
            yield Static(f"Overall: {format_percentage(overall)}", id="overall")
            if has_frontier:
                label = "Continue journey" if overall.completed else "Begin journey"
                yield Button(label, id="btn-begin", variant="primary")
            elif queries.is_finished(state):
                yield Static("Journey complete.", id="finished")
        yield Footer()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option.id is None:
            return
        self.navigator.open_phase(event.option.id)
        self.changed()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-begin":
            self.action_begin_journey()

    def action_begin_journey(self) -> None:
        self.navigator.begin_journey()
        self.changed()
