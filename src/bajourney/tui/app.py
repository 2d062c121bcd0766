"""Main BA Journey TUI application."""

import logging
from typing import Any

from textual.app import App
from textual.binding import Binding

from bajourney.config.settings import Settings
from bajourney.shell.navigator import JourneyNavigator, ViewMode
from bajourney.tui.messages import ViewChanged
from bajourney.tui.screens.base import JourneyScreen
from bajourney.tui.screens.journey_map import JourneyMapScreen
from bajourney.tui.screens.phase_complete import PhaseCompleteScreen
from bajourney.tui.screens.phase_hero import PhaseHeroScreen
from bajourney.tui.screens.step import StepScreen

logger = logging.getLogger(__name__)


def screen_for_view(navigator: JourneyNavigator, title: str = "") -> JourneyScreen:
    """Build the screen for whatever view the navigator resolves to."""
    view = navigator.resolved_view()
    phase = navigator.current_phase
    step = navigator.current_step

    if view.mode is ViewMode.STEP and step is not None:
        return StepScreen(navigator, step)
    if view.mode is ViewMode.PHASE_HERO and phase is not None:
        return PhaseHeroScreen(navigator, phase)
    if view.mode is ViewMode.PHASE_COMPLETE and phase is not None:
        return PhaseCompleteScreen(navigator, phase)
    return JourneyMapScreen(navigator, title=title)


class JourneyApp(App[None]):
    """Main BA Journey TUI application."""

    TITLE = "BA Journey"
    SUB_TITLE = "Your first weeks as a Business Analyst"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+d", "toggle_dark", "Toggle Dark Mode"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(
        self,
        navigator: JourneyNavigator,
        settings: Settings,
        journey_title: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.navigator = navigator
        self.settings = settings
        self.journey_title = journey_title
        # Track theme before toggling so we can restore it
        self._previous_theme: str | None = None

    def on_mount(self) -> None:
        """Start on whatever view the navigator holds (journey map)."""
        saved_theme = self.settings.theme
        logger.info("Loading saved theme: %s", saved_theme)
        self.theme = saved_theme
        self.push_screen(screen_for_view(self.navigator, self.journey_title))

    def on_view_changed(self, message: ViewChanged) -> None:
        """Re-render after any navigator operation."""
        message.stop()
        view = self.navigator.resolved_view()
        logger.debug("Switching to %s", view.mode.value)
        self.switch_screen(screen_for_view(self.navigator, self.journey_title))

    def watch_theme(self, new_theme: str) -> None:
        """Save theme whenever it changes (from any source)."""
        logger.info("Theme changed to: %s, saving...", new_theme)
        self.settings.theme = new_theme

    def action_toggle_dark(self) -> None:
        """Toggle dark mode (saving handled by watch_theme).

        If toggling back, restores the previous theme instead of defaulting
        to textual-dark/textual-light.
        """
        if self._previous_theme is not None:
            restored = self._previous_theme
            self._previous_theme = None
            self.theme = restored
        else:
            self._previous_theme = self.theme
            self.theme = (
                "textual-dark" if self.theme == "textual-light" else "textual-light"
            )
