"""Base screen for journey views."""

from typing import Any

from textual.binding import Binding
from textual.screen import Screen

from bajourney.shell.navigator import JourneyNavigator
from bajourney.tui.messages import ViewChanged


class JourneyScreen(Screen[None]):
    """Screen bound to the session's navigator.

    Subclasses call navigator operations, then ``changed()`` so the app
    re-renders whatever view the navigator resolves to.
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, navigator: JourneyNavigator, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.navigator = navigator

    def changed(self) -> None:
        self.post_message(ViewChanged())
