"""Terminal UI for BA Journey."""

from .app import JourneyApp, screen_for_view

__all__ = ["JourneyApp", "screen_for_view"]
