"""Presentation shell: view-mode navigation over a journey."""

from .navigator import JOURNEY_MAP_VIEW, JourneyNavigator, ViewMode, ViewState

__all__ = ["JOURNEY_MAP_VIEW", "JourneyNavigator", "ViewMode", "ViewState"]
