"""Journey screens."""

from .journey_map import JourneyMapScreen
from .phase_complete import PhaseCompleteScreen
from .phase_hero import PhaseHeroScreen
from .step import StepScreen

__all__ = [
    "JourneyMapScreen",
    "PhaseCompleteScreen",
    "PhaseHeroScreen",
    "StepScreen",
]
