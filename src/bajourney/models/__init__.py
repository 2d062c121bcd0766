"""Data models for BA Journey."""

from .curriculum import (
    DEFAULT_PHASE_DESCRIPTION,
    Phase,
    PhaseProgress,
    PhaseStatus,
    ProgressStatus,
    Section,
    Step,
    StepType,
)
from .journey import JourneyState
from .validation import (
    CurriculumValidationError,
    ValidationReport,
    ensure_valid_curriculum,
    validate_curriculum,
)

__all__ = [
    "CurriculumValidationError",
    "DEFAULT_PHASE_DESCRIPTION",
    "JourneyState",
    "Phase",
    "PhaseProgress",
    "PhaseStatus",
    "ProgressStatus",
    "Section",
    "Step",
    "StepType",
    "ValidationReport",
    "ensure_valid_curriculum",
    "validate_curriculum",
]
