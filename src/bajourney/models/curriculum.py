"""Curriculum content models: phases, sections and steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self

DEFAULT_PHASE_DESCRIPTION = "Begin this phase of your BA journey."


class ProgressStatus(Enum):
    """Progress of a single step. The only mutable runtime state."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"
    COMPLETED = "completed"


class PhaseStatus(Enum):
    """Derived status of a phase (never stored)."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"
    CURRENT = "current"
    COMPLETED = "completed"


class StepType(Enum):
    """Kind of learning content a step carries."""

    TEXT = "text"
    VIDEO = "video"
    CHECKLIST = "checklist"
    TASK = "task"
    REFLECTION = "reflection"
    QUIZ = "quiz"


@dataclass(frozen=True, slots=True)
class Phase:
    """Top-level curriculum unit."""

    id: str
    slug: str
    title: str
    order: int
    description: str = DEFAULT_PHASE_DESCRIPTION

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from dictionary."""
        return cls(
            id=data["id"],
            slug=data.get("slug", data["id"]),
            title=data["title"],
            order=int(data["order"]),
            description=data.get("description") or DEFAULT_PHASE_DESCRIPTION,
        )


@dataclass(frozen=True, slots=True)
class Section:
    """Sub-unit of exactly one phase."""

    id: str
    slug: str
    title: str
    order: int
    phase_id: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from dictionary."""
        return cls(
            id=data["id"],
            slug=data.get("slug", data["id"]),
            title=data["title"],
            order=int(data["order"]),
            phase_id=data["phase_id"],
        )


@dataclass(frozen=True, slots=True)
class Step:
    """Atomic unit of learning content.

    ``content`` is an opaque payload handed to whatever renders the step
    type; the progress engine never looks inside it.
    """

    id: str
    title: str
    order: int
    section_id: str
    step_type: StepType = StepType.TEXT
    content: dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from dictionary."""
        return cls(
            id=data["id"],
            title=data["title"],
            order=int(data["order"]),
            section_id=data["section_id"],
            step_type=StepType(data.get("type", "text")),
            content=dict(data.get("content") or {}),
        )


@dataclass(frozen=True, slots=True)
class PhaseProgress:
    """Completed/total step counts with a rounded percentage."""

    completed: int
    total: int
    percentage: int

    @classmethod
    def from_counts(cls, completed: int, total: int) -> Self:
        """Build progress, guarding against empty containers."""
        if total <= 0:
            return cls(completed=0, total=0, percentage=0)
        # Halves round up
        percentage = (200 * completed + total) // (2 * total)
        return cls(completed=completed, total=total, percentage=percentage)
