"""Journey state: curriculum content plus the learner's progress map.

``JourneyState`` is the aggregate root passed between the query service
and the transition engine. It is never mutated in place; transitions
return a new instance that shares the (immutable) content tuples.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from bajourney.models.curriculum import Phase, ProgressStatus, Section, Step
from bajourney.models.validation import ensure_valid_curriculum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JourneyState:
    """All phases, sections and steps with a total step progress map."""

    phases: tuple[Phase, ...]
    sections: tuple[Section, ...]
    steps: tuple[Step, ...]
    progress: dict[str, ProgressStatus] = field(hash=False)
    curriculum_id: str = ""

    @classmethod
    def new(
        cls,
        phases: Iterable[Phase],
        sections: Iterable[Section],
        steps: Iterable[Step],
        progress: Mapping[str, ProgressStatus] | None = None,
        *,
        curriculum_id: str = "",
        strict: bool = False,
    ) -> JourneyState:
        """Build a validated journey.

        Without ``progress`` every step starts locked except the first
        step in curriculum order, which starts unlocked. With a restored
        ``progress`` map, known entries are kept, unknown step ids are
        dropped and missing ones default to locked.

        Raises:
            CurriculumValidationError: If the content is malformed.
        """
        from bajourney.journey.queries import iter_steps

        phase_tuple = tuple(phases)
        section_tuple = tuple(sections)
        step_tuple = tuple(steps)
        ensure_valid_curriculum(phase_tuple, section_tuple, step_tuple, strict=strict)

        base = {step.id: ProgressStatus.LOCKED for step in step_tuple}
        if progress is None:
            state = cls(phase_tuple, section_tuple, step_tuple, base, curriculum_id)
            first = next(iter_steps(state), None)
            if first is None:
                return state
            return state.with_progress({**base, first.id: ProgressStatus.UNLOCKED})

        dropped = sorted(set(progress) - set(base))
        if dropped:
            logger.warning("Dropping progress for unknown steps: %s", dropped)
        for step_id, status in progress.items():
            if step_id in base:
                base[step_id] = status
        return cls(phase_tuple, section_tuple, step_tuple, base, curriculum_id)

    def status_of(self, step_id: str) -> ProgressStatus | None:
        """Return a step's status, or None for unknown ids."""
        return self.progress.get(step_id)

    def with_progress(self, progress: dict[str, ProgressStatus]) -> JourneyState:
        """Return a copy carrying a new progress map."""
        return replace(self, progress=progress)

    def progress_to_dict(self) -> dict[str, str]:
        """Convert the progress map for JSON serialization."""
        return {step_id: status.value for step_id, status in self.progress.items()}

    @staticmethod
    def progress_from_dict(data: Mapping[str, Any]) -> dict[str, ProgressStatus]:
        """Parse a serialized progress map."""
        return {str(step_id): ProgressStatus(value) for step_id, value in data.items()}
