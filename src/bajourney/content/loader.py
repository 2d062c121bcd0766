"""Load curriculum content from YAML or JSON authoring files.

Authoring files nest steps inside sections inside phases. ``order`` is
optional at every level and defaults to list position; ``slug``
defaults to ``id``. The nested form is flattened into the foreign-key
form the journey state uses and validated once, here, at load time.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from bajourney.models.curriculum import Phase, Section, Step, StepType
from bajourney.models.journey import JourneyState
from bajourney.models.validation import (
    CurriculumValidationError,
    ValidationReport,
    validate_curriculum,
)

logger = logging.getLogger(__name__)

DEFAULT_CURRICULUM = "starter-ba-role.yaml"


class CurriculumLoadError(Exception):
    """Raised when a curriculum file cannot be read or has the wrong shape."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"Cannot load curriculum {source}: {message}")


@dataclass(frozen=True)
class Curriculum:
    """Flattened curriculum content ready to seed a journey."""

    id: str
    title: str
    phases: tuple[Phase, ...]
    sections: tuple[Section, ...]
    steps: tuple[Step, ...]

    def validate(self) -> ValidationReport:
        """Check references and ordering without raising."""
        return validate_curriculum(self.phases, self.sections, self.steps)

    def new_journey(self, *, strict: bool = False) -> JourneyState:
        """Start a fresh journey over this content."""
        return JourneyState.new(
            self.phases,
            self.sections,
            self.steps,
            curriculum_id=self.id,
            strict=strict,
        )


def _require(data: dict[str, Any], key: str, where: str, source: str) -> Any:
    if key not in data or data[key] in (None, ""):
        raise CurriculumLoadError(source, f"{where} is missing '{key}'")
    return data[key]


def _list_of_mappings(value: Any, where: str, source: str) -> list[dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise CurriculumLoadError(source, f"{where} must be a list of mappings")
    return value


def _order(data: dict[str, Any], position: int, where: str, source: str) -> int:
    raw = data.get("order", position)
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise CurriculumLoadError(source, f"{where} has non-integer order {raw!r}") from e


def _parse_step_type(data: dict[str, Any], where: str, source: str) -> StepType:
    raw = str(data.get("type", StepType.TEXT.value)).strip().lower()
    try:
        return StepType(raw)
    except ValueError as e:
        allowed = ", ".join(t.value for t in StepType)
        raise CurriculumLoadError(
            source, f"{where} has unknown type '{raw}' (expected one of: {allowed})"
        ) from e


def curriculum_from_dict(data: Any, source: str = "<memory>") -> Curriculum:
    """Flatten a nested curriculum document.

    Raises:
        CurriculumLoadError: If the document has the wrong shape.
    """
    if not isinstance(data, dict):
        raise CurriculumLoadError(source, "top level must be a mapping")

    phases: list[Phase] = []
    sections: list[Section] = []
    steps: list[Step] = []

    raw_phases = _list_of_mappings(data.get("phases"), "phases", source)
    for p_pos, raw_phase in enumerate(raw_phases):
        p_where = f"phase #{p_pos}"
        phase_id = str(_require(raw_phase, "id", p_where, source))
        phases.append(
            Phase.from_dict(
                {
                    "id": phase_id,
                    "slug": str(raw_phase.get("slug") or phase_id),
                    "title": str(_require(raw_phase, "title", p_where, source)),
                    "order": _order(raw_phase, p_pos, p_where, source),
                    "description": raw_phase.get("description"),
                }
            )
        )

        raw_sections = _list_of_mappings(
            raw_phase.get("sections"), f"{p_where} sections", source
        )
        for s_pos, raw_section in enumerate(raw_sections):
            s_where = f"section #{s_pos} of phase '{phase_id}'"
            section_id = str(_require(raw_section, "id", s_where, source))
            sections.append(
                Section.from_dict(
                    {
                        "id": section_id,
                        "slug": str(raw_section.get("slug") or section_id),
                        "title": str(_require(raw_section, "title", s_where, source)),
                        "order": _order(raw_section, s_pos, s_where, source),
                        "phase_id": phase_id,
                    }
                )
            )

            raw_steps = _list_of_mappings(
                raw_section.get("steps"), f"{s_where} steps", source
            )
            for t_pos, raw_step in enumerate(raw_steps):
                t_where = f"step #{t_pos} of section '{section_id}'"
                content = raw_step.get("content") or {}
                if not isinstance(content, dict):
                    raise CurriculumLoadError(source, f"{t_where} content must be a mapping")
                steps.append(
                    Step.from_dict(
                        {
                            "id": str(_require(raw_step, "id", t_where, source)),
                            "title": str(_require(raw_step, "title", t_where, source)),
                            "order": _order(raw_step, t_pos, t_where, source),
                            "section_id": section_id,
                            "type": _parse_step_type(raw_step, t_where, source).value,
                            "content": content,
                        }
                    )
                )

    curriculum = Curriculum(
        id=str(data.get("id") or "curriculum"),
        title=str(data.get("title") or data.get("id") or "Curriculum"),
        phases=tuple(phases),
        sections=tuple(sections),
        steps=tuple(steps),
    )
    logger.debug(
        "Parsed curriculum %s: %d phases, %d sections, %d steps",
        curriculum.id,
        len(phases),
        len(sections),
        len(steps),
    )
    return curriculum


def _parse_text(text: str, source: str, suffix: str) -> Any:
    try:
        if suffix == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except json.JSONDecodeError as e:
        raise CurriculumLoadError(source, f"invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise CurriculumLoadError(source, f"invalid YAML: {e}") from e


def load_curriculum(path: Path) -> Curriculum:
    """Load a curriculum from a .yaml, .yml or .json file.

    Raises:
        CurriculumLoadError: If the file is unreadable or malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CurriculumLoadError(str(path), str(e)) from e
    curriculum = curriculum_from_dict(
        _parse_text(text, str(path), path.suffix.lower()), str(path)
    )
    logger.info("Loaded curriculum %s from %s", curriculum.id, path)
    return curriculum


def load_default_curriculum() -> Curriculum:
    """Load the curriculum bundled with the package."""
    resource = resources.files("bajourney.data").joinpath(DEFAULT_CURRICULUM)
    text = resource.read_text(encoding="utf-8")
    return curriculum_from_dict(yaml.safe_load(text), DEFAULT_CURRICULUM)


__all__ = [
    "Curriculum",
    "CurriculumLoadError",
    "CurriculumValidationError",
    "DEFAULT_CURRICULUM",
    "curriculum_from_dict",
    "load_curriculum",
    "load_default_curriculum",
]
