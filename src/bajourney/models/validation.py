"""Authoring-time validation of curriculum content.

The progress engine relies on ``order + 1`` neighbours and on every
foreign key resolving. Both are checked once, when a journey is built.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from bajourney.models.curriculum import Phase, Section, Step

logger = logging.getLogger(__name__)


class CurriculumValidationError(ValueError):
    """Raised when curriculum content violates structural invariants."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        detail = "; ".join(self.errors)
        super().__init__(f"Invalid curriculum ({len(self.errors)} problems): {detail}")


@dataclass
class ValidationReport:
    """Problems found in a curriculum.

    Errors break navigation. Warnings (empty sections or phases) are
    tolerated because the transition engine skips empty containers.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _check_unique_ids(kind: str, ids: Iterable[str], report: ValidationReport) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            report.errors.append(f"Duplicate {kind} '{item_id}'")
        seen.add(item_id)


def _check_orders(scope: str, orders: list[int], report: ValidationReport) -> None:
    """Orders within a scope must be exactly 0..n-1."""
    if sorted(orders) == list(range(len(orders))):
        return
    counts: dict[int, int] = defaultdict(int)
    for order in orders:
        counts[order] += 1
    duplicates = sorted(o for o, n in counts.items() if n > 1)
    negatives = sorted(o for o in counts if o < 0)
    if duplicates:
        report.errors.append(f"Duplicate order {duplicates} in {scope}")
    if negatives:
        report.errors.append(f"Negative order {negatives} in {scope}")
    missing = sorted(set(range(len(orders))) - set(orders))
    if missing:
        report.errors.append(
            f"Order in {scope} must be contiguous from 0; missing {missing}"
        )


def validate_curriculum(
    phases: Sequence[Phase],
    sections: Sequence[Section],
    steps: Sequence[Step],
) -> ValidationReport:
    """Check references and ordering for a set of curriculum content.

    Returns:
        A report listing every problem found (empty if valid).
    """
    report = ValidationReport()

    _check_unique_ids("phase id", (p.id for p in phases), report)
    _check_unique_ids("phase slug", (p.slug for p in phases), report)
    _check_unique_ids("section id", (s.id for s in sections), report)
    _check_unique_ids("step id", (s.id for s in steps), report)

    phase_ids = {p.id for p in phases}
    section_ids = {s.id for s in sections}

    for section in sections:
        if section.phase_id not in phase_ids:
            report.errors.append(
                f"Section '{section.id}' references unknown phase '{section.phase_id}'"
            )
    for step in steps:
        if step.section_id not in section_ids:
            report.errors.append(
                f"Step '{step.id}' references unknown section '{step.section_id}'"
            )

    _check_orders("phases", [p.order for p in phases], report)

    sections_by_phase: dict[str, list[Section]] = defaultdict(list)
    for section in sections:
        sections_by_phase[section.phase_id].append(section)
    steps_by_section: dict[str, list[Step]] = defaultdict(list)
    for step in steps:
        steps_by_section[step.section_id].append(step)

    for phase in phases:
        children = sections_by_phase.get(phase.id, [])
        if not children:
            report.warnings.append(f"Phase '{phase.id}' has no sections")
            continue
        _check_orders(f"phase '{phase.id}'", [s.order for s in children], report)

    for section in sections:
        children_steps = steps_by_section.get(section.id, [])
        if not children_steps:
            report.warnings.append(f"Section '{section.id}' has no steps")
            continue
        _check_orders(
            f"section '{section.id}'", [s.order for s in children_steps], report
        )

    return report


def ensure_valid_curriculum(
    phases: Sequence[Phase],
    sections: Sequence[Section],
    steps: Sequence[Step],
    *,
    strict: bool = False,
) -> ValidationReport:
    """Validate content and raise on any error.

    Args:
        strict: Treat warnings (empty containers) as errors too.

    Raises:
        CurriculumValidationError: If the content is malformed.
    """
    report = validate_curriculum(phases, sections, steps)
    problems = report.errors + (report.warnings if strict else [])
    if problems:
        raise CurriculumValidationError(problems)
    for warning in report.warnings:
        logger.warning("Curriculum: %s", warning)
    return report
