"""Rich labels for phases and steps."""

from rich.text import Text

from bajourney.models.curriculum import (
    Phase,
    PhaseProgress,
    PhaseStatus,
    ProgressStatus,
    Step,
)

# Status icons and colors for phases
PHASE_STATUS_ICONS = {
    PhaseStatus.COMPLETED: ("◉", "green"),
    PhaseStatus.CURRENT: ("◎", "bold cyan"),
    PhaseStatus.UNLOCKED: ("◌", "yellow"),
    PhaseStatus.LOCKED: ("○", "dim"),
}

STEP_STATUS_ICONS = {
    ProgressStatus.COMPLETED: ("✓", "green"),
    ProgressStatus.UNLOCKED: ("▸", "bold cyan"),
    ProgressStatus.LOCKED: ("·", "dim"),
}


def format_percentage(progress: PhaseProgress) -> str:
    """e.g. "2/4 · 50%"."""
    return f"{progress.completed}/{progress.total} · {progress.percentage}%"


def format_phase_label(
    phase: Phase,
    status: PhaseStatus,
    progress: PhaseProgress,
    is_current: bool = False,
) -> Text:
    """Format a phase row for the journey map.

    Args:
        phase: The phase to format.
        status: Its derived status.
        progress: Its step counts.
        is_current: Whether the learner's frontier is in this phase.

    Returns:
        Rich Text with a colored status icon.
    """
    icon, color = PHASE_STATUS_ICONS[status]
    result = Text()
    result.append(icon, style=color)
    result.append(" ")
    result.append(f"Phase {phase.order}: ", style="dim")
    result.append(phase.title, style="bold" if is_current else "")
    if progress.total:
        result.append(f"  ({format_percentage(progress)})", style="dim")
    if status is PhaseStatus.LOCKED:
        result.stylize("dim")
    return result


def format_step_label(
    step: Step, status: ProgressStatus, is_selected: bool = False
) -> Text:
    """Format a step row for a phase hero or step screen."""
    icon, color = STEP_STATUS_ICONS[status]
    result = Text()
    result.append(icon, style=color)
    result.append(" ")
    result.append(step.title, style="bold" if is_selected else "")
    result.append(f" [{step.step_type.value}]", style="dim")
    return result


def format_progress_dots(statuses: list[ProgressStatus], selected: int) -> Text:
    """Dots for a section's steps; the selected step is drawn wider."""
    result = Text()
    for index, status in enumerate(statuses):
        if index:
            result.append(" ")
        if index == selected:
            result.append("━━", style="bold cyan")
        elif status is ProgressStatus.COMPLETED:
            result.append("●", style="green")
        else:
            result.append("●", style="dim")
    return result
