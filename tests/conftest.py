from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from bajourney.models.curriculum import Phase, Section, Step
from bajourney.models.journey import JourneyState


@pytest.fixture
def anyio_backend() -> str:
    """Textual runs on asyncio only."""
    return "asyncio"


@pytest.fixture(autouse=True)
def isolate_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings and global state out of the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    yield


def boundary_content() -> tuple[list[Phase], list[Section], list[Step]]:
    """Phase A (Section 1: S1, S2; Section 2: S3), Phase B (Section 3: S4)."""
    phases = [
        Phase(id="A", slug="phase-a", title="Phase A", order=0),
        Phase(id="B", slug="phase-b", title="Phase B", order=1),
    ]
    sections = [
        Section(id="sec1", slug="sec-1", title="Section 1", order=0, phase_id="A"),
        Section(id="sec2", slug="sec-2", title="Section 2", order=1, phase_id="A"),
        Section(id="sec3", slug="sec-3", title="Section 3", order=0, phase_id="B"),
    ]
    steps = [
        Step(id="S1", title="Step 1", order=0, section_id="sec1"),
        Step(id="S2", title="Step 2", order=1, section_id="sec1"),
        Step(id="S3", title="Step 3", order=0, section_id="sec2"),
        Step(id="S4", title="Step 4", order=0, section_id="sec3"),
    ]
    return phases, sections, steps


@pytest.fixture
def boundary_state() -> JourneyState:
    """Fresh journey over the two-phase boundary curriculum."""
    phases, sections, steps = boundary_content()
    return JourneyState.new(phases, sections, steps, curriculum_id="boundary")


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty working directory the CLI resolves paths against."""
    path = tmp_path / "workspace"
    path.mkdir()
    monkeypatch.chdir(path)
    return path
